"""
Business logic for users.

Users are the owners referenced by listings and reviews.  Removing a
user does not cascade: their listings stay and are reported with no
owner and an ``owner_rating`` of 0.
"""

import asyncio
import logging
import sqlite3
from typing import Any, List

from ..core import store
from ..core.exceptions import NotFoundError, ValidationFailed
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Service for working with users."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Create a new user.  E-mail addresses must be unique."""
        logger.info("Registering user %s", data.email)
        try:
            record = await asyncio.to_thread(store.users.create, data.model_dump())
        except sqlite3.IntegrityError as e:
            raise ValidationFailed(f"User with email {data.email} already exists") from e
        return UserRead(**record)

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        records = await asyncio.to_thread(store.users.find_all)
        return [UserRead(**record) for record in records]

    @classmethod
    async def get_user(cls, user_id: Any) -> UserRead:
        record_id = store.coerce_id(user_id, "User")
        record = await asyncio.to_thread(store.users.find_by_id, record_id)
        if record is None:
            raise NotFoundError("User not found")
        return UserRead(**record)

    @classmethod
    async def delete_user(cls, user_id: Any) -> None:
        record_id = store.coerce_id(user_id, "User")
        deleted = await asyncio.to_thread(store.users.delete_by_id, record_id)
        if deleted is None:
            raise NotFoundError("User not found")
        logger.info("User %s deleted; listings and reviews are kept", record_id)
