"""
Business logic for reviews.

Reviews rate a user in their role as a parking owner and are stored in
the ``reviews`` collection.  They are not linked to the owner's
listings or to the users collection by any constraint: deleting a user
or a listing leaves the reviews in place.
"""

import asyncio
import html
import logging
from typing import Any, List, Optional

from ..core import store
from ..core.exceptions import NotFoundError
from ..schemas.review import ReviewCreate, ReviewRead

logger = logging.getLogger(__name__)


def _to_read(record: dict) -> ReviewRead:
    # Escape comment when returning
    comment = html.escape(record["comment"]) if record["comment"] is not None else None
    return ReviewRead(
        id=record["id"],
        owner_id=record["owner_id"],
        user_id=record["user_id"],
        rating=record["rating"],
        comment=comment,
        created_at=record["created_at"],
    )


class ReviewService:
    """Service for handling owner reviews."""

    @classmethod
    async def create_review(cls, data: ReviewCreate) -> ReviewRead:
        record = await asyncio.to_thread(store.reviews.create, data.model_dump())
        logger.info(
            "User %s rated owner %s with %s", data.user_id, data.owner_id, data.rating
        )
        return _to_read(record)

    @classmethod
    async def list_reviews(cls, owner_id: Optional[int] = None) -> List[ReviewRead]:
        """List reviews, optionally only those about one owner."""
        filter = {"owner_id": owner_id} if owner_id is not None else None
        records = await asyncio.to_thread(store.reviews.find_all, filter)
        return [_to_read(record) for record in records]

    @classmethod
    async def get_review(cls, review_id: Any) -> ReviewRead:
        record_id = store.coerce_id(review_id, "Review")
        record = await asyncio.to_thread(store.reviews.find_by_id, record_id)
        if record is None:
            raise NotFoundError("Review not found")
        return _to_read(record)

    @classmethod
    async def delete_review(cls, review_id: Any) -> None:
        record_id = store.coerce_id(review_id, "Review")
        deleted = await asyncio.to_thread(store.reviews.delete_by_id, record_id)
        if deleted is None:
            raise NotFoundError("Review not found")
        logger.info("Review %s deleted", record_id)
