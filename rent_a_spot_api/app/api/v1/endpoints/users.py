"""
User management endpoints.

Only the operations needed to own listings and receive reviews are
exposed.  Deleting a user does not remove their listings or reviews.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from rent_a_spot_api.app.api.v1.errors import server_error
from rent_a_spot_api.app.core.exceptions import NotFoundError, ValidationFailed
from rent_a_spot_api.app.schemas.common import MessageResponse
from rent_a_spot_api.app.schemas.user import UserCreate, UserRead
from rent_a_spot_api.app.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user: UserCreate) -> UserRead:
    """Register a new user."""
    try:
        return await UserService.create_user(user)
    except ValidationFailed as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise server_error("Failed to create user", e)


@router.get("", response_model=List[UserRead])
async def list_users() -> List[UserRead]:
    try:
        return await UserService.list_users()
    except Exception as e:
        raise server_error("Failed to fetch users", e)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str) -> UserRead:
    try:
        return await UserService.get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        raise server_error("Failed to fetch user", e)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str) -> MessageResponse:
    """Delete a user.  Their listings and reviews are kept."""
    try:
        await UserService.delete_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        raise server_error("Failed to delete user", e)
    return MessageResponse(message="User deleted successfully")
