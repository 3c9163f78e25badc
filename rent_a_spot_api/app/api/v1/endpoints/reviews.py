"""
API endpoints for owner reviews.

Reviews are submitted against an owner (a user who lists parking
spots).  Their ratings feed the ``owner_rating`` shown on every
listing of that owner.  Comments are escaped when returned to protect
clients from XSS.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from rent_a_spot_api.app.api.v1.errors import server_error
from rent_a_spot_api.app.core.db import MAX_RECORD_ID
from rent_a_spot_api.app.core.exceptions import NotFoundError
from rent_a_spot_api.app.schemas.common import MessageResponse
from rent_a_spot_api.app.schemas.review import ReviewCreate, ReviewCreated, ReviewRead
from rent_a_spot_api.app.services.review_service import ReviewService

router = APIRouter()


@router.post("", response_model=ReviewCreated, status_code=status.HTTP_201_CREATED)
async def create_review(data: ReviewCreate) -> ReviewCreated:
    try:
        review = await ReviewService.create_review(data)
    except Exception as e:
        raise server_error("Failed to create review", e)
    return ReviewCreated(message="Review created", review=review)


@router.get("", response_model=List[ReviewRead])
async def list_reviews(
    owner_id: Optional[int] = Query(None, ge=1, le=MAX_RECORD_ID, description="Only reviews about this owner"),
) -> List[ReviewRead]:
    try:
        return await ReviewService.list_reviews(owner_id=owner_id)
    except Exception as e:
        raise server_error("Failed to fetch reviews", e)


@router.get("/{review_id}", response_model=ReviewRead)
async def get_review(review_id: str) -> ReviewRead:
    try:
        return await ReviewService.get_review(review_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        raise server_error("Failed to fetch review", e)


@router.delete("/{review_id}", response_model=MessageResponse)
async def delete_review(review_id: str) -> MessageResponse:
    try:
        await ReviewService.delete_review(review_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        raise server_error("Failed to delete review", e)
    return MessageResponse(message="Review deleted successfully")
