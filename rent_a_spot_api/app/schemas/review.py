"""
Pydantic schemas for owner reviews.

A review rates a user in their role as a parking owner.  It is tied to
the owner, not to a particular listing, so every listing of that owner
shares the same rating.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..core.db import MAX_RECORD_ID


class ReviewCreate(BaseModel):
    """Schema for creating a new review."""

    owner_id: int = Field(..., ge=1, le=MAX_RECORD_ID, description="Identifier of the owner being reviewed")
    user_id: Optional[int] = Field(None, ge=1, le=MAX_RECORD_ID, description="Identifier of the reviewer")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: Optional[str] = Field(None, description="Optional textual comment")

    @field_validator("comment")
    @classmethod
    def sanitize_comment(cls, v: Optional[str]) -> Optional[str]:
        """Trim whitespace from the comment and enforce a maximum length."""
        if v is None:
            return None
        v = v.strip()
        if len(v) > 1000:
            raise ValueError("Comment must be 1000 characters or fewer")
        return v


class ReviewRead(BaseModel):
    """Schema for reading a review from the API."""

    id: int
    owner_id: int
    user_id: Optional[int]
    rating: int
    comment: Optional[str]
    created_at: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class ReviewCreated(BaseModel):
    message: str
    review: ReviewRead
