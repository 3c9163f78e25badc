"""
Pydantic models for user data.

Users own parking spots and are the subject of reviews.  Only the
fields needed to identify an owner are modelled here.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class UserCreate(BaseModel):
    """Schema for registering a user."""

    name: str = Field(..., example="Mona Adel")
    email: str = Field(..., example="mona@example.com")

    @field_validator("name", "email")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class OwnerSummary(BaseModel):
    """The owner fields embedded into listings."""

    id: int
    name: str
    email: str


class UserRead(OwnerSummary):
    """Schema for reading a user from the API."""

    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }
