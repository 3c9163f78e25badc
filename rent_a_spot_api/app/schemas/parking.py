"""
Pydantic models for parking spot listings.

``ParkingCreate`` holds the validation rules for a complete listing:
non-empty text fields, coordinates within their geographic ranges and
an owner reference.  Updates are partial (``ParkingUpdate``); the
service merges them onto the stored record and validates the result
with ``ParkingCreate`` again.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from ..core.db import MAX_RECORD_ID
from .user import OwnerSummary


def reject_bool(v: Any) -> Any:
    # JSON true/false would otherwise coerce to 1.0 / 0.0
    if isinstance(v, bool):
        raise ValueError("must be a number, not a boolean")
    return v


class ParkingBase(BaseModel):
    name: str = Field(..., example="Downtown Parking")
    address: str = Field(..., example="12 Tahrir Square")
    city: str = Field(..., example="Cairo")
    lat: float = Field(..., ge=-90, le=90, example=30.0444)
    long: float = Field(..., ge=-180, le=180, example=31.2357)
    user_id: int = Field(..., ge=1, le=MAX_RECORD_ID, description="Identifier of the owning user")

    @field_validator("lat", "long", "user_id", mode="before")
    @classmethod
    def numbers_only(cls, v: Any) -> Any:
        return reject_bool(v)


class ParkingCreate(ParkingBase):
    """Schema for creating a parking spot.

    Coordinates may be sent as numbers or numeric strings.
    """

    @field_validator("name", "address", "city")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class ParkingUpdate(BaseModel):
    """Schema for updating a parking spot.

    All fields are optional; only provided fields are merged onto the
    stored record.  Range checks run on the merged result.
    """

    model_config = {
        "extra": "forbid",
    }

    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    lat: Optional[float] = None
    long: Optional[float] = None
    user_id: Optional[int] = None

    @field_validator("lat", "long", "user_id", mode="before")
    @classmethod
    def numbers_only(cls, v: Any) -> Any:
        return reject_bool(v)


class ParkingRead(ParkingBase):
    """Schema for reading a stored parking spot."""

    id: int
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }

    @computed_field
    @property
    def full_address(self) -> str:
        return f"{self.address}, {self.city}"


class ParkingWithRating(ParkingRead):
    """A listing enriched with its owner and the owner's mean review rating."""

    owner: Optional[OwnerSummary] = None
    owner_rating: float = 0


class ParkingCreated(BaseModel):
    message: str
    parking: ParkingRead
