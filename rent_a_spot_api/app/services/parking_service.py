"""
Business logic for parking spot listings.

Listings are stored in the ``parkings`` collection.  Reads return each
listing with its owner populated and the owner's mean review rating
attached (see ``rating_service``).  Writes validate the full record
with ``ParkingCreate``; updates merge the submitted fields onto the
stored record first.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..core import store
from ..core.exceptions import NotFoundError, ValidationFailed, describe_errors
from ..schemas.parking import ParkingCreate, ParkingRead, ParkingWithRating
from .rating_service import attach_owner_ratings

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "address", "city", "lat", "long", "user_id")


class ParkingService:
    """Service for managing parking spot listings."""

    @classmethod
    async def list_parkings(cls, user_id: Optional[int] = None) -> List[ParkingWithRating]:
        """Return listings (optionally for one owner) with ``owner_rating``.

        The listing read and the review read are independent and run
        concurrently; aggregation starts once both have completed.
        """
        filter: Dict[str, Any] = {"user_id": user_id} if user_id is not None else {}
        listings, reviews = await asyncio.gather(
            asyncio.to_thread(store.parkings.find_all_with_owner, filter),
            asyncio.to_thread(store.reviews.find_all),
        )
        enriched = attach_owner_ratings(listings, reviews)
        logger.info("Found %s parking spots", len(enriched))
        return [ParkingWithRating(**item) for item in enriched]

    @classmethod
    async def create_parking(cls, data: ParkingCreate) -> ParkingRead:
        """Persist a validated listing and return the stored record.

        The owner reference is not checked against the users
        collection.
        """
        record = await asyncio.to_thread(store.parkings.create, data.model_dump())
        logger.info("Parking %s created for user %s", record["id"], record["user_id"])
        return ParkingRead(**record)

    @classmethod
    async def update_parking(cls, parking_id: Any, fields: Dict[str, Any]) -> ParkingRead:
        """Merge ``fields`` onto the stored listing, re-validate and save.

        Raises ``NotFoundError`` when the listing does not exist and
        ``ValidationFailed`` when the merged record is invalid; nothing
        is written in either case.
        """
        record_id = store.coerce_id(parking_id, "Parking")
        existing = await asyncio.to_thread(store.parkings.find_by_id, record_id)
        if existing is None:
            raise NotFoundError("Parking not found")
        merged = {key: existing[key] for key in EDITABLE_FIELDS}
        merged.update({k: v for k, v in fields.items() if k in EDITABLE_FIELDS})
        try:
            validated = ParkingCreate(**merged)
        except ValidationError as e:
            raise ValidationFailed(describe_errors(e.errors())) from e
        updated = await asyncio.to_thread(
            store.parkings.update_by_id, record_id, validated.model_dump()
        )
        if updated is None:
            # Deleted between the read and the write.
            raise NotFoundError("Parking not found")
        logger.info("Parking %s updated", record_id)
        return ParkingRead(**updated)

    @classmethod
    async def delete_parking(cls, parking_id: Any) -> None:
        """Delete a listing.  Reviews of its owner are left untouched."""
        record_id = store.coerce_id(parking_id, "Parking")
        deleted = await asyncio.to_thread(store.parkings.delete_by_id, record_id)
        if deleted is None:
            raise NotFoundError("Parking not found")
        logger.info("Parking %s deleted", record_id)
