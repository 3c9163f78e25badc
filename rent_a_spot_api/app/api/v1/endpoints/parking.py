"""
Parking spot endpoints for API v1.

``GET /parking`` returns every listing (or one owner's listings with
``?user_id=``) together with the owner's average review rating.  The
write routes create, partially update and delete single listings.
Validation problems are reported as 400, unknown ids as 404 and
anything unexpected as 500 with the error detail included.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from rent_a_spot_api.app.api.v1.errors import server_error
from rent_a_spot_api.app.core.db import MAX_RECORD_ID
from rent_a_spot_api.app.core.exceptions import NotFoundError, ValidationFailed
from rent_a_spot_api.app.schemas.common import MessageResponse
from rent_a_spot_api.app.schemas.parking import (
    ParkingCreate,
    ParkingCreated,
    ParkingUpdate,
    ParkingWithRating,
)
from rent_a_spot_api.app.services.parking_service import ParkingService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[ParkingWithRating])
async def list_parkings(
    user_id: Optional[int] = Query(None, ge=1, le=MAX_RECORD_ID, description="Only listings of this owner"),
) -> List[ParkingWithRating]:
    """List parking spots with ``owner_rating`` attached.

    ``owner_rating`` is the mean of all review ratings about the
    listing's owner, or 0 when the owner has no reviews or no longer
    exists.
    """
    logger.info("GET /parking called with user_id=%s", user_id)
    try:
        return await ParkingService.list_parkings(user_id=user_id)
    except Exception as e:
        raise server_error("Failed to fetch parking spots", e)


@router.post("", response_model=ParkingCreated, status_code=status.HTTP_201_CREATED)
async def create_parking(data: ParkingCreate) -> ParkingCreated:
    """Create a parking spot.

    All fields are required; ``lat`` must lie in [-90, 90] and ``long``
    in [-180, 180].  Invalid payloads never reach the database.
    """
    try:
        parking = await ParkingService.create_parking(data)
    except Exception as e:
        raise server_error("Failed to create parking", e)
    return ParkingCreated(message="Parking created", parking=parking)


@router.put("/{parking_id}", response_model=MessageResponse)
async def update_parking(parking_id: str, updates: ParkingUpdate) -> MessageResponse:
    """Update an existing parking spot.

    Partial updates are supported; unspecified fields keep their
    stored values and the merged listing is validated again.
    """
    try:
        await ParkingService.update_parking(parking_id, updates.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationFailed as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise server_error("Failed to update parking", e)
    return MessageResponse(message="Parking updated successfully")


@router.delete("/{parking_id}", response_model=MessageResponse)
async def delete_parking(parking_id: str) -> MessageResponse:
    """Delete a parking spot.  Returns 404 if it does not exist."""
    try:
        await ParkingService.delete_parking(parking_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        raise server_error("Failed to delete parking", e)
    return MessageResponse(message="Parking deleted successfully")
