"""
Service status endpoints.

``/test`` answers without touching the database, ``/health`` and
``/parking-test`` report the live database status and ``/`` is a short
greeting.  None of them require authentication.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from rent_a_spot_api.app.core.config import settings
from rent_a_spot_api.app.core.db import check_connection

router = APIRouter()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/test")
async def test() -> Dict[str, Any]:
    return {
        "message": "Basic test endpoint working",
        "timestamp": _now(),
        "port": settings.port,
    }


@router.get("/health")
async def health() -> Dict[str, Any]:
    """Report that the API is running and whether the database answers."""
    return {
        "status": "OK",
        "message": f"{settings.project_name} is running",
        "timestamp": _now(),
        "port": settings.port,
        "database": check_connection().value,
    }


@router.get("/")
async def root() -> Dict[str, Any]:
    return {
        "message": f"Hello world! {settings.project_name} is running.",
        "dbStatus": check_connection().value,
    }


@router.get("/parking-test")
async def parking_test() -> Dict[str, Any]:
    """Check that the listing routes are mounted, with the database status."""
    return {
        "message": "Parking route test endpoint working",
        "timestamp": _now(),
        "dbStatus": check_connection().value,
    }
