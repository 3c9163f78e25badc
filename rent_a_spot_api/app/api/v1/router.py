"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers (parking spots, reviews,
users and service checks).  The paths are kept short and singular
(``/parking``, ``/review``, ``/user``) because existing web clients
call them that way.
"""

from fastapi import APIRouter

from .endpoints import parking, reviews, service, users

router = APIRouter()

router.include_router(service.router, tags=["service"])
router.include_router(parking.router, prefix="/parking", tags=["parking"])
router.include_router(reviews.router, prefix="/review", tags=["reviews"])
router.include_router(users.router, prefix="/user", tags=["users"])
