"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (parking spots, reviews, users) exposes a
router defined in ``api/v1/endpoints`` and keeps its business logic in
``services``.
"""

from .main import app  # noqa: F401
