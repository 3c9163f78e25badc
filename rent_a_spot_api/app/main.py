"""
Main entrypoint for the Rent-a-Spot API.

This module assembles the FastAPI application, sets up logging, CORS
and error rendering, and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn rent_a_spot_api.app.main:app --reload

or through ``run.py`` in the project root.

Every error response has an ``error`` key.  Handlers may pass a dict
as ``HTTPException.detail`` to add fields such as ``details``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .core.db import init_db
from .core.exceptions import describe_errors
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router

logger = logging.getLogger(__name__)


def available_routes(app: FastAPI) -> list:
    """Paths of every API route, listed in 404 responses."""
    return sorted({route.path for route in app.routes if isinstance(route, APIRoute)})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": exc.detail}
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        logger.info("404 - Route not found: %s %s", request.method, request.url.path)
        content = {
            "error": "Not Found",
            "method": request.method,
            "url": request.url.path,
            "availableRoutes": available_routes(request.app),
        }
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_errors(exc.errors())
    logger.info("Validation error on %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the modules below
    # can log during setup.
    setup_logging(settings.log_level, settings.log_file, debug=settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Migrations must succeed before requests are served; an error
        # here aborts startup.
        init_db()
        logger.info("%s started", settings.project_name)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
