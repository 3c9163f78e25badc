"""Entry point for serving the Rent-a-Spot API.

Host and port are read from ``HOST`` and ``PORT`` (defaults
``0.0.0.0`` and ``1337``); all other configuration is described in
``rent_a_spot_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from rent_a_spot_api.app.core.config import settings
from rent_a_spot_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Starting %s on %s:%s", settings.project_name, settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
