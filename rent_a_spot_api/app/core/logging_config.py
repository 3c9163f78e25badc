"""
Logging setup for the Rent-a-Spot API.

``build_logging_config`` produces a ``logging.config.dictConfig``
mapping: a console handler, an optional file handler (``LOG_FILE``),
and the project's own loggers under ``rent_a_spot_api``.  With
``DEBUG`` enabled the project loggers drop to DEBUG while the root
logger stays at the configured level, so store-level debug lines show
up without third-party noise.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PROJECT_LOGGER = "rent_a_spot_api"


def build_logging_config(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> Dict[str, Any]:
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": handlers,
        "root": {"level": level, "handlers": list(handlers)},
        "loggers": {
            PROJECT_LOGGER: {"level": "DEBUG" if debug else level},
        },
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure logging once per process.

    A root logger that already has handlers (tests, repeated
    ``create_app`` calls) is left alone.
    """
    if logging.getLogger().handlers:
        return
    logging.config.dictConfig(build_logging_config(level, logfile, debug))
