"""
Error helpers shared by the v1 routers.

Unexpected failures are logged with their traceback and reported as
500 with the operation that failed and the exception text.
"""

import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


def server_error(message: str, e: Exception) -> HTTPException:
    logger.exception("%s: %s", message, e)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": message, "details": str(e)},
    )
