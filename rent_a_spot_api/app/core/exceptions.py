"""
Exceptions raised by the service layer.

Endpoints translate these into HTTP responses: ``NotFoundError``
becomes 404 and ``ValidationFailed`` becomes 400.  Anything else that
escapes a service is reported as a 500 with the error detail attached.
"""


class RentASpotError(Exception):
    """Base class for all service errors."""


class NotFoundError(RentASpotError, LookupError):
    """The requested record does not exist or the identifier is malformed."""


class ValidationFailed(RentASpotError, ValueError):
    """A payload failed validation; the message is shown to the caller."""


def describe_errors(errors) -> str:
    """Human-readable message for the first error pydantic reported.

    ``errors`` is the list returned by ``ValidationError.errors()`` or
    ``RequestValidationError.errors()``.
    """
    if not errors:
        return "Invalid request"
    error = errors[0]
    field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "is invalid")
    if error.get("type") == "missing":
        message = "is required"
    return f"{field}: {message}" if field else message
