"""
Error taxonomy for Chirpy and the handlers that render it.

Every error raised inside a request ends up as an HTTP status plus a
structured body. JSON endpoints answer with {"error": "<message>"}; the
/admin endpoints answer in plaintext.
"""

import logging
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response

logger = logging.getLogger(__name__)

ADMIN_PREFIX = "/admin"


class ChirpyError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedRequest(ChirpyError):
    """Request body could not be decoded into the expected shape."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Couldn't decode parameters"


class ContentTooLong(ChirpyError):
    """Chirp body exceeds the length limit."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Chirp is too long"


class InvalidIdentifier(ChirpyError):
    """Path parameter is not a valid identifier."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid chirp ID"


class NotFound(ChirpyError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StorageFailure(ChirpyError):
    """
    Any storage error other than a lookup miss.

    The message is generic on purpose; the underlying error is logged where
    it is caught and never sent to the client.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Something went wrong"


class Forbidden(ChirpyError):
    """Destructive admin action attempted outside development mode."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Reset is only allowed in dev environment"


def _render(request: Request, status_code: int, message: str) -> Response:
    if request.url.path.startswith(ADMIN_PREFIX):
        return PlainTextResponse(message, status_code=status_code)
    return JSONResponse(status_code=status_code, content={"error": message})


async def chirpy_exception_handler(request: Request, exc: ChirpyError) -> Response:
    """Convert a ChirpyError into its HTTP response."""
    return _render(request, exc.status_code, exc.message)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    """
    Body decoding failures (invalid JSON, missing or mistyped fields).

    FastAPI would answer 422 with its own layout; Chirpy reports them as
    MalformedRequest instead.
    """
    logger.debug("Rejected request body for %s: %s", request.url.path, exc.errors())
    error = MalformedRequest()
    return _render(request, error.status_code, error.message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Last resort for anything that escaped a handler."""
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return _render(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong")
