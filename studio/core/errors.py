"""
API error types. Every error response body is ``{"error": "<message>"}``.
"""

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class BadRequest(HTTPException):
    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


class AuthenticationMissing(HTTPException):
    """No token, or a token that failed verification."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=message)


class ResourceNotFound(HTTPException):
    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=message)


# Postgres invalid_text_representation, e.g. a malformed uuid in an id filter
INVALID_INPUT_CODE = "22P02"


def is_invalid_input(exc: Exception) -> bool:
    return getattr(exc, "code", None) == INVALID_INPUT_CODE


class UpstreamFailure(HTTPException):
    """Database or identity provider call failed; carries the underlying message when there is one."""

    def __init__(self, message: str, fallback: str = "Upstream service error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message or fallback)


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    logger.info("Rejected request to %s: %s", request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})
