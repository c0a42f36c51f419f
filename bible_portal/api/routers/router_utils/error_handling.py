"""
Service error handling for API endpoints.

Provides a decorator that turns domain exceptions raised by services into
JSON error responses with distinguishable status codes.

Dependencies: fastapi, bible_portal.core.exceptions
System role: Uniform error mapping for lexicon endpoints
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from bible_portal.core.exceptions import (
    BiblePortalException,
    GatewayQuotaError,
    GatewayRateLimitError,
    LexiconInputError,
    LexiconNotFoundError,
    NoEntriesParsedError,
    ValidationError,
)
from bible_portal.models.common import ErrorResponse

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_STATUS_BY_EXCEPTION: tuple[tuple[type[BiblePortalException], int], ...] = (
    (LexiconNotFoundError, status.HTTP_404_NOT_FOUND),
    (GatewayRateLimitError, status.HTTP_429_TOO_MANY_REQUESTS),
    (GatewayQuotaError, status.HTTP_402_PAYMENT_REQUIRED),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NoEntriesParsedError, status.HTTP_400_BAD_REQUEST),
    (LexiconInputError, status.HTTP_400_BAD_REQUEST),
)


def status_for(error: BiblePortalException) -> int:
    """HTTP status for a domain exception (500 when unmapped)."""
    for exc_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(error, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str, details: dict | None = None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def handle_service_errors(func: F) -> F:
    """
    Decorator mapping service exceptions to `{"success": false, "error": ...}`.

    This centralizes:
    - Logging of errors with their details
    - Mapping domain exceptions to HTTP status codes
    - A uniform error body across lexicon endpoints
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except BiblePortalException as e:
            status_code = status_for(e)
            log = logger.error if status_code >= 500 else logger.warning
            log(
                "Service error",
                extra={
                    "error_type": type(e).__name__,
                    "error": e.message,
                    "status_code": status_code,
                    **{f"detail_{key}": value for key, value in e.details.items()},
                },
            )
            return error_response(status_code, e.message, e.details)

        except Exception as e:
            logger.exception(
                "Unexpected failure in service operation",
                extra={"error": str(e)},
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e) or "Unknown error")

    return wrapper  # type: ignore
