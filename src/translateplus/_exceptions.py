"""TranslatePlus SDK exception hierarchy.

Every exception carries a ``kind`` discriminant so callers can branch
without ``isinstance`` chains::

    try:
        client.translate("Hello", target="fr")
    except TranslatePlusError as exc:
        match exc.kind:
            case ErrorKind.RATE_LIMIT:
                ...
            case ErrorKind.INSUFFICIENT_CREDITS:
                ...
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Category of a TranslatePlus failure."""

    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    INSUFFICIENT_CREDITS = "insufficient_credits"
    RATE_LIMIT = "rate_limit"
    API = "api"

    def __str__(self) -> str:
        return self.value


class TranslatePlusError(Exception):
    """Base exception for all TranslatePlus SDK errors."""

    kind: ErrorKind = ErrorKind.API

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class APIError(TranslatePlusError):
    """The API answered with an error status, or the request could not be
    completed after exhausting retries."""


class AuthenticationError(APIError):
    """API key rejected (HTTP 401 / 403)."""

    kind = ErrorKind.AUTHENTICATION


class InsufficientCreditsError(APIError):
    """Not enough credits for the operation (HTTP 402)."""

    kind = ErrorKind.INSUFFICIENT_CREDITS


class RateLimitError(APIError):
    """Too many requests (HTTP 429), still failing on the last attempt."""

    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[Any] = None,
        retry_after: Optional[float] = None,
    ) -> None:
        super().__init__(message, status_code=status_code, body=body)
        self.retry_after = retry_after


class ValidationError(TranslatePlusError):
    """Invalid input, detected before any request is sent."""

    kind = ErrorKind.VALIDATION
