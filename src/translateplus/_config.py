"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ._exceptions import ValidationError

DEFAULT_BASE_URL = "https://api.translateplus.io"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_MAX_CONCURRENT = 5

API_KEY_ENV = "TRANSLATEPLUS_API_KEY"
API_URL_ENV = "TRANSLATEPLUS_API_URL"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings shared by :class:`TranslatePlus` and
    :class:`AsyncTranslatePlus`.

    Attributes:
        api_key: TranslatePlus API key, sent as ``X-API-KEY``.
        base_url: API origin without a trailing slash.
        timeout: Per-attempt timeout in seconds.
        max_retries: Retries after the first attempt for transient failures.
        max_concurrent: Upper bound on in-flight requests for one client.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    max_concurrent: int = DEFAULT_MAX_CONCURRENT

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValidationError("API key is required")
        if self.timeout <= 0:
            raise ValidationError("timeout must be greater than 0")
        if self.max_retries < 0:
            raise ValidationError("max_retries cannot be negative")
        if self.max_concurrent < 1:
            raise ValidationError("max_concurrent must be at least 1")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def attempts(self) -> int:
        return self.max_retries + 1

    @classmethod
    def from_args(
        cls,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        max_concurrent: int = DEFAULT_MAX_CONCURRENT,
    ) -> "ClientConfig":
        """Build a config, falling back to the environment for key and URL."""
        return cls(
            api_key=_resolve_api_key(api_key),
            base_url=base_url or os.environ.get(API_URL_ENV) or DEFAULT_BASE_URL,
            timeout=timeout,
            max_retries=max_retries,
            max_concurrent=max_concurrent,
        )


def _resolve_api_key(api_key: Optional[str]) -> str:
    key = api_key or os.environ.get(API_KEY_ENV)
    if not key:
        raise ValidationError(
            f"API key is required. Pass api_key= or set the {API_KEY_ENV} "
            "environment variable."
        )
    return key
