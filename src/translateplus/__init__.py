"""TranslatePlus Python SDK: text, HTML, email, subtitle and i18n file translation.

Usage::

    from translateplus import TranslatePlus

    client = TranslatePlus()  # reads TRANSLATEPLUS_API_KEY from env
    result = client.translate("Hello world", target="fr")
    print(result.translation)
"""

from ._version import __version__
from ._config import ClientConfig, DEFAULT_BASE_URL
from ._client import TranslatePlus, AsyncTranslatePlus, FileInput, RequestSpec
from ._exceptions import (
    ErrorKind,
    TranslatePlusError,
    APIError,
    AuthenticationError,
    InsufficientCreditsError,
    RateLimitError,
    ValidationError,
)
from ._types import (
    Translation,
    TranslationFailure,
    BatchTranslation,
    BatchTranslationItem,
    HTMLTranslation,
    EmailTranslation,
    SubtitleTranslation,
    LanguageDetection,
    SupportedLanguages,
    AccountSummary,
    JobStatus,
    I18nJob,
    I18nJobStatus,
    I18nJobList,
)

__all__ = [
    "__version__",
    # Clients
    "TranslatePlus",
    "AsyncTranslatePlus",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "FileInput",
    "RequestSpec",
    # Exceptions
    "ErrorKind",
    "TranslatePlusError",
    "APIError",
    "AuthenticationError",
    "InsufficientCreditsError",
    "RateLimitError",
    "ValidationError",
    # Response types
    "Translation",
    "TranslationFailure",
    "BatchTranslation",
    "BatchTranslationItem",
    "HTMLTranslation",
    "EmailTranslation",
    "SubtitleTranslation",
    "LanguageDetection",
    "SupportedLanguages",
    "AccountSummary",
    "JobStatus",
    "I18nJob",
    "I18nJobStatus",
    "I18nJobList",
]
