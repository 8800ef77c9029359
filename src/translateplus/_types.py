"""Response types for the TranslatePlus SDK.

All types are plain dataclasses with zero extra dependencies beyond the stdlib.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


# ---------------------------------------------------------------------------
# Text translation
# ---------------------------------------------------------------------------


@dataclass
class Translation:
    """Result of a single-text translate call."""

    text: str
    translation: str
    source: str
    target: str
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class BatchTranslationItem:
    """One entry of a batch translation; failed items carry ``error``."""

    text: str
    translation: str
    source: str
    target: str
    success: bool
    error: Optional[str] = None


@dataclass
class BatchTranslation:
    """Result of a batch translate call."""

    translations: List[BatchTranslationItem]
    total: int
    successful: int
    failed: int


@dataclass
class TranslationFailure:
    """Placed in a :meth:`translate_concurrent` slot whose item failed."""

    text: str
    error: str
    kind: Optional[str] = None
    status_code: Optional[int] = None


@dataclass
class HTMLTranslation:
    html: str


@dataclass
class EmailTranslation:
    subject: str
    html_body: str


@dataclass
class SubtitleTranslation:
    format: str
    content: str


# ---------------------------------------------------------------------------
# Languages
# ---------------------------------------------------------------------------


@dataclass
class LanguageDetection:
    """Detected language code and the service's confidence in it."""

    language: str
    confidence: float


@dataclass
class SupportedLanguages:
    """Mapping of language code to display name (``{"fr": "French"}``)."""

    languages: Dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


@dataclass
class AccountSummary:
    """Credits, plan and limits of the calling account.

    Keys the SDK does not model are preserved in ``extra``.
    """

    credits_remaining: int
    total_credits: int
    plan_name: str
    concurrency_limit: int
    extra: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# i18n jobs
# ---------------------------------------------------------------------------


class JobStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


@dataclass
class I18nJob:
    """Acknowledgement returned when an i18n job is created."""

    job_id: str
    status: Union[JobStatus, str]
    message: Optional[str] = None


@dataclass
class I18nJobStatus:
    """Current state of an i18n job."""

    id: str
    status: Union[JobStatus, str]
    source_language: str
    target_languages: List[str] = field(default_factory=list)
    progress: Optional[float] = None
    error: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


@dataclass
class I18nJobList:
    """One page of i18n jobs."""

    count: int
    page: int
    page_size: int
    total_pages: int
    results: List[I18nJobStatus] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Parsing helpers (used by _client.py)
# ---------------------------------------------------------------------------


_ACCOUNT_FIELDS = ("credits_remaining", "total_credits", "plan_name", "concurrency_limit")


def _parse_job_status(value: Any) -> Union[JobStatus, str]:
    try:
        return JobStatus(value)
    except ValueError:
        return str(value) if value is not None else ""


def _parse_translation(data: Dict[str, Any]) -> Translation:
    raw = data.get("translations") or {}
    return Translation(
        text=raw.get("text", ""),
        translation=raw.get("translation", ""),
        source=raw.get("source", ""),
        target=raw.get("target", ""),
        details=data.get("details") or {},
    )


def _parse_batch(data: Dict[str, Any]) -> BatchTranslation:
    items = [
        BatchTranslationItem(
            text=t.get("text", ""),
            translation=t.get("translation", ""),
            source=t.get("source", ""),
            target=t.get("target", ""),
            success=t.get("success", False),
            error=t.get("error"),
        )
        for t in data.get("translations", [])
    ]
    successful = data.get("successful", sum(1 for i in items if i.success))
    return BatchTranslation(
        translations=items,
        total=data.get("total", len(items)),
        successful=successful,
        failed=data.get("failed", len(items) - successful),
    )


def _parse_detection(data: Dict[str, Any]) -> LanguageDetection:
    raw = data.get("language_detection") or {}
    return LanguageDetection(
        language=raw.get("language", ""),
        confidence=raw.get("confidence", 0.0),
    )


def _parse_account(data: Dict[str, Any]) -> AccountSummary:
    return AccountSummary(
        credits_remaining=data.get("credits_remaining", 0),
        total_credits=data.get("total_credits", 0),
        plan_name=data.get("plan_name", ""),
        concurrency_limit=data.get("concurrency_limit", 0),
        extra={k: v for k, v in data.items() if k not in _ACCOUNT_FIELDS},
    )


def _parse_job(data: Dict[str, Any]) -> I18nJob:
    return I18nJob(
        job_id=str(data.get("job_id", "")),
        status=_parse_job_status(data.get("status")),
        message=data.get("message"),
    )


def _parse_job_status_response(data: Dict[str, Any]) -> I18nJobStatus:
    return I18nJobStatus(
        id=str(data.get("id", "")),
        status=_parse_job_status(data.get("status")),
        source_language=data.get("source_language", ""),
        target_languages=list(data.get("target_languages", [])),
        progress=data.get("progress"),
        error=data.get("error"),
        created_at=data.get("created_at"),
        updated_at=data.get("updated_at"),
    )


def _parse_job_list(data: Dict[str, Any], page: int, page_size: int) -> I18nJobList:
    results = [_parse_job_status_response(j) for j in data.get("results", [])]
    return I18nJobList(
        count=data.get("count", len(results)),
        page=data.get("page", page),
        page_size=data.get("page_size", page_size),
        total_pages=data.get("total_pages", 1),
        results=results,
    )
