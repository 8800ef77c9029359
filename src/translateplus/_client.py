"""Synchronous and asynchronous TranslatePlus API clients."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import mimetypes
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import (
    Any,
    AsyncIterator,
    BinaryIO,
    Dict,
    Iterator,
    List,
    Optional,
    Sequence,
    Union,
)
from urllib.parse import quote

import httpx

from ._config import (
    DEFAULT_MAX_CONCURRENT,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ClientConfig,
)
from ._exceptions import (
    APIError,
    AuthenticationError,
    InsufficientCreditsError,
    RateLimitError,
    TranslatePlusError,
    ValidationError,
)
from ._types import (
    AccountSummary,
    BatchTranslation,
    EmailTranslation,
    HTMLTranslation,
    I18nJob,
    I18nJobList,
    I18nJobStatus,
    LanguageDetection,
    SubtitleTranslation,
    SupportedLanguages,
    Translation,
    TranslationFailure,
    _parse_account,
    _parse_batch,
    _parse_detection,
    _parse_job,
    _parse_job_list,
    _parse_job_status_response,
    _parse_translation,
)
from ._version import __version__

logger = logging.getLogger(__name__)

FileInput = Union[str, Path, bytes, BinaryIO]

MAX_BATCH_TEXTS = 100
SUBTITLE_FORMATS = ("srt", "vtt")
DEFAULT_RETRY_AFTER = 2.0


def _default_headers(api_key: str) -> Dict[str, str]:
    return {
        "X-API-KEY": api_key,
        "User-Agent": f"translateplus-python/{__version__}",
    }


def _prepare_file(file_input: FileInput) -> tuple:
    if isinstance(file_input, (str, Path)):
        path = Path(file_input)
        data = path.read_bytes()
        ct = mimetypes.guess_type(str(path))[0] or "application/octet-stream"
        return (path.name, data, ct)
    elif isinstance(file_input, (bytes, bytearray)):
        return ("file", bytes(file_input), "application/octet-stream")
    else:
        data = file_input.read()
        name = getattr(file_input, "name", None)
        if not isinstance(name, str):
            name = "file"
        ct = mimetypes.guess_type(name)[0] or "application/octet-stream"
        return (Path(name).name, data, ct)


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# ---------------------------------------------------------------------------
# Request execution
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RequestSpec:
    """One logical API call: method, path and what to send."""

    method: str
    path: str
    body: Optional[Dict[str, Any]] = None
    files: Optional[Dict[str, FileInput]] = None
    params: Optional[Dict[str, Any]] = None

    def encode(self) -> Dict[str, Any]:
        """Build the ``httpx`` request keyword arguments.

        With files attached the body is sent as multipart form data and
        httpx derives the boundary ``Content-Type``; otherwise the body is
        JSON. Files are read here, once, so every retry re-sends the same
        bytes.
        """
        kwargs: Dict[str, Any] = {}
        if self.params:
            kwargs["params"] = {k: _form_value(v) for k, v in self.params.items()}
        if self.files:
            kwargs["files"] = {name: _prepare_file(f) for name, f in self.files.items()}
            if self.body:
                kwargs["data"] = {
                    k: _form_value(v) for k, v in self.body.items() if v is not None
                }
        else:
            kwargs["headers"] = {"Content-Type": "application/json"}
            if self.body is not None:
                kwargs["json"] = self.body
        return kwargs


def _retry_after(resp: httpx.Response) -> float:
    try:
        seconds = float(resp.headers.get("Retry-After"))
    except (TypeError, ValueError):
        return DEFAULT_RETRY_AFTER
    return seconds if seconds >= 0 else DEFAULT_RETRY_AFTER


def _retry_delay(
    spec: RequestSpec,
    attempt: int,
    reason: str,
    resp: Optional[httpx.Response] = None,
) -> float:
    """Seconds to wait before the attempt after ``attempt`` (0-based)."""
    delay = float(2 ** attempt)
    if resp is not None:
        delay = min(_retry_after(resp), delay)
    logger.warning(
        "%s %s failed (%s), retrying in %.1fs", spec.method, spec.path, reason, delay
    )
    return delay


def _describe_transport_error(exc: httpx.RequestError, timeout: float) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return f"Request timed out after {timeout:g}s"
    return str(exc) or type(exc).__name__


def _undecodable(exc: httpx.DecodingError) -> APIError:
    return APIError(f"Could not decode response body: {exc}")


def _buffered(resp: httpx.Response, content: bytes) -> httpx.Response:
    # content is already decoded, so drop the encoding header
    headers = [
        (k, v) for k, v in resp.headers.multi_items() if k.lower() != "content-encoding"
    ]
    return httpx.Response(
        resp.status_code, headers=headers, content=content, request=resp.request,
    )


def _error_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return {}


def _error_message(body: Any, status_code: int, default: Optional[str] = None) -> str:
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    return default or f"API error: {status_code}"


def _raise_for_status(resp: httpx.Response) -> None:
    status = resp.status_code
    if status < 400:
        return
    body = _error_body(resp)
    if status in (401, 403):
        raise AuthenticationError(
            _error_message(body, status), status_code=status, body=body
        )
    if status == 402:
        raise InsufficientCreditsError(
            _error_message(body, status), status_code=status, body=body
        )
    if status == 429:
        raise RateLimitError(
            _error_message(body, status, "Rate limit exceeded. Please try again later."),
            status_code=status,
            body=body,
            retry_after=_retry_after(resp),
        )
    raise APIError(_error_message(body, status), status_code=status, body=body)


def _decode(resp: httpx.Response, raw: bool) -> Any:
    _raise_for_status(resp)
    if raw:
        return resp.content
    if not resp.content:
        return {}
    try:
        return resp.json()
    except ValueError as exc:
        raise APIError(
            f"Invalid JSON in response: {exc}",
            status_code=resp.status_code,
            body=resp.text,
        ) from exc


def _failure(text: str, exc: TranslatePlusError) -> TranslationFailure:
    return TranslationFailure(
        text=text,
        error=str(exc),
        kind=exc.kind.value,
        status_code=exc.status_code,
    )


# ---------------------------------------------------------------------------
# Request bodies (shared by both clients)
# ---------------------------------------------------------------------------


def _build_translate_body(text: str, target: str, source: str = "auto") -> Dict[str, Any]:
    return {"text": text, "source": source or "auto", "target": target}


def _build_batch_body(texts: Sequence[str], target: str, source: str = "auto") -> Dict[str, Any]:
    texts = list(texts)
    if not texts:
        raise ValidationError("Texts list cannot be empty")
    if len(texts) > MAX_BATCH_TEXTS:
        raise ValidationError(
            f"Maximum {MAX_BATCH_TEXTS} texts allowed per batch request"
        )
    return {"texts": texts, "source": source or "auto", "target": target}


def _build_subtitles_body(
    content: str, subtitle_format: str, target: str, source: str = "auto",
) -> Dict[str, Any]:
    if subtitle_format not in SUBTITLE_FORMATS:
        raise ValidationError("Format must be 'srt' or 'vtt'")
    return {
        "content": content,
        "format": subtitle_format,
        "source": source or "auto",
        "target": target,
    }


def _build_i18n_job_form(
    file: FileInput,
    target_languages: Sequence[str],
    source_language: str = "auto",
    webhook_url: Optional[str] = None,
) -> Dict[str, Any]:
    if isinstance(file, (str, Path)):
        path = Path(file).resolve()
        if not path.is_file():
            raise ValidationError(f"File not found: {path}")
    if isinstance(target_languages, str):
        target_languages = [target_languages]
    if not target_languages:
        raise ValidationError("At least one target language is required")
    form: Dict[str, Any] = {
        "source_language": source_language or "auto",
        "target_languages": ",".join(target_languages),
    }
    if webhook_url:
        form["webhook_url"] = webhook_url
    return form


def _job_path(job_id: str) -> str:
    return f"/v2/i18n/jobs/{quote(str(job_id), safe='')}"


def _save(content: bytes, dest: Optional[Union[str, Path]]) -> bytes:
    if dest is not None:
        Path(dest).write_bytes(content)
        logger.debug("Wrote %d bytes to %s", len(content), dest)
    return content


# ===================================================================
# Synchronous client
# ===================================================================


class TranslatePlus:
    """Synchronous TranslatePlus API client.

    Safe to share between threads: at most ``max_concurrent`` requests are
    in flight at once, the rest wait for a free slot.

    Usage::

        from translateplus import TranslatePlus

        client = TranslatePlus(api_key="...")
        result = client.translate("Hello world", target="fr")
        print(result.translation)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        max_concurrent: int = DEFAULT_MAX_CONCURRENT,
    ) -> None:
        self._config = ClientConfig.from_args(
            api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            max_concurrent=max_concurrent,
        )
        self._client = httpx.Client(
            base_url=self._config.base_url,
            headers=_default_headers(self._config.api_key),
            timeout=self._config.timeout,
        )
        self._slots = threading.BoundedSemaphore(self._config.max_concurrent)
        self._lock = threading.Lock()
        self._in_flight = 0

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def in_flight(self) -> int:
        """Number of requests currently holding a concurrency slot."""
        return self._in_flight

    def close(self) -> None:
        """Release underlying HTTP connection pool."""
        self._client.close()

    def __enter__(self) -> "TranslatePlus":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @contextlib.contextmanager
    def _admit(self) -> Iterator[None]:
        with self._slots:
            with self._lock:
                self._in_flight += 1
            try:
                yield
            finally:
                with self._lock:
                    self._in_flight -= 1

    def _sleep(self, seconds: float) -> None:
        time.sleep(seconds)

    def _send(self, method: str, path: str, kwargs: Dict[str, Any]) -> httpx.Response:
        """One attempt, bounded by ``timeout`` from connect to the last body byte.

        httpx only bounds each connect/read/write step, so the body is
        streamed and the deadline checked between chunks.
        """
        deadline = time.monotonic() + self._config.timeout
        chunks: List[bytes] = []
        with self._client.stream(method, path, **kwargs) as resp:
            if time.monotonic() > deadline:
                raise httpx.ReadTimeout("attempt deadline exceeded", request=resp.request)
            for chunk in resp.iter_bytes():
                chunks.append(chunk)
                if time.monotonic() > deadline:
                    raise httpx.ReadTimeout("attempt deadline exceeded", request=resp.request)
        return _buffered(resp, b"".join(chunks))

    def _request(
        self,
        method: str,
        path: str,
        *,
        body: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, FileInput]] = None,
        params: Optional[Dict[str, Any]] = None,
        raw: bool = False,
    ) -> Any:
        spec = RequestSpec(method, path, body=body, files=files, params=params)
        kwargs = spec.encode()
        attempts = self._config.attempts
        last_exc: Optional[httpx.RequestError] = None
        last_error = "unknown error"

        with self._admit():
            for attempt in range(attempts):
                is_last = attempt == attempts - 1
                logger.debug("%s %s (attempt %d/%d)", method, path, attempt + 1, attempts)
                try:
                    resp = self._send(method, path, kwargs)
                except httpx.DecodingError as exc:
                    raise _undecodable(exc) from exc
                except httpx.RequestError as exc:
                    last_exc = exc
                    last_error = _describe_transport_error(exc, self._config.timeout)
                    if not is_last:
                        self._sleep(_retry_delay(spec, attempt, last_error))
                    continue
                if resp.status_code == 429 and not is_last:
                    self._sleep(_retry_delay(spec, attempt, "HTTP 429", resp))
                    continue
                return _decode(resp, raw)

        raise APIError(
            f"Request failed after {attempts} attempts: {last_error}"
        ) from last_exc

    # -- Translation -----------------------------------------------------

    def translate(self, text: str, target: str, *, source: str = "auto") -> Translation:
        """Translate a single text.

        Args:
            text: The text to translate.
            target: Target language code (e.g. ``"fr"``).
            source: Source language code. Defaults to ``"auto"`` (detected).
        """
        body = _build_translate_body(text, target, source)
        return _parse_translation(self._request("POST", "/v2/translate", body=body))

    def translate_batch(
        self, texts: Sequence[str], target: str, *, source: str = "auto",
    ) -> BatchTranslation:
        """Translate up to 100 texts in a single request.

        Items the service could not translate come back with
        ``success=False`` and an ``error`` message; the call itself only
        fails for request-level errors.

        Raises:
            ValidationError: ``texts`` is empty or holds more than 100 items.
        """
        body = _build_batch_body(texts, target, source)
        return _parse_batch(self._request("POST", "/v2/translate/batch", body=body))

    def translate_html(self, html: str, target: str, *, source: str = "auto") -> HTMLTranslation:
        """Translate HTML, preserving tags and structure."""
        body = {"html": html, "source": source or "auto", "target": target}
        data = self._request("POST", "/v2/translate/html", body=body)
        return HTMLTranslation(html=data.get("html", ""))

    def translate_email(
        self, subject: str, body: str, target: str, *, source: str = "auto",
    ) -> EmailTranslation:
        """Translate an email subject line and HTML body."""
        payload = {
            "subject": subject,
            "email_body": body,
            "source": source or "auto",
            "target": target,
        }
        data = self._request("POST", "/v2/translate/email", body=payload)
        return EmailTranslation(
            subject=data.get("subject", ""), html_body=data.get("html_body", ""),
        )

    def translate_subtitles(
        self, content: str, target: str, *, subtitle_format: str, source: str = "auto",
    ) -> SubtitleTranslation:
        """Translate SRT or VTT subtitle content, keeping the timings.

        Raises:
            ValidationError: ``subtitle_format`` is not ``"srt"`` or ``"vtt"``.
        """
        body = _build_subtitles_body(content, subtitle_format, target, source)
        data = self._request("POST", "/v2/translate/subtitles", body=body)
        return SubtitleTranslation(
            format=data.get("format", subtitle_format), content=data.get("content", ""),
        )

    def translate_concurrent(
        self, texts: Sequence[str], target: str, *, source: str = "auto",
    ) -> List[Union[Translation, TranslationFailure]]:
        """Translate each text with its own request, ``max_concurrent`` at a time.

        The result list lines up with ``texts``. A text that fails yields a
        :class:`TranslationFailure` in its slot instead of raising.
        """
        texts = list(texts)
        if not texts:
            return []
        with ThreadPoolExecutor(max_workers=self._config.max_concurrent) as pool:
            return list(pool.map(lambda t: self._translate_or_failure(t, target, source), texts))

    def _translate_or_failure(
        self, text: str, target: str, source: str,
    ) -> Union[Translation, TranslationFailure]:
        try:
            return self.translate(text, target, source=source)
        except TranslatePlusError as exc:
            logger.debug("Concurrent item failed: %s", exc)
            return _failure(text, exc)

    # -- Languages -------------------------------------------------------

    def detect_language(self, text: str) -> LanguageDetection:
        """Detect the language of ``text``."""
        return _parse_detection(self._request("POST", "/v2/language/detect", body={"text": text}))

    def get_supported_languages(self) -> SupportedLanguages:
        """Get the languages the service can translate between."""
        data = self._request("GET", "/v2/language/supported")
        return SupportedLanguages(languages=data.get("languages", {}))

    # -- Account ---------------------------------------------------------

    def get_account_summary(self) -> AccountSummary:
        """Get credits, plan and usage limits for this API key."""
        return _parse_account(self._request("GET", "/v2/user/account"))

    # -- i18n jobs -------------------------------------------------------

    def create_i18n_job(
        self,
        file: FileInput,
        target_languages: Sequence[str],
        *,
        source_language: str = "auto",
        webhook_url: Optional[str] = None,
    ) -> I18nJob:
        """Upload a localization file and start translating it.

        Args:
            file: Path to the file (must exist), raw bytes, or file-like object.
            target_languages: Language codes to translate into.
            source_language: Language of the file. Defaults to ``"auto"``.
            webhook_url: Called by the service when the job finishes.
        """
        form = _build_i18n_job_form(file, target_languages, source_language, webhook_url)
        data = self._request("POST", "/v2/i18n/jobs", body=form, files={"file": file})
        return _parse_job(data)

    def get_i18n_job_status(self, job_id: str) -> I18nJobStatus:
        """Get the status of an i18n job."""
        return _parse_job_status_response(self._request("GET", _job_path(job_id)))

    def list_i18n_jobs(self, page: int = 1, page_size: int = 20) -> I18nJobList:
        """List i18n jobs, one page at a time."""
        params = {"page": page, "page_size": page_size}
        data = self._request("GET", "/v2/i18n/jobs", params=params)
        return _parse_job_list(data, page, page_size)

    def download_i18n_file(
        self,
        job_id: str,
        language_code: str,
        *,
        dest: Optional[Union[str, Path]] = None,
    ) -> bytes:
        """Download the translated file for one language of a finished job.

        The raw bytes are returned and, when ``dest`` is given, also written
        to that path.
        """
        path = f"{_job_path(job_id)}/download/{quote(language_code, safe='')}"
        return _save(self._request("GET", path, raw=True), dest)

    def delete_i18n_job(self, job_id: str) -> None:
        """Delete an i18n job and its files."""
        self._request("DELETE", _job_path(job_id))


# ===================================================================
# Asynchronous client
# ===================================================================


class AsyncTranslatePlus:
    """Asynchronous TranslatePlus API client.

    Usage::

        import asyncio
        from translateplus import AsyncTranslatePlus

        async def main():
            async with AsyncTranslatePlus(api_key="...") as client:
                result = await client.translate("Hello", target="fr")
                print(result.translation)

        asyncio.run(main())
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        max_concurrent: int = DEFAULT_MAX_CONCURRENT,
    ) -> None:
        self._config = ClientConfig.from_args(
            api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            max_concurrent=max_concurrent,
        )
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            headers=_default_headers(self._config.api_key),
            timeout=self._config.timeout,
        )
        self._slots = asyncio.Semaphore(self._config.max_concurrent)
        self._in_flight = 0

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def in_flight(self) -> int:
        """Number of requests currently holding a concurrency slot."""
        return self._in_flight

    async def close(self) -> None:
        """Release underlying HTTP connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncTranslatePlus":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    @contextlib.asynccontextmanager
    async def _admit(self) -> AsyncIterator[None]:
        async with self._slots:
            self._in_flight += 1
            try:
                yield
            finally:
                self._in_flight -= 1

    async def _sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

    async def _send(self, method: str, path: str, kwargs: Dict[str, Any]) -> httpx.Response:
        """One attempt, bounded by ``timeout`` from connect to the last body byte."""
        try:
            return await asyncio.wait_for(
                self._client.request(method, path, **kwargs), self._config.timeout,
            )
        except asyncio.TimeoutError as exc:
            raise httpx.ReadTimeout("attempt deadline exceeded") from exc

    async def _request(
        self,
        method: str,
        path: str,
        *,
        body: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, FileInput]] = None,
        params: Optional[Dict[str, Any]] = None,
        raw: bool = False,
    ) -> Any:
        spec = RequestSpec(method, path, body=body, files=files, params=params)
        kwargs = spec.encode()
        attempts = self._config.attempts
        last_exc: Optional[httpx.RequestError] = None
        last_error = "unknown error"

        async with self._admit():
            for attempt in range(attempts):
                is_last = attempt == attempts - 1
                logger.debug("%s %s (attempt %d/%d)", method, path, attempt + 1, attempts)
                try:
                    resp = await self._send(method, path, kwargs)
                except httpx.DecodingError as exc:
                    raise _undecodable(exc) from exc
                except httpx.RequestError as exc:
                    last_exc = exc
                    last_error = _describe_transport_error(exc, self._config.timeout)
                    if not is_last:
                        await self._sleep(_retry_delay(spec, attempt, last_error))
                    continue
                if resp.status_code == 429 and not is_last:
                    await self._sleep(_retry_delay(spec, attempt, "HTTP 429", resp))
                    continue
                return _decode(resp, raw)

        raise APIError(
            f"Request failed after {attempts} attempts: {last_error}"
        ) from last_exc

    # -- Translation -----------------------------------------------------

    async def translate(self, text: str, target: str, *, source: str = "auto") -> Translation:
        """Translate a single text. See :meth:`TranslatePlus.translate`."""
        body = _build_translate_body(text, target, source)
        return _parse_translation(await self._request("POST", "/v2/translate", body=body))

    async def translate_batch(
        self, texts: Sequence[str], target: str, *, source: str = "auto",
    ) -> BatchTranslation:
        """Translate up to 100 texts. See :meth:`TranslatePlus.translate_batch`."""
        body = _build_batch_body(texts, target, source)
        return _parse_batch(await self._request("POST", "/v2/translate/batch", body=body))

    async def translate_html(
        self, html: str, target: str, *, source: str = "auto",
    ) -> HTMLTranslation:
        """Translate HTML. See :meth:`TranslatePlus.translate_html`."""
        body = {"html": html, "source": source or "auto", "target": target}
        data = await self._request("POST", "/v2/translate/html", body=body)
        return HTMLTranslation(html=data.get("html", ""))

    async def translate_email(
        self, subject: str, body: str, target: str, *, source: str = "auto",
    ) -> EmailTranslation:
        """Translate an email. See :meth:`TranslatePlus.translate_email`."""
        payload = {
            "subject": subject,
            "email_body": body,
            "source": source or "auto",
            "target": target,
        }
        data = await self._request("POST", "/v2/translate/email", body=payload)
        return EmailTranslation(
            subject=data.get("subject", ""), html_body=data.get("html_body", ""),
        )

    async def translate_subtitles(
        self, content: str, target: str, *, subtitle_format: str, source: str = "auto",
    ) -> SubtitleTranslation:
        """Translate subtitles. See :meth:`TranslatePlus.translate_subtitles`."""
        body = _build_subtitles_body(content, subtitle_format, target, source)
        data = await self._request("POST", "/v2/translate/subtitles", body=body)
        return SubtitleTranslation(
            format=data.get("format", subtitle_format), content=data.get("content", ""),
        )

    async def translate_concurrent(
        self, texts: Sequence[str], target: str, *, source: str = "auto",
    ) -> List[Union[Translation, TranslationFailure]]:
        """Fan out one request per text. See :meth:`TranslatePlus.translate_concurrent`."""
        tasks = [
            asyncio.ensure_future(self._translate_or_failure(t, target, source))
            for t in texts
        ]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            # unexpected error: cancel the rest before re-raising
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _translate_or_failure(
        self, text: str, target: str, source: str,
    ) -> Union[Translation, TranslationFailure]:
        try:
            return await self.translate(text, target, source=source)
        except TranslatePlusError as exc:
            logger.debug("Concurrent item failed: %s", exc)
            return _failure(text, exc)

    # -- Languages -------------------------------------------------------

    async def detect_language(self, text: str) -> LanguageDetection:
        """Detect a language. See :meth:`TranslatePlus.detect_language`."""
        return _parse_detection(
            await self._request("POST", "/v2/language/detect", body={"text": text})
        )

    async def get_supported_languages(self) -> SupportedLanguages:
        """Supported languages. See :meth:`TranslatePlus.get_supported_languages`."""
        data = await self._request("GET", "/v2/language/supported")
        return SupportedLanguages(languages=data.get("languages", {}))

    # -- Account ---------------------------------------------------------

    async def get_account_summary(self) -> AccountSummary:
        """Account summary. See :meth:`TranslatePlus.get_account_summary`."""
        return _parse_account(await self._request("GET", "/v2/user/account"))

    # -- i18n jobs -------------------------------------------------------

    async def create_i18n_job(
        self,
        file: FileInput,
        target_languages: Sequence[str],
        *,
        source_language: str = "auto",
        webhook_url: Optional[str] = None,
    ) -> I18nJob:
        """Start an i18n job. See :meth:`TranslatePlus.create_i18n_job`."""
        form = _build_i18n_job_form(file, target_languages, source_language, webhook_url)
        data = await self._request("POST", "/v2/i18n/jobs", body=form, files={"file": file})
        return _parse_job(data)

    async def get_i18n_job_status(self, job_id: str) -> I18nJobStatus:
        """Job status. See :meth:`TranslatePlus.get_i18n_job_status`."""
        return _parse_job_status_response(await self._request("GET", _job_path(job_id)))

    async def list_i18n_jobs(self, page: int = 1, page_size: int = 20) -> I18nJobList:
        """List jobs. See :meth:`TranslatePlus.list_i18n_jobs`."""
        params = {"page": page, "page_size": page_size}
        data = await self._request("GET", "/v2/i18n/jobs", params=params)
        return _parse_job_list(data, page, page_size)

    async def download_i18n_file(
        self,
        job_id: str,
        language_code: str,
        *,
        dest: Optional[Union[str, Path]] = None,
    ) -> bytes:
        """Download a translated file. See :meth:`TranslatePlus.download_i18n_file`."""
        path = f"{_job_path(job_id)}/download/{quote(language_code, safe='')}"
        return _save(await self._request("GET", path, raw=True), dest)

    async def delete_i18n_job(self, job_id: str) -> None:
        """Delete a job. See :meth:`TranslatePlus.delete_i18n_job`."""
        await self._request("DELETE", _job_path(job_id))
