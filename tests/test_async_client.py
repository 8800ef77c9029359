"""Unit tests for the asynchronous AsyncTranslatePlus client."""

import asyncio
import json

import httpx
import pytest

from translateplus import (
    AsyncTranslatePlus,
    APIError,
    AuthenticationError,
    InsufficientCreditsError,
    JobStatus,
    RateLimitError,
    Translation,
    TranslationFailure,
    ValidationError,
)

API_KEY = "tp_test_00000000000000000000000000000000"
BASE = "https://api.test.translateplus.io"


TRANSLATE_RESPONSE = {
    "translations": {
        "text": "Hello",
        "translation": "Bonjour",
        "source": "en",
        "target": "fr",
    }
}


@pytest.mark.anyio
class TestAsyncTranslate:
    async def test_translate(self, async_client, httpx_mock):
        httpx_mock.add_response(url=f"{BASE}/v2/translate", method="POST", json=TRANSLATE_RESPONSE)
        async with async_client as c:
            result = await c.translate(text="Hello", source="en", target="fr")
        assert result.translation == "Bonjour"

    async def test_translate_batch(self, async_client, httpx_mock):
        httpx_mock.add_response(
            url=f"{BASE}/v2/translate/batch",
            method="POST",
            json={
                "translations": [
                    {"text": "a", "translation": "a_es", "source": "en", "target": "es", "success": True},
                ],
                "total": 1,
                "successful": 1,
                "failed": 0,
            },
        )
        async with async_client as c:
            result = await c.translate_batch(["a"], "es")
        assert result.successful == 1
        assert result.translations[0].translation == "a_es"

    async def test_translate_batch_validation(self, async_client, httpx_mock):
        async with async_client as c:
            with pytest.raises(ValidationError):
                await c.translate_batch([], "es")
            with pytest.raises(ValidationError):
                await c.translate_batch(["x"] * 101, "es")
        assert httpx_mock.get_requests() == []

    async def test_translate_subtitles_bad_format(self, async_client, httpx_mock):
        async with async_client as c:
            with pytest.raises(ValidationError):
                await c.translate_subtitles("x", "fr", subtitle_format="sub")
        assert httpx_mock.get_requests() == []

    async def test_translate_concurrent(self, async_client, httpx_mock):
        async def respond(request):
            text = json.loads(request.content)["text"]
            if text == "A":
                # finish after B so completion order differs from input order
                await asyncio.sleep(0.02)
                return httpx.Response(200, json={
                    "translations": {"text": "A", "translation": "A_fr", "source": "en", "target": "fr"}
                })
            return httpx.Response(402, json={"detail": "Insufficient credits"})

        httpx_mock.add_callback(respond, url=f"{BASE}/v2/translate", method="POST", is_reusable=True)
        async with async_client as c:
            results = await c.translate_concurrent(["A", "B"], "fr", source="en")
            assert c.in_flight == 0

        assert len(results) == 2
        assert isinstance(results[0], Translation)
        assert results[0].translation == "A_fr"
        assert isinstance(results[1], TranslationFailure)
        assert results[1].kind == "insufficient_credits"
        assert results[1].status_code == 402

    async def test_translate_concurrent_cancels_siblings(self, async_client, httpx_mock):
        async def respond(request):
            text = json.loads(request.content)["text"]
            if text == "boom":
                raise RuntimeError("handler crashed")
            await asyncio.sleep(5)
            return httpx.Response(200, json=TRANSLATE_RESPONSE)

        httpx_mock.add_callback(respond, url=f"{BASE}/v2/translate", method="POST", is_reusable=True)
        loop = asyncio.get_running_loop()
        async with async_client as c:
            started = loop.time()
            with pytest.raises(RuntimeError, match="handler crashed"):
                await c.translate_concurrent(["slow", "boom"], "fr")
            assert loop.time() - started < 1.0
            assert c.in_flight == 0


@pytest.mark.anyio
class TestAsyncI18nJobs:
    async def test_create_job(self, async_client, httpx_mock, tmp_path):
        f = tmp_path / "en.json"
        f.write_text('{"greeting": "Hello"}')
        httpx_mock.add_response(
            url=f"{BASE}/v2/i18n/jobs",
            method="POST",
            json={"job_id": "job-9", "status": "pending"},
        )
        async with async_client as c:
            job = await c.create_i18n_job(f, ["fr"])
        assert job.job_id == "job-9"
        assert job.status is JobStatus.PENDING

    async def test_status_and_download(self, async_client, httpx_mock):
        httpx_mock.add_response(
            url=f"{BASE}/v2/i18n/jobs/job-9",
            method="GET",
            json={"id": "job-9", "status": "completed", "source_language": "en", "target_languages": ["fr"]},
        )
        httpx_mock.add_response(
            url=f"{BASE}/v2/i18n/jobs/job-9/download/fr",
            method="GET",
            content=b"bonjour",
        )
        async with async_client as c:
            job = await c.get_i18n_job_status("job-9")
            content = await c.download_i18n_file("job-9", "fr")
        assert job.status is JobStatus.COMPLETED
        assert content == b"bonjour"

    async def test_list_and_delete(self, async_client, httpx_mock):
        httpx_mock.add_response(
            url=f"{BASE}/v2/i18n/jobs?page=1&page_size=20",
            method="GET",
            json={"count": 0, "page": 1, "page_size": 20, "total_pages": 0, "results": []},
        )
        httpx_mock.add_response(url=f"{BASE}/v2/i18n/jobs/job-9", method="DELETE", json={})
        async with async_client as c:
            jobs = await c.list_i18n_jobs()
            assert await c.delete_i18n_job("job-9") is None
        assert jobs.count == 0


@pytest.mark.anyio
class TestAsyncLanguagesAndAccount:
    async def test_detect_and_supported(self, async_client, httpx_mock):
        httpx_mock.add_response(
            url=f"{BASE}/v2/language/detect",
            method="POST",
            json={"language_detection": {"language": "de", "confidence": 0.9}},
        )
        httpx_mock.add_response(
            url=f"{BASE}/v2/language/supported",
            method="GET",
            json={"languages": {"de": "German"}},
        )
        async with async_client as c:
            detection = await c.detect_language("Guten Tag")
            supported = await c.get_supported_languages()
        assert detection.language == "de"
        assert supported.languages == {"de": "German"}

    async def test_account(self, async_client, httpx_mock):
        httpx_mock.add_response(
            url=f"{BASE}/v2/user/account",
            method="GET",
            json={"credits_remaining": 5, "total_credits": 10, "plan_name": "Free", "concurrency_limit": 1},
        )
        async with async_client as c:
            summary = await c.get_account_summary()
        assert summary.plan_name == "Free"


@pytest.mark.anyio
class TestAsyncErrors:
    async def test_403_not_retried(self, async_client, httpx_mock, delays):
        httpx_mock.add_response(
            url=f"{BASE}/v2/translate",
            method="POST",
            status_code=403,
            json={"detail": "Invalid API key"},
        )
        async with async_client as c:
            with pytest.raises(AuthenticationError, match="Invalid API key"):
                await c.translate("Hello", "fr")
            assert c.in_flight == 0
        assert len(httpx_mock.get_requests()) == 1
        assert delays == []

    async def test_402_not_retried(self, async_client, httpx_mock):
        httpx_mock.add_response(url=f"{BASE}/v2/translate", method="POST", status_code=402)
        async with async_client as c:
            with pytest.raises(InsufficientCreditsError):
                await c.translate("Hello", "fr")
        assert len(httpx_mock.get_requests()) == 1

    async def test_rate_limit_exhausted(self, async_client, httpx_mock, delays):
        for _ in range(4):
            httpx_mock.add_response(
                url=f"{BASE}/v2/translate",
                method="POST",
                status_code=429,
                headers={"Retry-After": "60"},
            )
        async with async_client as c:
            with pytest.raises(RateLimitError):
                await c.translate("Hello", "fr")
        assert len(httpx_mock.get_requests()) == 4
        assert delays == [1.0, 2.0, 4.0]

    async def test_transport_errors_exhausted(self, async_client, httpx_mock, delays):
        for _ in range(4):
            httpx_mock.add_exception(httpx.ReadTimeout("timed out"))
        async with async_client as c:
            with pytest.raises(APIError, match="after 4 attempts"):
                await c.translate("Hello", "fr")
            assert c.in_flight == 0
        assert delays == [1.0, 2.0, 4.0]

    async def test_undecodable_body_not_retried(self, async_client, httpx_mock, delays):
        httpx_mock.add_exception(
            httpx.DecodingError("incorrect header check"), url=f"{BASE}/v2/user/account",
        )
        async with async_client as c:
            with pytest.raises(APIError, match="Could not decode response body") as exc_info:
                await c.get_account_summary()
        assert isinstance(exc_info.value.__cause__, httpx.DecodingError)
        assert len(httpx_mock.get_requests()) == 1
        assert delays == []

    async def test_attempt_deadline(self, httpx_mock):
        async def respond(request):
            await asyncio.sleep(5)
            return httpx.Response(200, json={"plan_name": "Free"})

        httpx_mock.add_callback(respond, url=f"{BASE}/v2/user/account")
        loop = asyncio.get_running_loop()
        async with AsyncTranslatePlus(
            api_key=API_KEY, base_url=BASE, timeout=0.2, max_retries=0,
        ) as c:
            started = loop.time()
            with pytest.raises(APIError, match="timed out after 0.2s") as exc_info:
                await c.get_account_summary()
            assert loop.time() - started < 1.0
            assert isinstance(exc_info.value.__cause__, httpx.TimeoutException)
            assert c.in_flight == 0

    async def test_attempt_deadline_retried(self, httpx_mock, monkeypatch):
        async def stall(request):
            await asyncio.sleep(60)

        slept = []

        async def record(seconds):
            slept.append(seconds)

        httpx_mock.add_callback(stall, url=f"{BASE}/v2/user/account")
        httpx_mock.add_response(url=f"{BASE}/v2/user/account", json={"plan_name": "Pro"})
        async with AsyncTranslatePlus(
            api_key=API_KEY, base_url=BASE, timeout=0.2, max_retries=1,
        ) as c:
            monkeypatch.setattr(c, "_sleep", record)
            assert (await c.get_account_summary()).plan_name == "Pro"
        assert slept == [1.0]


@pytest.mark.anyio
class TestAsyncConcurrencyLimit:
    async def test_in_flight_never_exceeds_limit(self, httpx_mock):
        active = 0
        peak = 0

        async def respond(request):
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.01)
            active -= 1
            return httpx.Response(200, json=TRANSLATE_RESPONSE)

        httpx_mock.add_callback(respond, url=f"{BASE}/v2/translate", method="POST", is_reusable=True)
        async with AsyncTranslatePlus(api_key=API_KEY, base_url=BASE, max_concurrent=2) as c:
            results = await asyncio.gather(*(c.translate(str(i), "fr") for i in range(8)))
            assert c.in_flight == 0

        assert len(results) == 8
        assert len(httpx_mock.get_requests()) == 8
        assert peak == 2
