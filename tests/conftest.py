"""Shared fixtures for TranslatePlus SDK tests."""

import pytest

from translateplus import TranslatePlus, AsyncTranslatePlus


API_KEY = "tp_test_00000000000000000000000000000000"
BASE_URL = "https://api.test.translateplus.io"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("TRANSLATEPLUS_API_KEY", raising=False)
    monkeypatch.delenv("TRANSLATEPLUS_API_URL", raising=False)


@pytest.fixture
def delays():
    """Backoff delays recorded by a client whose sleeps are stubbed out."""
    return []


@pytest.fixture
def client(httpx_mock, monkeypatch, delays):
    """Pre-configured sync client pointing at mock transport, no real sleeps."""
    c = TranslatePlus(api_key=API_KEY, base_url=BASE_URL)
    monkeypatch.setattr(c, "_sleep", delays.append)
    yield c
    c.close()


@pytest.fixture
def async_client(httpx_mock, monkeypatch, delays):
    """Pre-configured async client pointing at mock transport, no real sleeps."""
    c = AsyncTranslatePlus(api_key=API_KEY, base_url=BASE_URL)

    async def _record(seconds):
        delays.append(seconds)

    monkeypatch.setattr(c, "_sleep", _record)
    return c
