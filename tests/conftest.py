"""Fixtures: fake Playwright responses, fake engine, test client."""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from webperf.analysis.errors import AnalysisError
from webperf.analysis.report import build_report
from webperf.api.routes import get_engine
from webperf.api.schemas import PerformanceReport, ResourceTotals
from webperf.main import app


class FakeResponse:
    """Stands in for ``playwright.async_api.Response``."""

    def __init__(
        self,
        content_type: str | None = None,
        size: int = 0,
        *,
        url: str = "https://example.com/asset",
        unreadable: bool = False,
        delay: float = 0.0,
        log: list[str] | None = None,
    ) -> None:
        self.url = url
        self.headers = {} if content_type is None else {"content-type": content_type}
        self._size = size
        self._unreadable = unreadable
        self._delay = delay
        self._log = log

    async def body(self) -> bytes:
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._log is not None:
            self._log.append(f"body:{self.url}")
        if self._unreadable:
            raise RuntimeError("Response body is unavailable for redirect responses")
        return b"x" * self._size


class FakeEngine:
    """Records requested URLs and returns a canned report or raises."""

    def __init__(self) -> None:
        self.urls: list[str] = []
        self.error: Exception | None = None
        self.load_time_ms = 850
        self.page_size = ResourceTotals(total=3000, html=1000, css=500, js=1500, images=0, other=0)
        self.request_count = 3

    async def run(self, url: str) -> PerformanceReport:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return build_report(url, self.load_time_ms, self.page_size, self.request_count)


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def failing_engine(fake_engine: FakeEngine) -> FakeEngine:
    fake_engine.error = AnalysisError("net::ERR_NAME_NOT_RESOLVED at https://nope.invalid")
    return fake_engine


@pytest.fixture
def client(fake_engine: FakeEngine):
    """TestClient without lifespan; the engine comes from the override."""
    app.dependency_overrides[get_engine] = lambda: fake_engine
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def response_factory():
    return FakeResponse
