"""Headless Chromium driver: one browser, one page, one navigation."""

from __future__ import annotations

import logging
import time

from playwright.async_api import async_playwright

from webperf.analysis.aggregator import ResourceAggregator
from webperf.analysis.errors import AnalysisError
from webperf.config import Settings

logger = logging.getLogger(__name__)

_NO_SANDBOX_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")


class BrowserDriver:
    """Launches a fresh Chromium process for every :meth:`load` call."""

    def __init__(self, settings: Settings) -> None:
        self._timeout_ms = settings.navigation_timeout_ms
        self._headless = settings.browser_headless
        self._sandbox = settings.browser_sandbox

    def _launch_args(self) -> list[str]:
        return [] if self._sandbox else list(_NO_SANDBOX_ARGS)

    async def load(self, url: str, aggregator: ResourceAggregator) -> int:
        """Navigate to *url* until ``load`` and return the elapsed milliseconds.

        Every response the page receives is handed to *aggregator*, whose
        pending reads are drained before the browser closes. Any failure is
        re-raised as :class:`AnalysisError`.
        """
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(
                    headless=self._headless,
                    chromium_sandbox=self._sandbox,
                    args=self._launch_args(),
                )
                try:
                    page = await browser.new_page()
                    page.on("response", aggregator.on_response)

                    logger.debug("navigation started", extra={"url": url, "timeout_ms": self._timeout_ms})
                    started = time.perf_counter()
                    await page.goto(url, wait_until="load", timeout=self._timeout_ms)
                    load_time_ms = int((time.perf_counter() - started) * 1000)

                    await aggregator.drain()
                    return load_time_ms
                finally:
                    aggregator.cancel_pending()
                    await browser.close()
        except Exception as exc:
            raise AnalysisError(f"could not load {url}: {exc}") from exc
