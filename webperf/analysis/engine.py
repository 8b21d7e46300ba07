"""Runs one validated URL through the browser pipeline."""

from __future__ import annotations

import asyncio
import logging

from webperf.analysis.aggregator import ResourceAggregator
from webperf.analysis.browser import BrowserDriver
from webperf.analysis.report import build_report
from webperf.api.schemas import PerformanceReport
from webperf.config import Settings

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """Orchestrates the launch -> navigate -> aggregate -> report pipeline.

    Concurrent runs each get their own aggregator and browser process; the
    number of live browsers is capped by ``max_concurrent_browsers``.
    """

    def __init__(self, settings: Settings, driver: BrowserDriver | None = None) -> None:
        self._driver = driver or BrowserDriver(settings)
        self._slots = asyncio.Semaphore(max(1, settings.max_concurrent_browsers))

    async def run(self, url: str) -> PerformanceReport:
        """Analyze an already-normalized *url*. Raises ``AnalysisError`` on failure."""
        aggregator = ResourceAggregator()

        if self._slots.locked():
            logger.info("waiting for a browser slot", extra={"url": url})
        async with self._slots:
            logger.info("analysis started", extra={"url": url})
            load_time_ms = await self._driver.load(url, aggregator)

        page_size = aggregator.totals()
        report = build_report(url, load_time_ms, page_size, aggregator.request_count)
        logger.info(
            "analysis completed",
            extra={
                "url": url,
                "load_time_ms": report.load_time,
                "request_count": report.request_count,
                "total_bytes": page_size.total,
                "recommendations": len(report.recommendations or []),
            },
        )
        return report
