"""Per-run accumulation of response sizes by content type."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from webperf.api.schemas import ResourceTotals

logger = logging.getLogger(__name__)

BUCKETS = ("html", "css", "js", "images", "other")

# First match wins; anything unmatched lands in "other".
_CONTENT_TYPE_RULES: tuple[tuple[str, str], ...] = (
    ("text/html", "html"),
    ("text/css", "css"),
    ("javascript", "js"),
    ("image/", "images"),
)


class ObservedResponse(Protocol):
    """The slice of a Playwright ``Response`` the aggregator reads."""

    url: str
    headers: dict[str, str]

    async def body(self) -> bytes: ...


def classify_content_type(content_type: str) -> str:
    """Map a ``content-type`` header value to its bucket name."""
    for needle, bucket in _CONTENT_TYPE_RULES:
        if needle in content_type:
            return bucket
    return "other"


@dataclass
class ResourceAggregator:
    """Accumulates byte counts for a single analysis run.

    ``on_response`` is registered as the page's response listener. Each call
    schedules a body read; ``drain`` waits for every scheduled read before the
    totals are taken.
    """

    sizes: dict[str, int] = field(default_factory=lambda: dict.fromkeys(BUCKETS, 0))
    total_bytes: int = 0
    request_count: int = 0
    _pending: set[asyncio.Task] = field(default_factory=set, init=False, repr=False)

    def add(self, content_type: str, size: int) -> None:
        bucket = classify_content_type(content_type)
        self.sizes[bucket] += size
        self.total_bytes += size
        self.request_count += 1

    def on_response(self, response: ObservedResponse) -> None:
        task = asyncio.ensure_future(self.observe(response))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def observe(self, response: ObservedResponse) -> None:
        """Read one response body and count it. Unreadable bodies are skipped."""
        try:
            body = await response.body()
        except Exception:
            # Redirects, bodyless and evicted responses have nothing to read.
            logger.debug("response body unavailable", extra={"url": response.url}, exc_info=True)
            return
        content_type = response.headers.get("content-type", "")
        self.add(content_type, len(body))

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait until every scheduled observation has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def cancel_pending(self) -> None:
        for task in list(self._pending):
            task.cancel()
        self._pending.clear()

    def totals(self) -> ResourceTotals:
        return ResourceTotals(total=self.total_bytes, **self.sizes)
