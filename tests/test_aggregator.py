"""Resource aggregator tests."""

import asyncio

import pytest

from webperf.analysis.aggregator import ResourceAggregator, classify_content_type


# --- classification (sync) ---


@pytest.mark.parametrize(
    "content_type, bucket",
    [
        ("text/html; charset=utf-8", "html"),
        ("text/css", "css"),
        ("application/javascript", "js"),
        ("text/javascript; charset=utf-8", "js"),
        ("image/png", "images"),
        ("image/svg+xml", "images"),
        ("application/octet-stream", "other"),
        ("font/woff2", "other"),
        ("application/json", "other"),
        ("", "other"),
    ],
)
def test_classify_content_type(content_type, bucket):
    assert classify_content_type(content_type) == bucket


def test_classify_first_match_wins():
    # Both "text/html" and "javascript" appear; html is checked first.
    assert classify_content_type("text/html, application/javascript") == "html"


def test_classify_is_case_sensitive():
    assert classify_content_type("Text/HTML") == "other"


def test_add_keeps_total_equal_to_bucket_sum():
    agg = ResourceAggregator()
    agg.add("text/html", 100)
    agg.add("text/css", 20)
    agg.add("application/javascript", 300)
    agg.add("image/webp", 4000)
    agg.add("application/wasm", 5)

    totals = agg.totals()
    assert totals.total == 4425
    assert totals.total == totals.html + totals.css + totals.js + totals.images + totals.other
    assert agg.request_count == 5


def test_fresh_aggregators_do_not_share_state():
    first = ResourceAggregator()
    first.add("text/html", 10)
    second = ResourceAggregator()
    assert second.totals().total == 0
    assert second.request_count == 0
    assert second.sizes is not first.sizes


# --- observation (async) ---


@pytest.mark.asyncio
async def test_observe_counts_body_length(response_factory):
    agg = ResourceAggregator()
    await agg.observe(response_factory("text/html; charset=utf-8", 512))
    await agg.observe(response_factory("image/png", 2048))

    totals = agg.totals()
    assert totals.html == 512
    assert totals.images == 2048
    assert totals.total == 2560
    assert agg.request_count == 2


@pytest.mark.asyncio
async def test_observe_skips_unreadable_body(response_factory):
    agg = ResourceAggregator()
    await agg.observe(response_factory("text/html", 100, unreadable=True))
    await agg.observe(response_factory("text/css", 40))

    totals = agg.totals()
    assert totals.total == 40
    assert totals.html == 0
    assert agg.request_count == 1


@pytest.mark.asyncio
async def test_missing_content_type_counts_as_other(response_factory):
    agg = ResourceAggregator()
    await agg.observe(response_factory(None, 77))
    assert agg.totals().other == 77
    assert agg.request_count == 1


@pytest.mark.asyncio
async def test_empty_body_still_counts_as_request(response_factory):
    agg = ResourceAggregator()
    await agg.observe(response_factory("text/plain", 0))
    assert agg.request_count == 1
    assert agg.totals().total == 0


@pytest.mark.asyncio
async def test_drain_waits_for_scheduled_reads(response_factory):
    agg = ResourceAggregator()
    agg.on_response(response_factory("application/javascript", 1000, delay=0.02))
    agg.on_response(response_factory("text/css", 200, delay=0.01))
    agg.on_response(response_factory("image/gif", 50))

    assert agg.pending == 3
    await agg.drain()

    assert agg.pending == 0
    totals = agg.totals()
    assert totals.js == 1000
    assert totals.css == 200
    assert totals.images == 50
    assert agg.request_count == 3


@pytest.mark.asyncio
async def test_drain_covers_reads_scheduled_while_draining(response_factory):
    agg = ResourceAggregator()

    class ChainedResponse(response_factory):
        async def body(self) -> bytes:
            agg.on_response(response_factory("text/css", 30, delay=0.01))
            return await super().body()

    agg.on_response(ChainedResponse("text/html", 10))
    await agg.drain()

    assert agg.request_count == 2
    assert agg.totals().total == 40


@pytest.mark.asyncio
async def test_drain_with_nothing_pending():
    agg = ResourceAggregator()
    await agg.drain()
    assert agg.totals().total == 0


@pytest.mark.asyncio
async def test_cancel_pending_discards_unfinished_reads(response_factory):
    agg = ResourceAggregator()
    agg.on_response(response_factory("text/html", 100, delay=1.0))
    await asyncio.sleep(0)

    agg.cancel_pending()
    await asyncio.sleep(0)

    assert agg.pending == 0
    assert agg.request_count == 0
    assert agg.totals().total == 0
