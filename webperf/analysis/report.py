"""Assembles the final PerformanceReport for a run."""

from __future__ import annotations

from datetime import datetime, timezone

from webperf.analysis.recommendations import recommend
from webperf.api.schemas import PerformanceReport, ResourceTotals


def iso_timestamp(moment: datetime) -> str:
    """UTC timestamp with millisecond precision and a ``Z`` suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def build_report(
    url: str,
    load_time_ms: int,
    page_size: ResourceTotals,
    request_count: int,
    now: datetime | None = None,
) -> PerformanceReport:
    recommendations = recommend(load_time_ms, page_size, request_count)
    return PerformanceReport(
        url=url,
        load_time=load_time_ms,
        request_count=request_count,
        page_size=page_size,
        timestamp=iso_timestamp(now or datetime.now(timezone.utc)),
        # Omitted from the JSON entirely when nothing fired.
        recommendations=recommendations or None,
    )
