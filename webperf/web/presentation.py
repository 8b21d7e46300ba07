"""Formatting helpers and the view model for the results panel."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from webperf.api.schemas import PerformanceReport

KIB = 1024
MIB = 1024 * 1024


@dataclass(frozen=True)
class Grade:
    letter: str
    color: str


# (exclusive upper bound in ms, grade); anything slower is a D.
_GRADES: tuple[tuple[int, Grade], ...] = (
    (1000, Grade("A", "green")),
    (2000, Grade("B", "yellow")),
    (3000, Grade("C", "orange")),
)
_SLOWEST = Grade("D", "red")


def format_size(size: int) -> str:
    if size < KIB:
        return f"{size} B"
    if size < MIB:
        return f"{size / KIB:.1f} KB"
    return f"{size / MIB:.1f} MB"


def format_load_time(load_time_ms: int) -> str:
    return f"{load_time_ms / 1000:.2f}s"


def performance_grade(load_time_ms: int) -> Grade:
    for limit, grade in _GRADES:
        if load_time_ms < limit:
            return grade
    return _SLOWEST


def display_timestamp(timestamp: str) -> str:
    """Render an ISO-8601 UTC timestamp in the server's local time zone."""
    try:
        moment = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return moment.astimezone().strftime("%Y-%m-%d %H:%M:%S %Z")


@dataclass(frozen=True)
class ResourceRow:
    label: str
    size: str
    color: str


@dataclass(frozen=True)
class ReportView:
    """Everything the results template needs, already formatted."""

    url: str
    grade: Grade
    analyzed_at: str
    load_time: str
    total_size: str
    request_count: int
    resources: list[ResourceRow]
    recommendations: list[str]


def render_report(report: PerformanceReport) -> ReportView:
    sizes = report.page_size
    return ReportView(
        url=report.url,
        grade=performance_grade(report.load_time),
        analyzed_at=display_timestamp(report.timestamp),
        load_time=format_load_time(report.load_time),
        total_size=format_size(sizes.total),
        request_count=report.request_count,
        resources=[
            ResourceRow("HTML", format_size(sizes.html), "blue"),
            ResourceRow("CSS", format_size(sizes.css), "green"),
            ResourceRow("JavaScript", format_size(sizes.js), "yellow"),
            ResourceRow("Images", format_size(sizes.images), "purple"),
        ],
        recommendations=list(report.recommendations or []),
    )
