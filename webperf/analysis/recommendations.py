"""Threshold rules that turn run metrics into advice."""

from __future__ import annotations

from dataclasses import dataclass

from webperf.api.schemas import ResourceTotals


@dataclass(frozen=True)
class Rule:
    """Fires when the named metric is strictly above ``threshold``."""

    metric: str
    threshold: int
    message: str


# Evaluated independently, reported in this order.
RULES: tuple[Rule, ...] = (
    Rule("load_time_ms", 3000, "Consider optimizing overall page load performance"),
    Rule("js", 500_000, "Large JavaScript bundles - consider code splitting"),
    Rule("images", 1_000_000, "Optimize images - compress or use modern formats"),
    Rule("request_count", 50, "High number of requests - consider resource bundling"),
    Rule("css", 200_000, "Large CSS files - remove unused styles"),
)


def recommend(load_time_ms: int, page_size: ResourceTotals, request_count: int) -> list[str]:
    values = {
        "load_time_ms": load_time_ms,
        "request_count": request_count,
        **page_size.model_dump(),
    }
    return [rule.message for rule in RULES if values[rule.metric] > rule.threshold]
