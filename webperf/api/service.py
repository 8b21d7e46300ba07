"""Service layer: validates input and runs analyses for the routes."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from webperf.analysis.engine import AnalysisEngine
from webperf.analysis.validation import INVALID_URL, URL_REQUIRED, validate_url
from webperf.api.schemas import PerformanceReport

logger = logging.getLogger(__name__)

ANALYSIS_FAILED = "Failed to analyze website performance. Please check if the URL is accessible."


async def analyze_url(engine: AnalysisEngine, raw_url: str | None) -> PerformanceReport:
    """Validate *raw_url* and run one analysis on its normalized form.

    Raises ``ValidationError`` for bad input and ``AnalysisError`` when the
    browser cannot load the page.
    """
    url = validate_url(raw_url)
    if url != (raw_url or "").strip():
        logger.debug("url normalized", extra={"raw_url": raw_url[:200], "url": url})
    return await engine.run(url)


def classify_request_errors(errors: Sequence[dict[str, Any]]) -> tuple[int, str]:
    """Map body validation errors for /api/analyze to (status, message).

    An unreadable or absent body is treated like any other failure to start
    the analysis; a ``url`` of the wrong type is a malformed URL.
    """
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if error.get("type") == "json_invalid" or (loc == ("body",) and error.get("type") == "missing"):
            return 500, ANALYSIS_FAILED
    if any(tuple(error.get("loc", ()))[:2] == ("body", "url") for error in errors):
        return 400, INVALID_URL
    return 400, URL_REQUIRED
