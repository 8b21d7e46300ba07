"""Browser-driven page analysis: validation, aggregation, reporting."""

from .aggregator import ResourceAggregator, classify_content_type
from .browser import BrowserDriver
from .engine import AnalysisEngine
from .errors import AnalysisError, AnalyzerError, ValidationError
from .recommendations import recommend
from .report import build_report
from .validation import normalize_url, validate_url

__all__ = [
    "AnalysisEngine",
    "AnalysisError",
    "AnalyzerError",
    "BrowserDriver",
    "ResourceAggregator",
    "ValidationError",
    "build_report",
    "classify_content_type",
    "normalize_url",
    "recommend",
    "validate_url",
]
