"""Exception hierarchy for the analysis pipeline."""


class AnalyzerError(Exception):
    """Base class for errors raised by an analysis run."""


class ValidationError(AnalyzerError):
    """The submitted URL is missing or malformed. Safe to show to the user."""


class AnalysisError(AnalyzerError):
    """The browser could not load the page (launch failure, timeout, crash)."""
