"""Request/response Pydantic models."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True, "frozen": True}


class AnalyzeRequest(BaseModel):
    # Missing and empty are both reported as "URL is required".
    url: str | None = None


class ResourceTotals(BaseModel):
    model_config = _CAMEL

    total: int = 0
    html: int = 0
    css: int = 0
    js: int = 0
    images: int = 0
    other: int = 0


class PerformanceReport(BaseModel):
    """Result of one analysis run, serialized with camelCase keys."""

    model_config = _CAMEL

    url: str
    load_time: int
    request_count: int
    page_size: ResourceTotals
    timestamp: str
    recommendations: list[str] | None = None


class ErrorResponse(BaseModel):
    error: str
