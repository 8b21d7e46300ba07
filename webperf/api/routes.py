"""POST /api/analyze endpoint handler."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from webperf.analysis.engine import AnalysisEngine
from webperf.api.schemas import AnalyzeRequest, ErrorResponse, PerformanceReport
from webperf.api.service import analyze_url

router = APIRouter(prefix="/api")


def get_engine(request: Request) -> AnalysisEngine:
    return request.app.state.engine


@router.post(
    "/analyze",
    response_model=PerformanceReport,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(
    body: AnalyzeRequest,
    engine: AnalysisEngine = Depends(get_engine),
):
    # ValidationError / AnalysisError are mapped to JSON errors in main.py.
    return await analyze_url(engine, body.url)
