"""HTML analysis form served at GET / and POST /."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.templating import Jinja2Templates

from webperf.analysis.engine import AnalysisEngine
from webperf.analysis.errors import AnalysisError, ValidationError
from webperf.api.routes import get_engine
from webperf.api.service import ANALYSIS_FAILED, analyze_url
from webperf.web.presentation import render_report

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter(include_in_schema=False)


@router.get("/")
async def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"url": "", "error": "", "report": None})


@router.post("/")
async def submit(
    request: Request,
    url: str = Form(""),
    engine: AnalysisEngine = Depends(get_engine),
):
    context = {"url": url, "error": "", "report": None}
    try:
        report = await analyze_url(engine, url)
    except ValidationError as exc:
        context["error"] = str(exc)
        return templates.TemplateResponse(request, "index.html", context, status_code=400)
    except AnalysisError:
        logger.exception("analysis failed", extra={"url": url[:200]})
        context["error"] = ANALYSIS_FAILED
        return templates.TemplateResponse(request, "index.html", context, status_code=500)

    context["report"] = render_report(report)
    return templates.TemplateResponse(request, "index.html", context)
