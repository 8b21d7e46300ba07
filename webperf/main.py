"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from webperf.analysis.engine import AnalysisEngine
from webperf.analysis.errors import AnalysisError, ValidationError
from webperf.api.routes import router as api_router
from webperf.api.service import ANALYSIS_FAILED, classify_request_errors
from webperf.config import get_settings
from webperf.logging_config import setup_logging
from webperf.web.routes import router as web_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting performance analyzer")

    app.state.settings = settings
    app.state.engine = AnalysisEngine(settings)

    logger.info(
        "performance analyzer ready",
        extra={
            "navigation_timeout_ms": settings.navigation_timeout_ms,
            "browser_headless": settings.browser_headless,
            "browser_sandbox": settings.browser_sandbox,
            "max_concurrent_browsers": settings.max_concurrent_browsers,
        },
    )
    if not settings.browser_sandbox:
        logger.warning("chromium sandbox disabled; run inside an isolated container")

    yield

    logger.info("shutting down performance analyzer")


app = FastAPI(title="URL Performance Analyzer", lifespan=lifespan)
app.include_router(api_router)
app.include_router(web_router)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    if request.url.path != "/api/analyze":
        return await request_validation_exception_handler(request, exc)
    status_code, message = classify_request_errors(exc.errors())
    logger.warning("rejected analyze request body", extra={"status": status_code, "errors": len(exc.errors())})
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    # The cause stays in the server log; clients only see the generic message.
    logger.error("analysis failed", extra={"path": request.url.path}, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": ANALYSIS_FAILED})


@app.get("/health")
async def health():
    return {"status": "ok"}
