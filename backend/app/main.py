from __future__ import annotations

import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.app import __version__
from backend.app.core.errors import (
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from backend.app.core.settings import settings
from backend.app.logging_utils import (
    bind_request_context,
    configure_logging,
    get_logger,
)
from backend.app.routers import health, share, summarize

app = FastAPI(title="Meeting Notes Summarizer", version=__version__)

# Configure structured logging for the API once at startup
configure_logging("api", settings.LOG_LEVEL)
logger = get_logger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


# ---------------------------------------------------------------------------
# Request-ID middleware
# ---------------------------------------------------------------------------


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """
    Attach a request_id to logs and echo it back, then log path/method/status
    and latency for every request.
    """
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    bind_request_context(request_id)

    path = request.url.path
    method = request.method
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception(
            "unhandled error in request",
            extra={"path": path, "method": method},
        )
        raise

    response.headers["x-request-id"] = request_id
    logger.info(
        "request handled",
        extra={
            "path": path,
            "method": method,
            "status": response.status_code,
            "duration_ms": round((time.perf_counter() - start) * 1000, 2),
        },
    )
    return response


# ---------------------------------------------------------------------------
# API routers
# ---------------------------------------------------------------------------

app.include_router(health.router)
app.include_router(summarize.router)
app.include_router(share.router)
