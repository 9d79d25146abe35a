# app/routers/health.py

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse

from backend.app import __version__

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
def root() -> str:
    """Liveness string for quick manual checks."""
    return "Backend server is running!"


@router.get("/healthz", operation_id="healthz")
def healthz():
    return {"status": "ok", "service": "meeting-notes-summarizer", "version": __version__}


@router.head("/healthz", include_in_schema=False)
def healthz_head():
    return Response(status_code=200)
