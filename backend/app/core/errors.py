# app/core/errors.py
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from backend.app.logging_utils import get_logger

log = get_logger(__name__)


class SummarizationError(Exception):
    """The completion API could not produce a summary."""


class DeliveryError(Exception):
    """The mail relay rejected or failed to send a message."""


class ApiError(BaseModel):
    error: str


def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ApiError(error=error).model_dump())


async def http_exception_handler(request: Request, exc: HTTPException):
    # Normalize all HTTPExceptions into {error}
    detail: Any = exc.detail
    if isinstance(detail, dict) and "error" in detail:
        message = str(detail["error"])
    else:
        message = str(detail)
    log.warning("HTTPException", extra={"path": request.url.path, "status": exc.status_code, "error": message})
    return error_response(exc.status_code, message)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    log.warning("ValidationError", extra={"path": request.url.path, "details": exc.errors()})
    return error_response(HTTP_400_BAD_REQUEST, "Invalid request body")


async def generic_exception_handler(request: Request, exc: Exception):
    log.error("Unhandled exception", extra={"path": request.url.path}, exc_info=exc)
    return error_response(HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
