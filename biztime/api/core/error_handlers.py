"""Global exception handlers.

ApiError         → its own status and message
HTTPException    → framework 404/405 (unmatched route, wrong method)
Validation error → 400 (non-integer id, body that isn't a JSON object)
Exception        → 500 with a generic message; details go to the log only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from biztime.api.core.errors import (
    DEFAULT_MESSAGES,
    ApiError,
    ErrorKind,
    error_body,
    kind_for_status,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.warning(
            f"{exc.kind.value}: {exc.message}",
            extra=_extra(request, exc.kind, exc.status),
        )
        return JSONResponse(status_code=exc.status, content=exc.to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        kind = kind_for_status(exc.status_code)
        message = exc.detail if isinstance(exc.detail, str) else DEFAULT_MESSAGES[kind]
        logger.warning(
            f"{kind.value}: {message}",
            extra=_extra(request, kind, exc.status_code),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(message, exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra=_extra(request, ErrorKind.BAD_REQUEST, status.HTTP_400_BAD_REQUEST),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(_validation_message(exc), status.HTTP_400_BAD_REQUEST),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
            extra=_extra(request, ErrorKind.UNHANDLED, 500),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                DEFAULT_MESSAGES[ErrorKind.UNHANDLED],
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
        )


def _extra(request: Request, kind: ErrorKind, status_code: int) -> dict:
    return {
        "path": request.url.path,
        "method": request.method,
        "error_kind": kind.value,
        "status": status_code,
    }


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for e in exc.errors():
        loc = ".".join(str(p) for p in e.get("loc", ()))
        parts.append(f"{loc}: {e.get('msg')}" if loc else str(e.get("msg")))
    return "; ".join(parts) or DEFAULT_MESSAGES[ErrorKind.BAD_REQUEST]
