"""
Error Handler Middleware

Every failure leaves the API in one envelope:

    {"error": {"code": "NOT_FOUND", "message": "Video with id 'abc-123' not found", "details": {}}}

Mapping:
========
    ReelfeedException           → its own status_code / error_code
    RequestValidationError      → 400 VALIDATION_ERROR, pydantic errors under details.errors
    pydantic ValidationError    → 400 VALIDATION_ERROR (raised while building a response)
    Starlette HTTPException     → its status, code derived from it (unknown route → 404 NOT_FOUND)
    anything else               → 500 INTERNAL_ERROR, logged with traceback, details hidden
"""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from reelfeed.shared.core.exceptions import ReelfeedException
from reelfeed.shared.core.logging import logger


HTTP_ERROR_CODES = {
    401: "AUTHENTICATION_ERROR",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
}


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        headers=headers,
        content={"error": {"code": code, "message": message, "details": details or {}}},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the envelope handlers on ``app``."""

    @app.exception_handler(ReelfeedException)
    async def reelfeed_exception_handler(request: Request, exc: ReelfeedException) -> JSONResponse:
        logger.warning(
            "Request rejected",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        errors = jsonable_encoder(exc.errors())
        logger.warning("Request validation error", errors=errors, path=request.url.path)
        return error_response(400, "VALIDATION_ERROR", "Request validation failed", {"errors": errors})

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
        return error_response(exc.status_code, code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        # Storage failures and bugs; the client never sees the cause
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return error_response(500, "INTERNAL_ERROR", "An unexpected error occurred")
