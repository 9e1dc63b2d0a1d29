"""Centralized error handlers for FastAPI.

Maps domain errors to envelope responses. The client only ever sees the
stable code and message of the error; causes and stack traces are logged.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from myblog.application.schemas import RespResult
from myblog.domain.exceptions import ArgumentError, BusinessError, InternalError

logger = logging.getLogger(__name__)


def error_response(error: BusinessError) -> JSONResponse:
    """Render a BusinessError as its envelope and HTTP status."""
    body = RespResult.err(error.code, error.message).model_dump()
    return JSONResponse(status_code=error.status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register the envelope error handlers on the FastAPI application."""

    @app.exception_handler(BusinessError)
    async def handle_business_error(request: Request, exc: BusinessError) -> JSONResponse:
        if isinstance(exc, InternalError):
            logger.error(
                "Internal error on %s %s: %r", request.method, request.url.path, exc.cause
            )
        else:
            logger.warning("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.error("json extractor error, path=%s, %s", request.url.path, exc.errors())
        return error_response(ArgumentError())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Routing errors (404, 405, ...) keep their status but use the envelope body."""
        logger.warning("HTTP %d on %s %s", exc.status_code, request.method, request.url.path)
        body = RespResult.err(ArgumentError.code, str(exc.detail)).model_dump()
        return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals.

        Starlette serves this from its outermost ServerErrorMiddleware: the
        envelope is sent without CORS headers and the exception is re-raised
        afterwards so the server still logs it.
        """
        logger.exception("Unexpected error on %s %s", request.method, request.url.path)
        return error_response(InternalError(exc))
