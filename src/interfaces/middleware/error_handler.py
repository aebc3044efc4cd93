from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.errors import AppError, ConflictError, InfrastructureError, RateNotFound

logger = logging.getLogger(__name__)

# Gaps in pricing data or clashing rate keys need an operator, so they log louder.
DATA_ERRORS = (RateNotFound, ConflictError)


def error_payload(exc: AppError) -> dict:
    payload = {"code": exc.code, "message": exc.message}
    if exc.details is not None:
        payload["details"] = jsonable_encoder(dict(exc.details))
    return payload


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:  # noqa: WPS430
        level = logging.WARNING if isinstance(exc, DATA_ERRORS) else logging.INFO
        logger.log(
            level,
            "%s on %s %s: %s %s",
            exc.code,
            request.method,
            request.url.path,
            exc.message,
            dict(exc.details or {}),
        )
        return JSONResponse(status_code=exc.status_code, content=error_payload(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # noqa: WPS430
        return JSONResponse(
            status_code=exc.status_code, content={"code": "http_error", "message": exc.detail}
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:  # noqa: WPS430
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        error = InfrastructureError("Unexpected server error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_payload(error)
        )
