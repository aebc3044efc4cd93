from __future__ import annotations

from typing import Iterable
from uuid import UUID

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import AuthError, PermissionDenied
from src.config.settings import Settings
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.role import Role

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health",
    "/docs",
    "/openapi.json",
    "/redoc",
)


class CallerMiddleware(BaseHTTPMiddleware):
    """Builds the CallerContext from headers set by the upstream identity gateway."""

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without caller checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            role_value = request.headers.get(self.settings.caller_role_header)
            if not role_value:
                raise AuthError("Missing caller role")
            try:
                role = Role(role_value.strip().lower())
            except ValueError as exc:
                raise PermissionDenied("Unknown caller role") from exc
            user_id = None
            id_value = request.headers.get(self.settings.caller_id_header)
            if id_value:
                try:
                    user_id = UUID(id_value)
                except ValueError as exc:
                    raise AuthError("Caller id is not a valid UUID") from exc
            if role is not Role.ADMIN and user_id is None:
                raise AuthError("Missing caller id")
            request.state.caller = CallerContext(role=role, user_id=user_id)
            return await call_next(request)
        except (AuthError, PermissionDenied) as exc:
            payload = {"code": exc.code, "message": exc.message}
            if exc.details is not None:
                payload["details"] = exc.details
            return JSONResponse(status_code=exc.status_code, content=payload)
