from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from src.application.errors import AuthError
from src.application.interfaces.notifier import Notifier
from src.config.settings import Settings, get_settings
from src.domain.value_objects.caller import CallerContext
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_caller(request: Request) -> CallerContext:
    caller = getattr(request.state, "caller", None)
    if caller is None:
        raise AuthError("Caller identity required")
    return caller


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings() -> Settings:
    return get_settings()


def get_notifier(request: Request) -> Notifier:
    notifier = getattr(request.app.state, "notifier", None)
    if notifier is None:
        raise RuntimeError("Notifier not configured")
    return notifier
