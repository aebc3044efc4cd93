from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.application.interfaces.notifier import Notifier
from src.config.settings import Settings, get_settings
from src.infrastructure.db.session import create_engine, create_session_factory
from src.infrastructure.notifications.logging_notifier import LoggingNotifier
from src.infrastructure.notifications.webhook_notifier import WebhookNotifier
from src.interfaces.http.deps import get_app_settings
from src.interfaces.http.routers import billing as billing_router
from src.interfaces.http.routers import milk_rates as rates_router
from src.interfaces.http.routers import milk_supply as supply_router
from src.interfaces.http.routers import milk_transactions as transactions_router
from src.interfaces.middleware.auth_middleware import CallerMiddleware
from src.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine", "httpx"):
        logging.getLogger(name).setLevel(level)


def _build_notifier(settings: Settings) -> Notifier:
    if settings.notification_provider == "webhook":
        if not settings.notification_webhook_url:
            logger.warning("Webhook notifier selected without a URL; falling back to logging")
            return LoggingNotifier()
        return WebhookNotifier(
            settings.notification_webhook_url,
            timeout=settings.notification_timeout_seconds,
        )
    return LoggingNotifier()


def create_app(
    *,
    settings: Settings | None = None,
    notifier: Notifier | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="Milk Ledger Backend",
        version="0.1.0",
        description="Milk delivery ledger: rates, deliveries and monthly billing",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.notifier = notifier or _build_notifier(settings)
    register_error_handlers(app)

    # Group all API routes behind a single versioned prefix
    api = APIRouter(prefix="/api/v1")
    api.include_router(rates_router.router)
    api.include_router(transactions_router.router)
    api.include_router(supply_router.router)
    api.include_router(billing_router.router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:  # noqa: ANN001
        return {"status": "ok"}

    app.include_router(api)

    # Add caller resolution first, then CORS last so CORS runs outermost and can handle preflight
    app.add_middleware(CallerMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
