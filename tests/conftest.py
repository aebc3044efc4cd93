from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from uuid import UUID

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import milk_rate, milk_supply, milk_transaction, user  # noqa: F401
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from src.interfaces.http.main import create_app


class RecordingNotifier:
    def __init__(self) -> None:
        self.deliveries: list[tuple] = []
        self.pending_payments: list[tuple] = []

    async def notify_delivery(self, seller_id, buyer_id, quantity, unit="L") -> None:
        self.deliveries.append((seller_id, buyer_id, quantity, unit))

    async def notify_pending_payment(self, buyer_id, amount) -> None:
        self.pending_payments.append((buyer_id, amount))


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def app(test_settings: Settings, notifier: RecordingNotifier):
    return create_app(settings=test_settings, notifier=notifier)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
        await engine.dispose()


@pytest.fixture()
async def seeded_users(app, client) -> dict[str, UUID]:
    users = {
        "admin": User.create(name="Admin", mobile="9000000001", role=Role.ADMIN),
        "seller": User.create(name="Ramesh", mobile="9000000002", role=Role.SELLER),
        "other_seller": User.create(name="Suresh", mobile="9000000003", role=Role.SELLER),
        "buyer": User.create(name="Anita", mobile="9000000004", role=Role.BUYER),
    }
    uow = SQLAlchemyUnitOfWork(app.state.session_factory)
    async with uow:
        for u in users.values():
            await uow.users.add(u)
        await uow.commit()
    return {key: u.id for key, u in users.items()}


@pytest.fixture()
def headers_for(app, seeded_users):
    settings = app.state.settings

    def _headers(key: str) -> dict[str, str]:
        role = "admin" if key == "admin" else ("buyer" if key == "buyer" else "seller")
        return {
            settings.caller_role_header: role,
            settings.caller_id_header: str(seeded_users[key]),
        }

    return _headers


@pytest.fixture()
async def session_factory(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'repo.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield create_session_factory(engine)
    await engine.dispose()
