from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.users = None
        self.milk_rates = None
        self.milk_transactions = None
        self.milk_supply = None
        self.events: list = []

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.milk_rates_sqlalchemy import MilkRatesSQLAlchemyRepository
        from src.infrastructure.repos.milk_supply_sqlalchemy import MilkSupplySQLAlchemyRepository
        from src.infrastructure.repos.milk_transactions_sqlalchemy import (
            MilkTransactionsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository

        self.users = UsersSQLAlchemyRepository(self.session)
        self.milk_rates = MilkRatesSQLAlchemyRepository(self.session)
        self.milk_transactions = MilkTransactionsSQLAlchemyRepository(self.session)
        self.milk_supply = MilkSupplySQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self.users = None
            self.milk_rates = None
            self.milk_transactions = None
            self.milk_supply = None

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
        self.events.clear()

    def add_event(self, event: object) -> None:
        self.events.append(event)

    def drain_events(self) -> list:
        events, self.events = self.events, []
        return events
