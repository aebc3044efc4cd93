from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.milk_rates import MilkRatesRepository
from src.domain.models.milk_rate import MilkRate
from src.domain.value_objects.delivery_session import DeliverySession, session_key
from src.domain.value_objects.milk_type import MilkType
from src.infrastructure.db.orm.milk_rate import MilkRateORM

DUPLICATE_KEY_MESSAGE = "Rate already exists for this milk_type/session/effective_from combination"


class MilkRatesSQLAlchemyRepository(MilkRatesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MilkRateORM) -> MilkRate:
        return MilkRate(
            id=orm.id,
            milk_type=orm.milk_type,
            delivery_session=orm.delivery_session,
            price_per_unit=orm.price_per_unit,
            effective_from=orm.effective_from,
            is_active=orm.is_active,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, rate: MilkRate) -> MilkRate:
        orm = MilkRateORM(
            id=rate.id,
            milk_type=rate.milk_type,
            delivery_session=rate.delivery_session,
            session_key=rate.session_key,
            price_per_unit=rate.price_per_unit,
            effective_from=rate.effective_from,
            is_active=rate.is_active,
            created_at=rate.created_at,
            updated_at=rate.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(DUPLICATE_KEY_MESSAGE) from exc
        return self._to_domain(orm)

    async def get(self, rate_id: UUID) -> MilkRate | None:
        result = await self.session.execute(select(MilkRateORM).where(MilkRateORM.id == rate_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_key(
        self,
        milk_type: MilkType,
        delivery_session: DeliverySession | None,
        effective_from: date,
        *,
        exclude_id: UUID | None = None,
    ) -> MilkRate | None:
        conds = [
            MilkRateORM.milk_type == milk_type,
            MilkRateORM.session_key == session_key(delivery_session),
            MilkRateORM.effective_from == effective_from,
        ]
        if exclude_id is not None:
            conds.append(MilkRateORM.id != exclude_id)
        stmt = (
            select(MilkRateORM)
            .where(*conds)
            .order_by(MilkRateORM.updated_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, rate_id: UUID, data: dict) -> MilkRate | None:
        values = dict(data)
        if "delivery_session" in values:
            values["session_key"] = session_key(values["delivery_session"])
        stmt = (
            update(MilkRateORM)
            .where(MilkRateORM.id == rate_id)
            .values(**values)
            .returning(MilkRateORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError(DUPLICATE_KEY_MESSAGE) from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, rate_id: UUID) -> bool:
        result = await self.session.execute(delete(MilkRateORM).where(MilkRateORM.id == rate_id))
        return result.rowcount > 0

    async def list(
        self,
        *,
        milk_type: MilkType | None,
        delivery_session: DeliverySession | None,
        as_of_date: date | None,
        is_active: bool | None,
        include_unscoped: bool,
        offset: int,
        limit: int,
    ) -> list[MilkRate]:
        conds = []
        if milk_type is not None:
            conds.append(MilkRateORM.milk_type == milk_type)
        if delivery_session is not None:
            conds.append(MilkRateORM.delivery_session == delivery_session)
        elif not include_unscoped:
            conds.append(MilkRateORM.delivery_session.is_not(None))
        if as_of_date is not None:
            conds.append(MilkRateORM.effective_from <= as_of_date)
        if is_active is not None:
            conds.append(MilkRateORM.is_active.is_(is_active))
        stmt = (
            select(MilkRateORM)
            .where(*conds)
            .order_by(
                MilkRateORM.effective_from.desc(),
                MilkRateORM.updated_at.desc(),
                MilkRateORM.created_at.desc(),
            )
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def candidates_for(
        self, milk_type: MilkType, delivery_session: DeliverySession, on_or_before: date
    ) -> list[MilkRate]:
        stmt = select(MilkRateORM).where(
            MilkRateORM.milk_type == milk_type,
            MilkRateORM.is_active.is_(True),
            MilkRateORM.effective_from <= on_or_before,
            or_(
                MilkRateORM.delivery_session == delivery_session,
                MilkRateORM.delivery_session.is_(None),
            ),
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]
