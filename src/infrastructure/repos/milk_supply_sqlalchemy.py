from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.milk_supply import MilkSupplyRepository
from src.domain.models.milk_supply import MilkSupply, SupplySummaryRow
from src.domain.models.milk_transaction import UNIT_KILOGRAM, UNIT_LITER
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.infrastructure.db.orm.milk_supply import MilkSupplyORM
from src.infrastructure.db.orm.user import UserORM


def _dec(value) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0")


def _count_where(condition):
    return func.sum(case((condition, 1), else_=0))


class MilkSupplySQLAlchemyRepository(MilkSupplyRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MilkSupplyORM) -> MilkSupply:
        return MilkSupply(
            id=orm.id,
            seller_id=orm.seller_id,
            date=orm.date,
            quantity=orm.quantity,
            unit=orm.unit,
            delivery_session=orm.delivery_session,
            milk_type=orm.milk_type,
            remarks=orm.remarks,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, supply: MilkSupply) -> MilkSupply:
        orm = MilkSupplyORM(
            id=supply.id,
            seller_id=supply.seller_id,
            date=supply.date,
            quantity=supply.quantity,
            unit=supply.unit,
            delivery_session=supply.delivery_session,
            milk_type=supply.milk_type,
            remarks=supply.remarks,
            created_at=supply.created_at,
            updated_at=supply.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(
        self,
        *,
        seller_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[MilkSupply]:
        conds = []
        if seller_id is not None:
            conds.append(MilkSupplyORM.seller_id == seller_id)
        if date_from:
            conds.append(MilkSupplyORM.date >= date_from)
        if date_to:
            conds.append(MilkSupplyORM.date <= date_to)
        stmt = (
            select(MilkSupplyORM)
            .where(*conds)
            .order_by(MilkSupplyORM.date.desc(), MilkSupplyORM.created_at.desc())
        )
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def summary_by_seller(
        self, *, date_from: date | None, date_to: date | None
    ) -> list[SupplySummaryRow]:
        s = MilkSupplyORM
        total_quantity = func.sum(s.quantity)
        stmt = (
            select(
                s.seller_id.label("seller_id"),
                UserORM.name.label("seller_name"),
                UserORM.mobile.label("seller_mobile"),
                func.count(s.id).label("total_entries"),
                total_quantity.label("total_quantity"),
                func.sum(case((s.unit == UNIT_LITER, s.quantity), else_=0)).label("total_liters"),
                func.sum(case((s.unit == UNIT_KILOGRAM, s.quantity), else_=0)).label("total_kg"),
                _count_where(s.delivery_session == DeliverySession.MORNING).label(
                    "morning_entries"
                ),
                _count_where(s.delivery_session == DeliverySession.EVENING).label(
                    "evening_entries"
                ),
                _count_where(s.milk_type == MilkType.COW).label("cow_entries"),
                _count_where(s.milk_type == MilkType.BUFFALO).label("buffalo_entries"),
            )
            .select_from(s)
            .outerjoin(UserORM, UserORM.id == s.seller_id)
            .group_by(s.seller_id, UserORM.name, UserORM.mobile)
            .order_by(total_quantity.desc())
        )
        if date_from:
            stmt = stmt.where(s.date >= date_from)
        if date_to:
            stmt = stmt.where(s.date <= date_to)
        result = await self.session.execute(stmt)
        return [
            SupplySummaryRow(
                seller_id=r.seller_id,
                seller_name=r.seller_name,
                seller_mobile=r.seller_mobile,
                total_entries=int(r.total_entries or 0),
                total_quantity=_dec(r.total_quantity),
                total_liters=_dec(r.total_liters),
                total_kg=_dec(r.total_kg),
                morning_entries=int(r.morning_entries or 0),
                evening_entries=int(r.evening_entries or 0),
                cow_entries=int(r.cow_entries or 0),
                buffalo_entries=int(r.buffalo_entries or 0),
            )
            for r in result.all()
        ]
