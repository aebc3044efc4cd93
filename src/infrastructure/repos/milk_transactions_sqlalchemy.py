from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import case, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.milk_transactions import (
    MilkTransactionsRepository,
)
from src.domain.models.milk_transaction import UNIT_KILOGRAM, UNIT_LITER, MilkTransaction
from src.domain.models.stats import SellerStatsRow
from src.domain.value_objects.transaction_status import TransactionStatus
from src.infrastructure.db.orm.milk_transaction import MilkTransactionORM
from src.infrastructure.db.orm.user import UserORM


def _dec(value) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0")


class MilkTransactionsSQLAlchemyRepository(MilkTransactionsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MilkTransactionORM) -> MilkTransaction:
        return MilkTransaction(
            id=orm.id,
            seller_id=orm.seller_id,
            buyer_id=orm.buyer_id,
            date=orm.date,
            quantity=orm.quantity,
            unit=orm.unit,
            status=orm.status,
            delivery_session=orm.delivery_session,
            milk_type=orm.milk_type,
            remarks=orm.remarks,
            price_per_unit=orm.price_per_unit,
            total_amount=orm.total_amount,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, tx: MilkTransaction) -> MilkTransaction:
        orm = MilkTransactionORM(
            id=tx.id,
            seller_id=tx.seller_id,
            buyer_id=tx.buyer_id,
            date=tx.date,
            quantity=tx.quantity,
            unit=tx.unit,
            status=tx.status,
            delivery_session=tx.delivery_session,
            milk_type=tx.milk_type,
            remarks=tx.remarks,
            price_per_unit=tx.price_per_unit,
            total_amount=tx.total_amount,
            created_at=tx.created_at,
            updated_at=tx.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, transaction_id: UUID) -> MilkTransaction | None:
        result = await self.session.execute(
            select(MilkTransactionORM).where(MilkTransactionORM.id == transaction_id)
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, transaction_id: UUID, data: dict) -> MilkTransaction | None:
        stmt = (
            update(MilkTransactionORM)
            .where(MilkTransactionORM.id == transaction_id)
            .values(**data)
            .returning(MilkTransactionORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, transaction_id: UUID) -> bool:
        result = await self.session.execute(
            delete(MilkTransactionORM).where(MilkTransactionORM.id == transaction_id)
        )
        return result.rowcount > 0

    async def list(
        self,
        *,
        seller_id: UUID | None = None,
        buyer_id: UUID | None = None,
        status: TransactionStatus | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[MilkTransaction]:
        conds = []
        if seller_id is not None:
            conds.append(MilkTransactionORM.seller_id == seller_id)
        if buyer_id is not None:
            conds.append(MilkTransactionORM.buyer_id == buyer_id)
        if status is not None:
            conds.append(MilkTransactionORM.status == status)
        if date_from:
            conds.append(MilkTransactionORM.date >= date_from)
        if date_to:
            conds.append(MilkTransactionORM.date <= date_to)
        stmt = (
            select(MilkTransactionORM)
            .where(*conds)
            .order_by(MilkTransactionORM.date.desc(), MilkTransactionORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def stats_by_seller(
        self,
        *,
        date_from: date | None,
        date_to: date | None,
        status: TransactionStatus | None,
    ) -> list[SellerStatsRow]:
        t = MilkTransactionORM
        total_quantity = func.sum(t.quantity)
        stmt = (
            select(
                t.seller_id.label("seller_id"),
                UserORM.name.label("seller_name"),
                UserORM.mobile.label("seller_mobile"),
                func.count(t.id).label("total_transactions"),
                total_quantity.label("total_quantity"),
                func.sum(case((t.unit == UNIT_LITER, t.quantity), else_=0)).label("total_liters"),
                func.sum(case((t.unit == UNIT_KILOGRAM, t.quantity), else_=0)).label("total_kg"),
                func.sum(func.coalesce(t.total_amount, 0)).label("total_amount"),
                func.sum(case((t.status == TransactionStatus.DELIVERED, 1), else_=0)).label(
                    "delivered_count"
                ),
            )
            .select_from(t)
            .outerjoin(UserORM, UserORM.id == t.seller_id)
            .group_by(t.seller_id, UserORM.name, UserORM.mobile)
            .order_by(total_quantity.desc())
        )
        if date_from:
            stmt = stmt.where(t.date >= date_from)
        if date_to:
            stmt = stmt.where(t.date <= date_to)
        if status is not None:
            stmt = stmt.where(t.status == status)
        result = await self.session.execute(stmt)
        return [
            SellerStatsRow(
                seller_id=r.seller_id,
                seller_name=r.seller_name,
                seller_mobile=r.seller_mobile,
                total_transactions=int(r.total_transactions or 0),
                total_quantity=_dec(r.total_quantity),
                total_liters=_dec(r.total_liters),
                total_kg=_dec(r.total_kg),
                total_amount=_dec(r.total_amount),
                delivered_count=int(r.delivered_count or 0),
            )
            for r in result.all()
        ]
