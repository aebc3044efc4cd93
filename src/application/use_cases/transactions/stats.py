from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.milk_transaction import UNIT_KILOGRAM, UNIT_LITER, MilkTransaction
from src.domain.models.stats import DeliveryStats, SellerStatsRow
from src.domain.value_objects.transaction_status import TransactionStatus


def summarize(transactions: Iterable[MilkTransaction]) -> DeliveryStats:
    items = list(transactions)
    stats = DeliveryStats(total_transactions=len(items), transactions=items)
    for t in items:
        quantity = t.quantity or Decimal("0")
        stats.total_quantity += quantity
        if t.unit == UNIT_LITER:
            stats.total_liters += quantity
        elif t.unit == UNIT_KILOGRAM:
            stats.total_kg += quantity
        stats.total_amount += t.total_amount or Decimal("0")
        if t.is_delivered:
            stats.delivered_count += 1
    return stats


def _check_range(start: date, end: date) -> None:
    if start > end:
        raise ValidationError("start_date must not be after end_date")


async def for_seller(uow: UnitOfWork, seller_id: UUID, start: date, end: date) -> DeliveryStats:
    _check_range(start, end)
    items = await uow.milk_transactions.list(seller_id=seller_id, date_from=start, date_to=end)
    return summarize(items)


async def for_buyer(uow: UnitOfWork, buyer_id: UUID, start: date, end: date) -> DeliveryStats:
    _check_range(start, end)
    items = await uow.milk_transactions.list(buyer_id=buyer_id, date_from=start, date_to=end)
    return summarize(items)


async def for_all_sellers(
    uow: UnitOfWork,
    *,
    date_from: date | None = None,
    date_to: date | None = None,
    status: TransactionStatus | None = None,
) -> list[SellerStatsRow]:
    if date_from and date_to:
        _check_range(date_from, date_to)
    return await uow.milk_transactions.stats_by_seller(
        date_from=date_from, date_to=date_to, status=status
    )
