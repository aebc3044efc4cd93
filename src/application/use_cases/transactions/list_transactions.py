from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.milk_transaction import MilkTransaction
from src.domain.value_objects.transaction_status import TransactionStatus


@dataclass(slots=True)
class ListTransactionsQuery:
    seller_id: UUID | None = None
    buyer_id: UUID | None = None
    status: TransactionStatus | None = None
    date_from: date | None = None
    date_to: date | None = None


async def execute(uow: UnitOfWork, query: ListTransactionsQuery) -> list[MilkTransaction]:
    return await uow.milk_transactions.list(
        seller_id=query.seller_id,
        buyer_id=query.buyer_id,
        status=query.status,
        date_from=query.date_from,
        date_to=query.date_to,
    )
