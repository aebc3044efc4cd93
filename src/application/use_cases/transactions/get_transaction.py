from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.milk_transaction import MilkTransaction


async def execute(uow: UnitOfWork, transaction_id: UUID) -> MilkTransaction:
    tx = await uow.milk_transactions.get(transaction_id)
    if not tx:
        raise NotFound("Transaction not found")
    return tx
