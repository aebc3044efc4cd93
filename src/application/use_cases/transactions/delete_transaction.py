from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.transactions.update_transaction import ensure_can_update
from src.domain.value_objects.caller import CallerContext


async def execute(uow: UnitOfWork, caller: CallerContext, transaction_id: UUID) -> None:
    existing = await uow.milk_transactions.get(transaction_id)
    if not existing:
        raise NotFound("Transaction not found")
    ensure_can_update(caller, existing)
    ok = await uow.milk_transactions.delete(transaction_id)
    if not ok:
        raise NotFound("Transaction not found")
    await uow.commit()
