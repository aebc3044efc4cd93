from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.milk_rates.guards import ensure_can_manage_rates
from src.domain.value_objects.caller import CallerContext


async def execute(uow: UnitOfWork, caller: CallerContext, rate_id: UUID) -> None:
    ensure_can_manage_rates(caller)
    ok = await uow.milk_rates.delete(rate_id)
    if not ok:
        raise NotFound("Milk rate not found")
    await uow.commit()
