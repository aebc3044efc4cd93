from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.events.models import PaymentPendingEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.billing import get_buyer_statement
from src.domain.models.billing import BillingStatement
from src.domain.value_objects.caller import CallerContext


async def execute(
    uow: UnitOfWork,
    caller: CallerContext,
    buyer_id: UUID,
    query: get_buyer_statement.BillingQuery,
    *,
    today: date | None = None,
) -> tuple[BillingStatement, bool]:
    """Compute the statement and queue a reminder when something is owed.

    Returns the statement and whether a reminder was queued.
    """
    statement = await get_buyer_statement.execute(uow, caller, buyer_id, query, today=today)
    if statement.net_payable <= 0:
        return statement, False
    uow.add_event(
        PaymentPendingEvent(
            buyer_id=buyer_id,
            amount=statement.net_payable,
            month=statement.month,
            actor_user_id=caller.user_id,
        )
    )
    return statement, True
