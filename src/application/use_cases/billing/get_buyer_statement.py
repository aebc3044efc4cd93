from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.billing_aggregator import build_statement
from src.application.services.billing_period import resolve_billing_period
from src.domain.models.billing import BillingStatement
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.transaction_status import TransactionStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BillingQuery:
    month: str | None = None
    start_date: date | None = None
    end_date: date | None = None


def ensure_can_view_billing(caller: CallerContext) -> None:
    if not caller.role.can_view_billing():
        raise PermissionDenied("Only admin can access buyer billing")


async def execute(
    uow: UnitOfWork,
    caller: CallerContext,
    buyer_id: UUID,
    query: BillingQuery,
    *,
    today: date | None = None,
) -> BillingStatement:
    ensure_can_view_billing(caller)
    period = resolve_billing_period(
        month=query.month, start=query.start_date, end=query.end_date, today=today
    )
    transactions = await uow.milk_transactions.list(
        buyer_id=buyer_id,
        status=TransactionStatus.DELIVERED,
        date_from=period.start,
        date_to=period.end,
    )
    statement = build_statement(buyer_id, period, transactions)
    logger.debug(
        "Billing for buyer %s %s..%s: %s entries, amount=%s",
        buyer_id,
        period.start,
        period.end,
        statement.total_delivered_entries,
        statement.total_amount,
    )
    return statement
