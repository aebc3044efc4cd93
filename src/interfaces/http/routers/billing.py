from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query

from src.application.events.dispatcher import dispatch_events
from src.application.interfaces.notifier import Notifier
from src.application.use_cases.billing import get_buyer_statement, notify_pending_payment
from src.domain.value_objects.caller import CallerContext
from src.interfaces.http.deps import get_caller, get_notifier, get_uow
from src.interfaces.http.schemas.billing import BillingStatementResponse, PaymentReminderResponse

router = APIRouter(prefix="/billing", tags=["billing"])


def _billing_query(
    month: str | None = Query(None),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
) -> get_buyer_statement.BillingQuery:
    return get_buyer_statement.BillingQuery(month=month, start_date=start_date, end_date=end_date)


@router.get("/buyers/{buyer_id}", response_model=BillingStatementResponse)
async def buyer_statement(
    buyer_id: UUID,
    query: get_buyer_statement.BillingQuery = Depends(_billing_query),
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    statement = await get_buyer_statement.execute(uow, caller, buyer_id, query)
    return BillingStatementResponse.model_validate(statement)


@router.post("/buyers/{buyer_id}/payment-reminders", response_model=PaymentReminderResponse)
async def send_payment_reminder(
    buyer_id: UUID,
    background_tasks: BackgroundTasks,
    query: get_buyer_statement.BillingQuery = Depends(_billing_query),
    caller: CallerContext = Depends(get_caller),
    notifier: Notifier = Depends(get_notifier),
    uow=Depends(get_uow),
):
    statement, queued = await notify_pending_payment.execute(uow, caller, buyer_id, query)
    events = uow.drain_events()
    if events:
        background_tasks.add_task(dispatch_events, notifier, events)
    return PaymentReminderResponse(
        buyer_id=buyer_id,
        month=statement.month,
        net_payable=statement.net_payable,
        reminder_queued=queued,
    )
