from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Response, status

from src.application.errors import ValidationError
from src.application.events.dispatcher import dispatch_events
from src.application.interfaces.notifier import Notifier
from src.application.use_cases.transactions import (
    create_transaction,
    delete_transaction,
    get_transaction,
    list_transactions,
    stats,
    update_transaction,
)
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.transaction_status import TransactionStatus
from src.interfaces.http.deps import get_caller, get_notifier, get_uow
from src.interfaces.http.schemas.milk_transactions import (
    DeliveryStatsResponse,
    MilkTransactionCreate,
    MilkTransactionResponse,
    MilkTransactionUpdate,
    SellerStatsItem,
)

router = APIRouter(prefix="/milk-transactions", tags=["milk-transactions"])


@router.post("/", response_model=MilkTransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_milk_transaction(
    payload: MilkTransactionCreate,
    background_tasks: BackgroundTasks,
    caller: CallerContext = Depends(get_caller),
    notifier: Notifier = Depends(get_notifier),
    uow=Depends(get_uow),
):
    if caller.is_admin:
        seller_id = payload.seller_id
        if seller_id is None:
            raise ValidationError("seller_id is required when recording on behalf of a seller")
    else:
        seller_id = caller.user_id
    created = await create_transaction.execute(
        uow,
        caller,
        seller_id,
        create_transaction.CreateTransactionInput(
            buyer_id=payload.buyer_id,
            date=payload.date,
            quantity=payload.quantity,
            unit=payload.unit,
            status=payload.status,
            delivery_session=payload.resolved_session(),
            milk_type=payload.milk_type,
            remarks=payload.remarks,
        ),
    )
    # Dispatch events post-commit in background (non-blocking)
    events = uow.drain_events()
    if events:
        background_tasks.add_task(dispatch_events, notifier, events)
    return MilkTransactionResponse.model_validate(created)


@router.get("/", response_model=list[MilkTransactionResponse])
async def list_milk_transactions(
    seller_id: UUID | None = Query(None),
    buyer_id: UUID | None = Query(None),
    status_filter: TransactionStatus | None = Query(None, alias="status"),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    items = await list_transactions.execute(
        uow,
        list_transactions.ListTransactionsQuery(
            seller_id=seller_id,
            buyer_id=buyer_id,
            status=status_filter,
            date_from=start_date,
            date_to=end_date,
        ),
    )
    return [MilkTransactionResponse.model_validate(item) for item in items]


@router.get("/sellers/stats", response_model=list[SellerStatsItem])
async def all_sellers_stats(
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    status_filter: TransactionStatus | None = Query(None, alias="status"),
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    rows = await stats.for_all_sellers(
        uow, date_from=start_date, date_to=end_date, status=status_filter
    )
    return [SellerStatsItem.model_validate(row) for row in rows]


@router.get("/seller/{seller_id}/stats", response_model=DeliveryStatsResponse)
async def seller_stats(
    seller_id: UUID,
    start_date: date,
    end_date: date,
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    result = await stats.for_seller(uow, seller_id, start_date, end_date)
    return DeliveryStatsResponse.model_validate(result)


@router.get("/buyer/{buyer_id}/stats", response_model=DeliveryStatsResponse)
async def buyer_stats(
    buyer_id: UUID,
    start_date: date,
    end_date: date,
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    result = await stats.for_buyer(uow, buyer_id, start_date, end_date)
    return DeliveryStatsResponse.model_validate(result)


@router.get("/{transaction_id}", response_model=MilkTransactionResponse)
async def get_milk_transaction(
    transaction_id: UUID,
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    tx = await get_transaction.execute(uow, transaction_id)
    return MilkTransactionResponse.model_validate(tx)


@router.put("/{transaction_id}", response_model=MilkTransactionResponse)
async def update_milk_transaction(
    transaction_id: UUID,
    payload: MilkTransactionUpdate,
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    data = update_transaction.UpdateTransactionInput(
        quantity=payload.quantity,
        unit=payload.unit,
        status=payload.status,
        delivery_session=payload.resolved_session(),
        milk_type=payload.milk_type,
        date=payload.date,
    )
    if "remarks" in payload.model_fields_set:
        data.remarks = payload.remarks
    updated = await update_transaction.execute(uow, caller, transaction_id, data)
    return MilkTransactionResponse.model_validate(updated)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_milk_transaction(
    transaction_id: UUID,
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    await delete_transaction.execute(uow, caller, transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
