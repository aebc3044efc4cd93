from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.errors import ValidationError
from src.application.use_cases.milk_supply import list_supply, record_supply, sellers_summary
from src.domain.value_objects.caller import CallerContext
from src.interfaces.http.deps import get_caller, get_uow
from src.interfaces.http.schemas.milk_supply import (
    MilkSupplyCreate,
    MilkSupplyResponse,
    SupplySummaryItem,
)

router = APIRouter(prefix="/milk-supply", tags=["milk-supply"])


@router.post("/", response_model=MilkSupplyResponse, status_code=status.HTTP_201_CREATED)
async def record_milk_supply(
    payload: MilkSupplyCreate,
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    if caller.is_admin:
        seller_id = payload.seller_id
        if seller_id is None:
            raise ValidationError("seller_id is required when recording on behalf of a seller")
    else:
        seller_id = caller.user_id
    created = await record_supply.execute(
        uow,
        caller,
        seller_id,
        record_supply.RecordSupplyInput(
            date=payload.date,
            quantity=payload.quantity,
            unit=payload.unit,
            delivery_session=payload.resolved_session(),
            milk_type=payload.milk_type,
            remarks=payload.remarks,
        ),
    )
    return MilkSupplyResponse.model_validate(created)


@router.get("/", response_model=list[MilkSupplyResponse])
async def list_milk_supply(
    seller_id: UUID | None = Query(None),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    page: int | None = Query(None, ge=1),
    limit: int | None = Query(None, ge=1, le=list_supply.MAX_LIMIT),
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    items = await list_supply.execute(
        uow,
        caller,
        list_supply.ListSupplyQuery(
            seller_id=seller_id,
            date_from=start_date,
            date_to=end_date,
            page=page,
            limit=limit,
        ),
    )
    return [MilkSupplyResponse.model_validate(item) for item in items]


@router.get("/sellers/summary", response_model=list[SupplySummaryItem])
async def supply_sellers_summary(
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    rows = await sellers_summary.execute(uow, caller, date_from=start_date, date_to=end_date)
    return [SupplySummaryItem.model_validate(row) for row in rows]
