from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.application.use_cases.milk_rates import (
    delete_rate,
    list_rates,
    resolve_rate,
    update_rate,
    upsert_rate,
)
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.delivery_session import DeliverySession, pick_session
from src.domain.value_objects.milk_type import MilkType
from src.interfaces.http.deps import get_caller, get_uow
from src.interfaces.http.schemas.milk_rates import (
    MilkRateCreate,
    MilkRateResponse,
    MilkRateUpdate,
    ResolvedRateResponse,
)

router = APIRouter(prefix="/milk-rates", tags=["milk-rates"])


@router.get("/", response_model=list[MilkRateResponse])
async def list_milk_rates(
    milk_type: MilkType | None = Query(None),
    delivery_session: DeliverySession | None = Query(None),
    shift: DeliverySession | None = Query(None),
    effective_date: date | None = Query(None),
    is_active: bool | None = Query(None),
    include_unscoped: bool = Query(False),
    page: int = Query(1),
    limit: int = Query(50),
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    items = await list_rates.execute(
        uow,
        caller,
        list_rates.ListRatesQuery(
            milk_type=milk_type,
            delivery_session=pick_session(delivery_session, shift),
            as_of_date=effective_date,
            is_active=is_active,
            include_unscoped=include_unscoped,
            page=page,
            limit=limit,
        ),
    )
    return [MilkRateResponse.model_validate(item) for item in items]


@router.get("/resolve", response_model=ResolvedRateResponse)
async def resolve_milk_rate(
    milk_type: MilkType = Query(MilkType.COW),
    delivery_session: DeliverySession = Query(DeliverySession.MORNING),
    on_date: date = Query(alias="date"),
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    rate = await resolve_rate.execute(uow, milk_type, delivery_session, on_date)
    return ResolvedRateResponse(
        rate_id=rate.id,
        milk_type=milk_type,
        delivery_session=delivery_session,
        date=on_date,
        price_per_unit=rate.price_per_unit,
    )


@router.post("/", response_model=MilkRateResponse, status_code=status.HTTP_201_CREATED)
async def create_milk_rate(
    payload: MilkRateCreate,
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    rate = await upsert_rate.execute(
        uow,
        caller,
        upsert_rate.UpsertRateInput(
            milk_type=payload.milk_type,
            delivery_session=payload.resolved_session(),
            price_per_unit=payload.price_per_unit,
            effective_from=payload.effective_from,
            is_active=payload.is_active,
        ),
    )
    return MilkRateResponse.model_validate(rate)


@router.put("/{rate_id}", response_model=MilkRateResponse)
async def update_milk_rate(
    rate_id: UUID,
    payload: MilkRateUpdate,
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    data = update_rate.UpdateRateInput(
        milk_type=payload.milk_type,
        price_per_unit=payload.price_per_unit,
        effective_from=payload.effective_from,
        is_active=payload.is_active,
    )
    if payload.applies_to_all_sessions:
        data.delivery_session = None
    else:
        session = pick_session(payload.delivery_session, payload.shift)
        if session is not None:
            data.delivery_session = session
    rate = await update_rate.execute(uow, caller, rate_id, data)
    return MilkRateResponse.model_validate(rate)


@router.delete("/{rate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_milk_rate(
    rate_id: UUID,
    caller: CallerContext = Depends(get_caller),
    uow=Depends(get_uow),
):
    await delete_rate.execute(uow, caller, rate_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
