from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.milk_rates.guards import ensure_can_manage_rates
from src.domain.models.milk_rate import MilkRate
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.utils.datetime_tz import utc_now

# Marks "field not supplied", since None is a valid session (applies to any session).
UNSET = object()


@dataclass(slots=True)
class UpdateRateInput:
    milk_type: MilkType | None = None
    delivery_session: DeliverySession | None | object = UNSET
    price_per_unit: Decimal | None = None
    effective_from: date | None = None
    is_active: bool | None = None


async def execute(
    uow: UnitOfWork, caller: CallerContext, rate_id: UUID, payload: UpdateRateInput
) -> MilkRate:
    ensure_can_manage_rates(caller)
    existing = await uow.milk_rates.get(rate_id)
    if not existing:
        raise NotFound("Milk rate not found")

    data: dict = {}
    for field_name in ("milk_type", "price_per_unit", "effective_from", "is_active"):
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if payload.delivery_session is not UNSET:
        data["delivery_session"] = payload.delivery_session
    if not data:
        return existing

    milk_type = data.get("milk_type", existing.milk_type)
    session = data.get("delivery_session", existing.delivery_session)
    effective_from = data.get("effective_from", existing.effective_from)
    clash = await uow.milk_rates.get_by_key(
        milk_type, session, effective_from, exclude_id=existing.id
    )
    if clash:
        raise ConflictError(
            "Rate already exists for this milk_type/session/effective_from combination",
            details={"conflicting_rate_id": str(clash.id)},
        )

    data["updated_at"] = utc_now()
    updated = await uow.milk_rates.update(rate_id, data)
    if not updated:
        raise NotFound("Milk rate not found")
    await uow.commit()
    return updated
