from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.milk_rates.guards import ensure_can_manage_rates
from src.domain.models.milk_rate import MilkRate
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.utils.datetime_tz import utc_now

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpsertRateInput:
    milk_type: MilkType
    delivery_session: DeliverySession | None
    price_per_unit: Decimal
    effective_from: date
    is_active: bool | None = None


async def execute(uow: UnitOfWork, caller: CallerContext, payload: UpsertRateInput) -> MilkRate:
    ensure_can_manage_rates(caller)
    existing = await uow.milk_rates.get_by_key(
        payload.milk_type, payload.delivery_session, payload.effective_from
    )
    if existing:
        # Same day resubmission overwrites the price instead of adding history.
        data: dict = {
            "price_per_unit": payload.price_per_unit,
            "updated_at": utc_now(),
        }
        if payload.is_active is not None:
            data["is_active"] = payload.is_active
        result = await uow.milk_rates.update(existing.id, data)
        logger.info(
            "Merged milk rate %s: %s -> %s",
            existing.id,
            existing.price_per_unit,
            payload.price_per_unit,
        )
    else:
        rate = MilkRate.create(
            milk_type=payload.milk_type,
            delivery_session=payload.delivery_session,
            price_per_unit=payload.price_per_unit,
            effective_from=payload.effective_from,
            is_active=True if payload.is_active is None else payload.is_active,
        )
        result = await uow.milk_rates.add(rate)
        logger.info("Created milk rate %s", result.id)
    await uow.commit()
    return result
