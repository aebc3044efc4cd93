from __future__ import annotations

from datetime import date

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.pricing_engine import PricingEngine
from src.domain.models.milk_rate import MilkRate
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType


async def execute(
    uow: UnitOfWork, milk_type: MilkType, session: DeliverySession, on_date: date
) -> MilkRate:
    return await PricingEngine(uow.milk_rates).resolve(milk_type, session, on_date)
