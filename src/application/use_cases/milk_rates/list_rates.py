from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.milk_rates.guards import ensure_can_manage_rates
from src.domain.models.milk_rate import MilkRate
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType

MAX_LIMIT = 500


@dataclass(slots=True)
class ListRatesQuery:
    milk_type: MilkType | None = None
    delivery_session: DeliverySession | None = None
    as_of_date: date | None = None
    is_active: bool | None = None
    # Rates without a session are legacy catch-alls; only shown on request.
    include_unscoped: bool = False
    page: int = 1
    limit: int = 50


async def execute(
    uow: UnitOfWork, caller: CallerContext, query: ListRatesQuery
) -> list[MilkRate]:
    ensure_can_manage_rates(caller)
    if query.page < 1:
        raise ValidationError("page must be at least 1")
    if query.limit <= 0 or query.limit > MAX_LIMIT:
        raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}")
    return await uow.milk_rates.list(
        milk_type=query.milk_type,
        delivery_session=query.delivery_session,
        as_of_date=query.as_of_date,
        is_active=query.is_active,
        include_unscoped=query.include_unscoped,
        offset=(query.page - 1) * query.limit,
        limit=query.limit,
    )
