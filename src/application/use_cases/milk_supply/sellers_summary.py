from __future__ import annotations

from datetime import date

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.milk_supply import SupplySummaryRow
from src.domain.value_objects.caller import CallerContext


async def execute(
    uow: UnitOfWork,
    caller: CallerContext,
    *,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[SupplySummaryRow]:
    """Per-seller supply totals, largest supplier first."""
    if not caller.is_admin:
        raise PermissionDenied("Only admins can view the supply summary")
    if date_from and date_to and date_from > date_to:
        raise ValidationError("start_date must not be after end_date")
    return await uow.milk_supply.summary_by_seller(date_from=date_from, date_to=date_to)
