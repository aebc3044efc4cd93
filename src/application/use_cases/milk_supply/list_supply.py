from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.milk_supply import MilkSupply
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.role import Role

DEFAULT_LIMIT = 50
MAX_LIMIT = 500


@dataclass(slots=True)
class ListSupplyQuery:
    seller_id: UUID | None = None
    date_from: date | None = None
    date_to: date | None = None
    # Without page and limit every matching entry is returned.
    page: int | None = None
    limit: int | None = None


async def execute(
    uow: UnitOfWork, caller: CallerContext, query: ListSupplyQuery
) -> list[MilkSupply]:
    if not caller.role.can_record_deliveries():
        raise PermissionDenied("Buyers are not allowed to view milk supply")
    seller_id = query.seller_id
    if caller.role is Role.SELLER:
        if seller_id is not None and seller_id != caller.user_id:
            raise PermissionDenied("Sellers can only view their own supply")
        seller_id = caller.user_id
    if query.date_from and query.date_to and query.date_from > query.date_to:
        raise ValidationError("start_date must not be after end_date")

    offset = limit = None
    if query.page is not None or query.limit is not None:
        page = query.page or 1
        limit = query.limit or DEFAULT_LIMIT
        if page < 1:
            raise ValidationError("page must be at least 1")
        if limit > MAX_LIMIT or limit < 1:
            raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}")
        offset = (page - 1) * limit
    return await uow.milk_supply.list(
        seller_id=seller_id,
        date_from=query.date_from,
        date_to=query.date_to,
        offset=offset,
        limit=limit,
    )
