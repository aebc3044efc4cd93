from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import InvalidQuantity, NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.milk_supply import MilkSupply
from src.domain.models.milk_transaction import UNIT_LITER
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordSupplyInput:
    date: date
    quantity: Decimal
    unit: str | None = None
    delivery_session: DeliverySession | None = None
    milk_type: MilkType | None = None
    remarks: str | None = None


def ensure_can_supply(caller: CallerContext, seller_id: UUID) -> None:
    if not caller.role.can_record_deliveries():
        raise PermissionDenied("Buyers are not allowed to record milk supply")
    if caller.role is Role.SELLER and caller.user_id != seller_id:
        raise PermissionDenied("Sellers can only record their own supply")


async def execute(
    uow: UnitOfWork, caller: CallerContext, seller_id: UUID, payload: RecordSupplyInput
) -> MilkSupply:
    ensure_can_supply(caller, seller_id)
    if payload.quantity <= 0:
        raise InvalidQuantity(
            "Supplied quantity must be greater than 0",
            details={"quantity": str(payload.quantity)},
        )
    if not await uow.users.get(seller_id):
        raise NotFound("Seller not found")

    supply = MilkSupply.create(
        seller_id=seller_id,
        date=payload.date,
        quantity=payload.quantity,
        unit=payload.unit or UNIT_LITER,
        delivery_session=payload.delivery_session or DeliverySession.MORNING,
        milk_type=payload.milk_type or MilkType.COW,
        remarks=payload.remarks,
    )
    created = await uow.milk_supply.add(supply)
    await uow.commit()
    logger.info(
        "Recorded supply %s seller=%s %s%s on %s",
        created.id,
        seller_id,
        created.quantity,
        created.unit,
        created.date,
    )
    return created
