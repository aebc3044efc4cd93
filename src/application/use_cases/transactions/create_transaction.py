from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import InvalidQuantity, NotFound, PermissionDenied
from src.application.events.models import DeliveryRecordedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.pricing_engine import PricingEngine
from src.domain.models.milk_transaction import UNIT_LITER, MilkTransaction
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.domain.value_objects.role import Role
from src.domain.value_objects.transaction_status import TransactionStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTransactionInput:
    buyer_id: UUID
    date: date
    quantity: Decimal
    unit: str | None = None
    status: TransactionStatus | None = None
    delivery_session: DeliverySession | None = None
    milk_type: MilkType | None = None
    remarks: str | None = None


def ensure_can_record(caller: CallerContext, seller_id: UUID) -> None:
    if not caller.role.can_record_deliveries():
        raise PermissionDenied("Buyers are not allowed to record milk transactions")
    if caller.role is Role.SELLER and caller.user_id != seller_id:
        raise PermissionDenied("Sellers can only record their own deliveries")


async def execute(
    uow: UnitOfWork,
    caller: CallerContext,
    seller_id: UUID,
    payload: CreateTransactionInput,
) -> MilkTransaction:
    ensure_can_record(caller, seller_id)
    if not await uow.users.get(seller_id):
        raise NotFound("Seller not found")
    if not await uow.users.get(payload.buyer_id):
        raise NotFound("Buyer not found")

    status = payload.status or TransactionStatus.DELIVERED
    session = payload.delivery_session or DeliverySession.MORNING
    milk_type = payload.milk_type or MilkType.COW
    unit = payload.unit or UNIT_LITER
    quantity = payload.quantity if status is TransactionStatus.DELIVERED else Decimal("0")
    if status is TransactionStatus.DELIVERED and quantity <= 0:
        raise InvalidQuantity(
            "Quantity must be greater than 0 for delivered entries",
            details={"quantity": str(quantity)},
        )

    pricing = PricingEngine(uow.milk_rates)
    snapshot = await pricing.price_for_delivery(status, milk_type, session, payload.date, quantity)
    tx = MilkTransaction.create(
        seller_id=seller_id,
        buyer_id=payload.buyer_id,
        date=payload.date,
        quantity=quantity,
        unit=unit,
        status=status,
        delivery_session=session,
        milk_type=milk_type,
        remarks=payload.remarks,
        price_per_unit=snapshot.price_per_unit,
        total_amount=snapshot.total_amount,
    )
    created = await uow.milk_transactions.add(tx)

    if status is TransactionStatus.DELIVERED and quantity > 0:
        uow.add_event(
            DeliveryRecordedEvent(
                transaction_id=created.id,
                seller_id=seller_id,
                buyer_id=payload.buyer_id,
                quantity=quantity,
                unit=unit,
                actor_user_id=caller.user_id,
            )
        )
    await uow.commit()
    logger.info(
        "Recorded transaction %s seller=%s buyer=%s status=%s total=%s",
        created.id,
        seller_id,
        payload.buyer_id,
        status.value,
        snapshot.total_amount,
    )
    return created
