from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.pricing_engine import PricingEngine
from src.domain.models.milk_transaction import MilkTransaction
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.domain.value_objects.role import Role
from src.domain.value_objects.transaction_status import TransactionStatus
from src.utils.datetime_tz import utc_now

# Marks "field not supplied", since None clears the remarks.
UNSET = object()


@dataclass(slots=True)
class UpdateTransactionInput:
    quantity: Decimal | None = None
    unit: str | None = None
    status: TransactionStatus | None = None
    delivery_session: DeliverySession | None = None
    milk_type: MilkType | None = None
    date: date | None = None
    remarks: str | None | object = UNSET


def ensure_can_update(caller: CallerContext, existing: MilkTransaction) -> None:
    if not caller.role.can_record_deliveries():
        raise PermissionDenied("Buyers are not allowed to update milk transactions")
    if caller.role is Role.SELLER and caller.user_id != existing.seller_id:
        raise PermissionDenied("Sellers can only update their own deliveries")


async def execute(
    uow: UnitOfWork,
    caller: CallerContext,
    transaction_id: UUID,
    payload: UpdateTransactionInput,
) -> MilkTransaction:
    existing = await uow.milk_transactions.get(transaction_id)
    if not existing:
        raise NotFound("Transaction not found")
    ensure_can_update(caller, existing)

    data: dict = {}
    for field_name in (
        "quantity",
        "unit",
        "status",
        "delivery_session",
        "milk_type",
        "date",
    ):
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if payload.remarks is not UNSET:
        data["remarks"] = payload.remarks
    changed = set(data)

    patched = dataclasses.replace(existing, **data)
    if patched.status is not TransactionStatus.DELIVERED:
        patched.quantity = Decimal("0")
        data["quantity"] = patched.quantity
    snapshot = await PricingEngine(uow.milk_rates).reprice_if_needed(patched, changed)
    data["price_per_unit"] = snapshot.price_per_unit
    data["total_amount"] = snapshot.total_amount
    data["updated_at"] = utc_now()

    updated = await uow.milk_transactions.update(transaction_id, data)
    if not updated:
        raise NotFound("Transaction not found")
    await uow.commit()
    return updated
