from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.models.milk_transaction import UNIT_LITER
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType


@dataclass(slots=True)
class MilkSupply:
    """Milk a seller brought in, before any buyer is involved. Never priced."""

    id: UUID
    seller_id: UUID
    date: date
    quantity: Decimal
    unit: str = UNIT_LITER
    delivery_session: DeliverySession = DeliverySession.MORNING
    milk_type: MilkType = MilkType.COW
    remarks: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        seller_id: UUID,
        date: date,
        quantity: Decimal,
        unit: str = UNIT_LITER,
        delivery_session: DeliverySession = DeliverySession.MORNING,
        milk_type: MilkType = MilkType.COW,
        remarks: str | None = None,
    ) -> MilkSupply:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            seller_id=seller_id,
            date=date,
            quantity=quantity,
            unit=unit,
            delivery_session=delivery_session,
            milk_type=milk_type,
            remarks=remarks,
            created_at=now,
            updated_at=now,
        )


@dataclass(slots=True)
class SupplySummaryRow:
    seller_id: UUID
    seller_name: str | None
    seller_mobile: str | None
    total_entries: int
    total_quantity: Decimal
    total_liters: Decimal
    total_kg: Decimal
    morning_entries: int
    evening_entries: int
    cow_entries: int
    buffalo_entries: int
