from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.domain.value_objects.transaction_status import TransactionStatus

UNIT_LITER = "L"
UNIT_KILOGRAM = "kg"


@dataclass(slots=True)
class MilkTransaction:
    id: UUID
    seller_id: UUID
    buyer_id: UUID
    date: date
    quantity: Decimal
    unit: str = UNIT_LITER
    status: TransactionStatus = TransactionStatus.DELIVERED
    delivery_session: DeliverySession = DeliverySession.MORNING
    milk_type: MilkType = MilkType.COW
    remarks: str | None = None
    price_per_unit: Decimal | None = None
    total_amount: Decimal | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_delivered(self) -> bool:
        return self.status is TransactionStatus.DELIVERED

    @classmethod
    def create(
        cls,
        *,
        seller_id: UUID,
        buyer_id: UUID,
        date: date,
        quantity: Decimal,
        price_per_unit: Decimal,
        total_amount: Decimal,
        unit: str = UNIT_LITER,
        status: TransactionStatus = TransactionStatus.DELIVERED,
        delivery_session: DeliverySession = DeliverySession.MORNING,
        milk_type: MilkType = MilkType.COW,
        remarks: str | None = None,
    ) -> MilkTransaction:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            seller_id=seller_id,
            buyer_id=buyer_id,
            date=date,
            quantity=quantity,
            unit=unit,
            status=status,
            delivery_session=delivery_session,
            milk_type=milk_type,
            remarks=remarks,
            price_per_unit=price_per_unit,
            total_amount=total_amount,
            created_at=now,
            updated_at=now,
        )
