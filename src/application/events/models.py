from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class DeliveryRecordedEvent:
    transaction_id: UUID
    seller_id: UUID
    buyer_id: UUID
    quantity: Decimal
    unit: str
    actor_user_id: UUID | None = None


@dataclass(frozen=True)
class PaymentPendingEvent:
    buyer_id: UUID
    amount: Decimal
    month: str
    actor_user_id: UUID | None = None
