from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.domain.models.milk_transaction import MilkTransaction


@dataclass(frozen=True, slots=True)
class BillingPeriod:
    start: date
    end: date
    month: str

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(slots=True)
class BillingStatement:
    buyer_id: UUID
    month: str
    period_start: date
    period_end: date
    total_delivered_entries: int
    total_quantity: Decimal
    total_amount: Decimal
    payments_applied: Decimal = Decimal("0")
    net_payable: Decimal = Decimal("0")
    transactions: list[MilkTransaction] = field(default_factory=list)
