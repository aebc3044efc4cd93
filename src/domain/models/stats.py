from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from src.domain.models.milk_transaction import MilkTransaction


@dataclass(slots=True)
class DeliveryStats:
    total_transactions: int = 0
    total_quantity: Decimal = Decimal("0")
    total_liters: Decimal = Decimal("0")
    total_kg: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")
    delivered_count: int = 0
    transactions: list[MilkTransaction] = field(default_factory=list)


@dataclass(slots=True)
class SellerStatsRow:
    seller_id: UUID
    seller_name: str | None
    seller_mobile: str | None
    total_transactions: int
    total_quantity: Decimal
    total_liters: Decimal
    total_kg: Decimal
    total_amount: Decimal
    delivered_count: int
