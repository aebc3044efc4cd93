from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.value_objects.delivery_session import DeliverySession, session_key
from src.domain.value_objects.milk_type import MilkType


@dataclass(slots=True)
class MilkRate:
    id: UUID
    milk_type: MilkType
    delivery_session: DeliverySession | None
    price_per_unit: Decimal
    effective_from: date
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def session_key(self) -> str:
        return session_key(self.delivery_session)

    @property
    def applies_to_any_session(self) -> bool:
        return self.delivery_session is None

    @classmethod
    def create(
        cls,
        *,
        milk_type: MilkType,
        delivery_session: DeliverySession | None,
        price_per_unit: Decimal,
        effective_from: date,
        is_active: bool = True,
    ) -> MilkRate:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            milk_type=milk_type,
            delivery_session=delivery_session,
            price_per_unit=price_per_unit,
            effective_from=effective_from,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
