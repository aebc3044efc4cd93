from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.milk_rate import MilkRate
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType


class MilkRatesRepository(Protocol):
    async def add(self, rate: MilkRate) -> MilkRate: ...
    async def get(self, rate_id: UUID) -> MilkRate | None: ...
    async def get_by_key(
        self,
        milk_type: MilkType,
        delivery_session: DeliverySession | None,
        effective_from: date,
        *,
        exclude_id: UUID | None = None,
    ) -> MilkRate | None: ...
    async def update(self, rate_id: UUID, data: dict) -> MilkRate | None: ...
    async def delete(self, rate_id: UUID) -> bool: ...
    async def list(
        self,
        *,
        milk_type: MilkType | None,
        delivery_session: DeliverySession | None,
        as_of_date: date | None,
        is_active: bool | None,
        include_unscoped: bool,
        offset: int,
        limit: int,
    ) -> list[MilkRate]: ...
    async def candidates_for(
        self, milk_type: MilkType, delivery_session: DeliverySession, on_or_before: date
    ) -> list[MilkRate]: ...
