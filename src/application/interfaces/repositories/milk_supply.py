from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.milk_supply import MilkSupply, SupplySummaryRow


class MilkSupplyRepository(Protocol):
    async def add(self, supply: MilkSupply) -> MilkSupply: ...
    async def list(
        self,
        *,
        seller_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[MilkSupply]: ...
    async def summary_by_seller(
        self, *, date_from: date | None, date_to: date | None
    ) -> list[SupplySummaryRow]: ...
