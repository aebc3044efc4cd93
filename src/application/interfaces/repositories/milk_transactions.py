from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.milk_transaction import MilkTransaction
from src.domain.models.stats import SellerStatsRow
from src.domain.value_objects.transaction_status import TransactionStatus


class MilkTransactionsRepository(Protocol):
    async def add(self, tx: MilkTransaction) -> MilkTransaction: ...
    async def get(self, transaction_id: UUID) -> MilkTransaction | None: ...
    async def update(self, transaction_id: UUID, data: dict) -> MilkTransaction | None: ...
    async def delete(self, transaction_id: UUID) -> bool: ...
    async def list(
        self,
        *,
        seller_id: UUID | None = None,
        buyer_id: UUID | None = None,
        status: TransactionStatus | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[MilkTransaction]: ...
    async def stats_by_seller(
        self,
        *,
        date_from: date | None,
        date_to: date | None,
        status: TransactionStatus | None,
    ) -> list[SellerStatsRow]: ...
