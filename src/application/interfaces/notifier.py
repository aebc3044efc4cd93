from __future__ import annotations

from decimal import Decimal
from typing import Protocol
from uuid import UUID


class Notifier(Protocol):
    """Outbound channel for seller/buyer messages (SMS, WhatsApp, webhooks...).

    Calls are best-effort: callers never depend on their outcome.
    """

    async def notify_delivery(
        self, seller_id: UUID, buyer_id: UUID, quantity: Decimal, unit: str = "L"
    ) -> None: ...

    async def notify_pending_payment(self, buyer_id: UUID, amount: Decimal) -> None: ...
