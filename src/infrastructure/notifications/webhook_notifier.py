from __future__ import annotations

import logging
from decimal import Decimal
from uuid import UUID

import httpx

from src.application.interfaces.notifier import Notifier
from src.application.notifications.factory import BuiltNotification, build_notification
from src.application.notifications.types import NotificationType

logger = logging.getLogger(__name__)


class WebhookNotifier(Notifier):
    """Posts notifications as JSON to an SMS/WhatsApp relay."""

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    async def _post(self, built: BuiltNotification) -> None:
        payload = {"type": built.type, "message": built.message, "data": built.data}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.post(self.endpoint, json=payload)
            if resp.status_code >= 400:
                logger.error("Notification webhook error %s: %s", resp.status_code, resp.text)
            else:
                logger.debug("Notification sent: %s", built.type)

    async def notify_delivery(
        self, seller_id: UUID, buyer_id: UUID, quantity: Decimal, unit: str = "L"
    ) -> None:
        await self._post(
            build_notification(
                NotificationType.DELIVERY_RECORDED,
                seller_id=seller_id,
                buyer_id=buyer_id,
                quantity=quantity,
                unit=unit,
            )
        )

    async def notify_pending_payment(self, buyer_id: UUID, amount: Decimal) -> None:
        await self._post(
            build_notification(NotificationType.PAYMENT_PENDING, buyer_id=buyer_id, amount=amount)
        )
