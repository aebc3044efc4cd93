from __future__ import annotations

import logging
from decimal import Decimal
from uuid import UUID

from src.application.interfaces.notifier import Notifier
from src.application.notifications.factory import build_notification
from src.application.notifications.types import NotificationType

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    """Logs the message that would be sent; used until an SMS gateway is wired."""

    async def notify_delivery(
        self, seller_id: UUID, buyer_id: UUID, quantity: Decimal, unit: str = "L"
    ) -> None:
        built = build_notification(
            NotificationType.DELIVERY_RECORDED,
            seller_id=seller_id,
            buyer_id=buyer_id,
            quantity=quantity,
            unit=unit,
        )
        logger.info("Notification would be sent (%s): %s", built.type, built.message)

    async def notify_pending_payment(self, buyer_id: UUID, amount: Decimal) -> None:
        built = build_notification(
            NotificationType.PAYMENT_PENDING, buyer_id=buyer_id, amount=amount
        )
        logger.info("Notification would be sent (%s): %s", built.type, built.message)
