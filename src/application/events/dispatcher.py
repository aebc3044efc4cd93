from __future__ import annotations

import logging
from typing import Iterable

from src.application.events.models import DeliveryRecordedEvent, PaymentPendingEvent
from src.application.interfaces.notifier import Notifier

logger = logging.getLogger(__name__)


async def dispatch_events(notifier: Notifier, events: Iterable[object]) -> None:
    """
    Dispatch events post-commit. Failures are logged and never propagated, so a
    notification outage cannot affect the write that produced the event.
    Safe to call in a background task.
    """
    events = list(events)
    if not events:
        return

    for event in events:
        try:
            if isinstance(event, DeliveryRecordedEvent):
                await notifier.notify_delivery(
                    event.seller_id, event.buyer_id, event.quantity, unit=event.unit
                )
                logger.debug("Delivery notification sent for transaction %s", event.transaction_id)
            elif isinstance(event, PaymentPendingEvent):
                await notifier.notify_pending_payment(event.buyer_id, event.amount)
            else:
                logger.debug("No handler for event %s", type(event).__name__)
        except Exception as e:
            logger.error("Error dispatching event %s: %s", type(event).__name__, e, exc_info=True)
