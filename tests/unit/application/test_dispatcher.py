from __future__ import annotations

import logging
from decimal import Decimal
from uuid import uuid4

import pytest

from src.application.events.dispatcher import dispatch_events
from src.application.events.models import DeliveryRecordedEvent, PaymentPendingEvent
from src.application.notifications.factory import build_notification
from src.application.notifications.types import NotificationType


class FlakyNotifier:
    def __init__(self) -> None:
        self.pending: list = []

    async def notify_delivery(self, seller_id, buyer_id, quantity, unit="L"):
        raise RuntimeError("gateway down")

    async def notify_pending_payment(self, buyer_id, amount):
        self.pending.append((buyer_id, amount))


async def test_failed_notification_is_logged_and_others_still_sent(caplog):
    notifier = FlakyNotifier()
    buyer_id = uuid4()
    events = [
        DeliveryRecordedEvent(
            transaction_id=uuid4(),
            seller_id=uuid4(),
            buyer_id=buyer_id,
            quantity=Decimal("2"),
            unit="L",
        ),
        PaymentPendingEvent(buyer_id=buyer_id, amount=Decimal("250"), month="2024-03"),
    ]
    with caplog.at_level(logging.ERROR):
        await dispatch_events(notifier, events)
    assert notifier.pending == [(buyer_id, Decimal("250"))]
    assert "DeliveryRecordedEvent" in caplog.text


def test_delivery_message_formats_quantity():
    built = build_notification(
        NotificationType.DELIVERY_RECORDED, seller_id=uuid4(), buyer_id=uuid4(), quantity=2
    )
    assert "2.00L" in built.message
    assert built.data["quantity"] == "2.00"


def test_pending_payment_message_formats_amount():
    built = build_notification(
        NotificationType.PAYMENT_PENDING, buyer_id=uuid4(), amount=Decimal("250")
    )
    assert "Rs. 250.00" in built.message


def test_unknown_notification_type_is_rejected():
    with pytest.raises(ValueError):
        build_notification("nope")


class RecordingNotifier:
    def __init__(self) -> None:
        self.deliveries: list = []

    async def notify_delivery(self, seller_id, buyer_id, quantity, unit="L"):
        self.deliveries.append((quantity, unit))


async def test_delivery_unit_reaches_the_notifier():
    notifier = RecordingNotifier()
    event = DeliveryRecordedEvent(
        transaction_id=uuid4(),
        seller_id=uuid4(),
        buyer_id=uuid4(),
        quantity=Decimal("3"),
        unit="kg",
    )
    await dispatch_events(notifier, [event])
    assert notifier.deliveries == [(Decimal("3"), "kg")]


def test_kilogram_delivery_message_uses_its_unit():
    built = build_notification(
        NotificationType.DELIVERY_RECORDED,
        seller_id=uuid4(),
        buyer_id=uuid4(),
        quantity=3,
        unit="kg",
    )
    assert "3.00kg delivered" in built.message
    assert built.data["unit"] == "kg"
