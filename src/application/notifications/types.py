from __future__ import annotations


class NotificationType:
    """Canonical notification type names sent to the outbound channel."""

    DELIVERY_RECORDED = "delivery_recorded"
    PAYMENT_PENDING = "payment_pending"
