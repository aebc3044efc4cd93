from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .types import NotificationType


@dataclass
class BuiltNotification:
    type: str
    message: str
    data: dict[str, Any]


def _fmt(value: Any, decimals: int = 2) -> str:
    """Format numeric-like values with N decimals, falling back to str()."""
    if isinstance(value, (int, float, Decimal)):
        return f"{Decimal(str(value)):.{decimals}f}"
    return str(value)


def build_notification(ntype: str, **kwargs: Any) -> BuiltNotification:
    """
    Central place to build notification message/data from templates.
    Keep strings easy to find and translate.
    """
    if ntype == NotificationType.DELIVERY_RECORDED:
        quantity = kwargs.get("quantity", "0")
        unit: str = kwargs.get("unit") or "L"
        message = f"Milk delivery recorded: {_fmt(quantity)}{unit} delivered. Thank you!"
        data = {
            "seller_id": str(kwargs.get("seller_id")),
            "buyer_id": str(kwargs.get("buyer_id")),
            "quantity": _fmt(quantity),
            "unit": unit,
        }
        return BuiltNotification(type=ntype, message=message, data=data)

    if ntype == NotificationType.PAYMENT_PENDING:
        amount = kwargs.get("amount", "0")
        message = (
            f"You have a pending payment of Rs. {_fmt(amount)}. "
            "Please pay at your earliest convenience."
        )
        data = {"buyer_id": str(kwargs.get("buyer_id")), "amount": _fmt(amount)}
        return BuiltNotification(type=ntype, message=message, data=data)

    raise ValueError(f"Unknown notification type: {ntype}")
