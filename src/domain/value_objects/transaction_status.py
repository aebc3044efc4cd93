from __future__ import annotations

from enum import Enum


class TransactionStatus(str, Enum):
    PENDING = "pending"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
