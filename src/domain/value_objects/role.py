from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    SELLER = "seller"
    BUYER = "buyer"

    def can_manage_rates(self) -> bool:
        return self is Role.ADMIN

    def can_view_billing(self) -> bool:
        return self is Role.ADMIN

    def can_record_deliveries(self) -> bool:
        return self in {Role.ADMIN, Role.SELLER}
