from __future__ import annotations

from datetime import date as DtDate
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.interfaces.http.schemas.milk_transactions import MilkTransactionResponse


class BillingStatementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    buyer_id: UUID
    month: str
    period_start: DtDate
    period_end: DtDate
    total_delivered_entries: int
    total_quantity: Decimal
    total_amount: Decimal
    payments_applied: Decimal
    net_payable: Decimal
    transactions: list[MilkTransactionResponse]


class PaymentReminderResponse(BaseModel):
    buyer_id: UUID
    month: str
    net_payable: Decimal
    reminder_queued: bool
