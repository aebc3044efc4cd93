from __future__ import annotations

from decimal import Decimal
from typing import Iterable
from uuid import UUID

from src.domain.models.billing import BillingPeriod, BillingStatement
from src.domain.models.milk_transaction import MilkTransaction


def build_statement(
    buyer_id: UUID,
    period: BillingPeriod,
    transactions: Iterable[MilkTransaction],
) -> BillingStatement:
    # Only delivered entries inside the period are billable.
    billable = [
        t
        for t in transactions
        if t.buyer_id == buyer_id
        and t.is_delivered
        and period.contains(t.date)
    ]
    billable.sort(key=lambda t: (t.date, t.created_at), reverse=True)
    total_quantity = sum((t.quantity or Decimal("0") for t in billable), Decimal("0"))
    total_amount = sum((t.total_amount or Decimal("0") for t in billable), Decimal("0"))
    payments_applied = Decimal("0")
    return BillingStatement(
        buyer_id=buyer_id,
        month=period.month,
        period_start=period.start,
        period_end=period.end,
        total_delivered_entries=len(billable),
        total_quantity=total_quantity,
        total_amount=total_amount,
        payments_applied=payments_applied,
        net_payable=total_amount - payments_applied,
        transactions=billable,
    )
