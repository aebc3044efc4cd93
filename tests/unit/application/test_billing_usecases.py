from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import InvalidPeriod, PermissionDenied
from src.application.events.models import PaymentPendingEvent
from src.application.use_cases.billing import get_buyer_statement, notify_pending_payment
from src.domain.models.milk_transaction import MilkTransaction
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.role import Role

ADMIN = CallerContext(role=Role.ADMIN)


class StubTransactionsRepo:
    def __init__(self, items: list[MilkTransaction]) -> None:
        self.items = items
        self.last_filters: dict | None = None

    async def list(self, **filters):
        self.last_filters = filters
        return list(self.items)


def make_uow(items):
    events: list = []
    return SimpleNamespace(
        milk_transactions=StubTransactionsRepo(items),
        add_event=events.append,
        events=events,
    )


def _tx(buyer_id, day, quantity, total):
    return MilkTransaction.create(
        seller_id=uuid4(),
        buyer_id=buyer_id,
        date=day,
        quantity=Decimal(quantity),
        price_per_unit=Decimal("50"),
        total_amount=Decimal(total),
    )


async def test_statement_for_month_token():
    buyer_id = uuid4()
    uow = make_uow([_tx(buyer_id, date(2024, 2, 10), "2", "100")])
    statement = await get_buyer_statement.execute(
        uow, ADMIN, buyer_id, get_buyer_statement.BillingQuery(month="2024-02")
    )
    assert statement.total_amount == Decimal("100")
    assert uow.milk_transactions.last_filters["date_from"] == date(2024, 2, 1)
    assert uow.milk_transactions.last_filters["date_to"] == date(2024, 2, 29)


async def test_statement_defaults_to_current_month():
    buyer_id = uuid4()
    statement = await get_buyer_statement.execute(
        make_uow([]), ADMIN, buyer_id, get_buyer_statement.BillingQuery(), today=date(2024, 5, 15)
    )
    assert statement.month == "2024-05"
    assert statement.period_end == date(2024, 5, 31)


@pytest.mark.parametrize("role", [Role.SELLER, Role.BUYER])
async def test_billing_is_admin_only(role):
    with pytest.raises(PermissionDenied):
        await get_buyer_statement.execute(
            make_uow([]),
            CallerContext(role=role, user_id=uuid4()),
            uuid4(),
            get_buyer_statement.BillingQuery(month="2024-02"),
        )


async def test_invalid_period_is_reported():
    with pytest.raises(InvalidPeriod):
        await get_buyer_statement.execute(
            make_uow([]),
            ADMIN,
            uuid4(),
            get_buyer_statement.BillingQuery(start_date=date(2024, 3, 1)),
        )


async def test_reminder_queued_when_amount_is_due():
    buyer_id = uuid4()
    uow = make_uow([_tx(buyer_id, date(2024, 2, 10), "3", "150")])
    statement, queued = await notify_pending_payment.execute(
        uow, ADMIN, buyer_id, get_buyer_statement.BillingQuery(month="2024-02")
    )
    assert queued is True
    assert statement.net_payable == Decimal("150")
    assert uow.events == [
        PaymentPendingEvent(buyer_id=buyer_id, amount=Decimal("150"), month="2024-02")
    ]


async def test_no_reminder_when_nothing_is_due():
    uow = make_uow([])
    _, queued = await notify_pending_payment.execute(
        uow, ADMIN, uuid4(), get_buyer_statement.BillingQuery(month="2024-02")
    )
    assert queued is False
    assert uow.events == []
