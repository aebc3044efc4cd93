from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from src.application.errors import InvalidQuantity, RateNotFound
from src.application.services.pricing_engine import PricingEngine, round2
from src.domain.models.milk_rate import MilkRate
from src.domain.models.milk_transaction import MilkTransaction
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.domain.value_objects.transaction_status import TransactionStatus


class StubRatesRepo:
    def __init__(self, rates: list[MilkRate]) -> None:
        self.rates = rates
        self.calls: list[tuple] = []

    async def candidates_for(self, milk_type, delivery_session, on_or_before):
        self.calls.append((milk_type, delivery_session, on_or_before))
        return [r for r in self.rates if r.effective_from <= on_or_before]


def _rate(price: str, effective_from: date, session=DeliverySession.MORNING) -> MilkRate:
    return MilkRate.create(
        milk_type=MilkType.COW,
        delivery_session=session,
        price_per_unit=Decimal(price),
        effective_from=effective_from,
    )


def _delivered(quantity="2", price="50", day=date(2024, 3, 5)) -> MilkTransaction:
    qty = Decimal(quantity)
    return MilkTransaction.create(
        seller_id=uuid4(),
        buyer_id=uuid4(),
        date=day,
        quantity=qty,
        price_per_unit=Decimal(price),
        total_amount=round2(qty * Decimal(price)),
    )


def test_round2_rounds_half_up():
    assert round2(Decimal("2.345")) == Decimal("2.35")
    assert round2(Decimal("2.344")) == Decimal("2.34")


async def test_price_for_delivery_multiplies_and_rounds():
    repo = StubRatesRepo([_rate("45.50", date(2024, 1, 1))])
    engine = PricingEngine(repo)
    snapshot = await engine.price_for_delivery(
        TransactionStatus.DELIVERED,
        MilkType.COW,
        DeliverySession.MORNING,
        date(2024, 3, 1),
        Decimal("1.25"),
    )
    assert snapshot.price_per_unit == Decimal("45.50")
    assert snapshot.total_amount == Decimal("56.88")


async def test_non_delivered_is_zero_without_lookup():
    repo = StubRatesRepo([])
    snapshot = await PricingEngine(repo).price_for_delivery(
        TransactionStatus.PENDING,
        MilkType.COW,
        DeliverySession.MORNING,
        date(2024, 3, 1),
        Decimal("3"),
    )
    assert snapshot.price_per_unit == Decimal("0")
    assert snapshot.total_amount == Decimal("0")
    assert repo.calls == []


async def test_missing_rate_propagates():
    with pytest.raises(RateNotFound):
        await PricingEngine(StubRatesRepo([])).price_for_delivery(
            TransactionStatus.DELIVERED,
            MilkType.COW,
            DeliverySession.MORNING,
            date(2024, 3, 1),
            Decimal("1"),
        )


async def test_aware_datetime_is_read_on_utc_calendar():
    repo = StubRatesRepo([_rate("50", date(2024, 3, 1))])
    engine = PricingEngine(repo)
    await engine.resolve(
        MilkType.COW,
        DeliverySession.MORNING,
        datetime(2024, 3, 1, 2, 30, tzinfo=timezone.utc),
    )
    assert repo.calls[0][2] == date(2024, 3, 1)


async def test_unrelated_update_keeps_cached_price():
    repo = StubRatesRepo([_rate("60", date(2024, 1, 1))])
    tx = _delivered(price="50")
    snapshot = await PricingEngine(repo).reprice_if_needed(tx, {"remarks"})
    assert snapshot.price_per_unit == Decimal("50")
    assert snapshot.total_amount == Decimal("100.00")
    assert repo.calls == []


async def test_quantity_change_recomputes_total_from_cached_price():
    repo = StubRatesRepo([_rate("60", date(2024, 1, 1))])
    tx = _delivered(price="50")
    tx.quantity = Decimal("3")
    snapshot = await PricingEngine(repo).reprice_if_needed(tx, {"quantity"})
    assert snapshot.price_per_unit == Decimal("50")
    assert snapshot.total_amount == Decimal("150.00")
    assert repo.calls == []


async def test_date_change_triggers_reprice():
    repo = StubRatesRepo([_rate("50", date(2024, 1, 1)), _rate("56", date(2024, 4, 1))])
    tx = _delivered(price="50")
    tx.date = date(2024, 4, 2)
    snapshot = await PricingEngine(repo).reprice_if_needed(tx, {"date"})
    assert snapshot.price_per_unit == Decimal("56")
    assert snapshot.total_amount == Decimal("112.00")


async def test_missing_cached_price_triggers_reprice():
    repo = StubRatesRepo([_rate("48", date(2024, 1, 1))])
    tx = _delivered(price="0")
    snapshot = await PricingEngine(repo).reprice_if_needed(tx, set())
    assert snapshot.price_per_unit == Decimal("48")
    assert len(repo.calls) == 1


async def test_status_change_away_from_delivered_zeroes():
    repo = StubRatesRepo([_rate("50", date(2024, 1, 1))])
    tx = _delivered()
    tx.status = TransactionStatus.CANCELLED
    snapshot = await PricingEngine(repo).reprice_if_needed(tx, {"status"})
    assert snapshot.price_per_unit == Decimal("0")
    assert snapshot.total_amount == Decimal("0")


async def test_delivered_with_zero_quantity_is_rejected():
    tx = _delivered()
    tx.quantity = Decimal("0")
    with pytest.raises(InvalidQuantity):
        await PricingEngine(StubRatesRepo([])).reprice_if_needed(tx, {"quantity"})
