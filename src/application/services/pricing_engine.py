from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from src.application.errors import InvalidQuantity
from src.application.interfaces.repositories.milk_rates import MilkRatesRepository
from src.application.services.rate_resolver import resolve_rate
from src.domain.models.milk_rate import MilkRate
from src.domain.models.milk_transaction import MilkTransaction
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.domain.value_objects.transaction_status import TransactionStatus
from src.utils.datetime_tz import to_utc_date

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# Changing any of these invalidates the cached price of a delivered entry.
REPRICE_TRIGGERS = frozenset({"milk_type", "delivery_session", "status", "date"})


def round2(x: Decimal) -> Decimal:
    return x.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


@dataclass(frozen=True, slots=True)
class PriceSnapshot:
    price_per_unit: Decimal
    total_amount: Decimal

    @classmethod
    def zero(cls) -> PriceSnapshot:
        return cls(price_per_unit=ZERO, total_amount=ZERO)


class PricingEngine:
    def __init__(self, rates: MilkRatesRepository) -> None:
        self.rates = rates

    async def resolve(
        self, milk_type: MilkType, session: DeliverySession, on_date: date | datetime
    ) -> MilkRate:
        day = to_utc_date(on_date)
        candidates = await self.rates.candidates_for(milk_type, session, day)
        return resolve_rate(candidates, milk_type=milk_type, session=session, on_date=day)

    async def price_for_delivery(
        self,
        status: TransactionStatus,
        milk_type: MilkType,
        session: DeliverySession,
        on_date: date | datetime,
        quantity: Decimal,
    ) -> PriceSnapshot:
        if status is not TransactionStatus.DELIVERED:
            return PriceSnapshot.zero()
        rate = await self.resolve(milk_type, session, on_date)
        logger.debug(
            "Resolved rate %s (%s/%s from %s) at %s",
            rate.id,
            rate.milk_type.value,
            "any" if rate.applies_to_any_session else rate.delivery_session.value,
            rate.effective_from,
            rate.price_per_unit,
        )
        return PriceSnapshot(
            price_per_unit=rate.price_per_unit,
            total_amount=round2(quantity * rate.price_per_unit),
        )

    async def reprice_if_needed(
        self, tx: MilkTransaction, changed_fields: Iterable[str]
    ) -> PriceSnapshot:
        """Return the snapshot ``tx`` should carry after an update.

        ``tx`` already holds the patched values; ``changed_fields`` names the
        attributes the update touched.
        """
        if tx.status is not TransactionStatus.DELIVERED:
            return PriceSnapshot.zero()
        quantity = tx.quantity if tx.quantity is not None else ZERO
        if quantity <= 0:
            raise InvalidQuantity(
                "Quantity must be greater than 0 for delivered entries",
                details={"quantity": str(quantity)},
            )
        cached = tx.price_per_unit
        triggered = REPRICE_TRIGGERS.intersection(changed_fields)
        if cached is None or cached <= 0 or triggered:
            logger.info(
                "Repricing transaction %s (cached=%s, changed=%s)",
                tx.id,
                cached,
                sorted(triggered),
            )
            return await self.price_for_delivery(
                tx.status, tx.milk_type, tx.delivery_session, tx.date, quantity
            )
        return PriceSnapshot(price_per_unit=cached, total_amount=round2(quantity * cached))
