"""Pick the single rate that applies to a delivery.

Precedence, first criterion wins:

1. a rate scoped to the requested session beats a rate that applies to any session;
2. a later ``effective_from`` beats an earlier one;
3. a later ``created_at`` beats an earlier one.

The rate id is used as a last tie-break so that the winner never depends on the
order in which candidates were loaded.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable

from src.application.errors import RateNotFound
from src.domain.models.milk_rate import MilkRate
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType


def _precedence(rate: MilkRate, session: DeliverySession) -> tuple:
    exact = rate.delivery_session is not None and rate.delivery_session == session
    return (exact, rate.effective_from, rate.created_at, str(rate.id))


def resolve_rate(
    candidates: Iterable[MilkRate],
    *,
    milk_type: MilkType,
    session: DeliverySession,
    on_date: date,
) -> MilkRate:
    eligible = [
        rate
        for rate in candidates
        if rate.is_active
        and rate.milk_type == milk_type
        and (rate.delivery_session is None or rate.delivery_session == session)
        and rate.effective_from <= on_date
    ]
    if not eligible:
        raise RateNotFound(
            f"No active milk rate configured for milk_type={milk_type.value}, "
            f"session={session.value}, date={on_date.isoformat()}",
            details={
                "milk_type": milk_type.value,
                "delivery_session": session.value,
                "date": on_date.isoformat(),
            },
        )
    return max(eligible, key=lambda rate: _precedence(rate, session))
