from __future__ import annotations

from datetime import date

import pytest

from src.application.errors import InvalidPeriod
from src.application.services.billing_period import month_token, resolve_billing_period


def test_month_token_covers_whole_month_in_leap_year():
    period = resolve_billing_period(month="2024-02")
    assert period.start == date(2024, 2, 1)
    assert period.end == date(2024, 2, 29)
    assert period.month == "2024-02"


def test_month_token_wins_over_explicit_pair():
    period = resolve_billing_period(
        month="2024-03", start=date(2024, 1, 5), end=date(2024, 1, 20)
    )
    assert (period.start, period.end) == (date(2024, 3, 1), date(2024, 3, 31))


def test_explicit_pair_uses_start_month_as_token():
    period = resolve_billing_period(start=date(2024, 3, 10), end=date(2024, 4, 9))
    assert period.start == date(2024, 3, 10)
    assert period.end == date(2024, 4, 9)
    assert period.month == "2024-03"


def test_defaults_to_current_month():
    period = resolve_billing_period(today=date(2024, 5, 15))
    assert (period.start, period.end, period.month) == (
        date(2024, 5, 1),
        date(2024, 5, 31),
        "2024-05",
    )


def test_december_rolls_to_last_day():
    period = resolve_billing_period(month="2023-12")
    assert period.end == date(2023, 12, 31)


@pytest.mark.parametrize(
    "token", ["2024-13", "2024-00", "24-01", "2024/01", "2024-1", "2024-02\n", " 2024-02"]
)
def test_malformed_month_token_is_rejected(token):
    with pytest.raises(InvalidPeriod):
        resolve_billing_period(month=token)


def test_partial_pair_is_rejected():
    with pytest.raises(InvalidPeriod):
        resolve_billing_period(start=date(2024, 3, 1))
    with pytest.raises(InvalidPeriod):
        resolve_billing_period(end=date(2024, 3, 1))


def test_reversed_pair_is_rejected():
    with pytest.raises(InvalidPeriod):
        resolve_billing_period(start=date(2024, 3, 10), end=date(2024, 3, 1))


def test_month_token_format():
    assert month_token(date(2024, 7, 31)) == "2024-07"
