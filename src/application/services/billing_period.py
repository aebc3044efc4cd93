from __future__ import annotations

import calendar
import re
from datetime import date

from src.application.errors import InvalidPeriod
from src.domain.models.billing import BillingPeriod
from src.utils.datetime_tz import utc_today

MONTH_TOKEN_RE = re.compile(r"(\d{4})-(0[1-9]|1[0-2])")


def month_token(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def resolve_billing_period(
    *,
    month: str | None = None,
    start: date | None = None,
    end: date | None = None,
    today: date | None = None,
) -> BillingPeriod:
    """Turn a month token or an explicit start/end pair into a date range.

    The month token wins when both forms are given. With no input the current
    UTC calendar month is used.
    """
    if month:
        match = MONTH_TOKEN_RE.fullmatch(month)
        if not match:
            raise InvalidPeriod(
                "month must use the YYYY-MM format", details={"month": month}
            )
        first, last = month_bounds(int(match.group(1)), int(match.group(2)))
        return BillingPeriod(start=first, end=last, month=month)

    if start is not None or end is not None:
        if start is None or end is None:
            raise InvalidPeriod(
                "Both start_date and end_date are required when month is not provided"
            )
        if start > end:
            raise InvalidPeriod(
                "start_date must not be after end_date",
                details={"start_date": start.isoformat(), "end_date": end.isoformat()},
            )
        return BillingPeriod(start=start, end=end, month=month_token(start))

    current = today or utc_today()
    first, last = month_bounds(current.year, current.month)
    return BillingPeriod(start=first, end=last, month=month_token(current))
