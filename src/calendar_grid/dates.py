"""Calendar arithmetic helpers over ``datetime.date``."""

from __future__ import annotations

import calendar
from datetime import date, datetime


def to_date(value: date | datetime) -> date:
    """Normalize a datetime to its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(value: date, months: int) -> date:
    """Shift by whole calendar months, clamping the day to the target month."""
    total = value.year * 12 + (value.month - 1) + months
    year, month = total // 12, (total % 12) + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def subtract_months(value: date, months: int) -> date:
    return add_months(value, -months)


def start_of_month(value: date) -> date:
    return value.replace(day=1)


def end_of_month(value: date) -> date:
    return value.replace(day=calendar.monthrange(value.year, value.month)[1])


def day_of_week(value: date) -> int:
    """Return 0..6 with 0 = Sunday."""
    return value.isoweekday() % 7


def compare(a: date, b: date) -> int:
    a, b = to_date(a), to_date(b)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def is_before(a: date, b: date) -> bool:
    return compare(a, b) < 0


def is_after(a: date, b: date) -> bool:
    return compare(a, b) > 0


def is_same_day(a: date, b: date) -> bool:
    return compare(a, b) == 0


def is_same_month(a: date, b: date) -> bool:
    return (a.year, a.month) == (b.year, b.month)


__all__ = [
    "add_months",
    "compare",
    "day_of_week",
    "end_of_month",
    "is_after",
    "is_before",
    "is_same_day",
    "is_same_month",
    "start_of_month",
    "subtract_months",
    "to_date",
]
