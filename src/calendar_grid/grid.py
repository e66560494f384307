"""Month grid construction."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from .dates import add_months, day_of_week, end_of_month, start_of_month
from .models import (
    DAYS_PER_WEEK,
    FIXED_WEEKS,
    MonthGrid,
    VisibleWindow,
    validate_number_of_months,
    validate_week_starts_on,
)

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def _first_visible_date(month: date, week_starts_on: int) -> date:
    day = start_of_month(month)
    while day_of_week(day) != week_starts_on:
        day -= ONE_DAY
    return day


def _last_visible_date(month: date, week_starts_on: int) -> date:
    week_ends_on = (week_starts_on + DAYS_PER_WEEK - 1) % DAYS_PER_WEEK
    day = end_of_month(month)
    while day_of_week(day) != week_ends_on:
        day += ONE_DAY
    return day


def _build_grid(month: date, week_starts_on: int, fixed_weeks: bool) -> MonthGrid:
    first = _first_visible_date(month, week_starts_on)
    last = _last_visible_date(month, week_starts_on)

    count = (last - first).days + 1
    if fixed_weeks:
        while count < FIXED_WEEKS * DAYS_PER_WEEK:
            count += DAYS_PER_WEEK

    dates = tuple(first + timedelta(days=offset) for offset in range(count))
    return MonthGrid(month=month, dates=dates)


def build_month(
    reference: date,
    *,
    week_starts_on: int = 0,
    fixed_weeks: bool = False,
) -> MonthGrid:
    """Build the grid for the month containing ``reference``."""
    validate_week_starts_on(week_starts_on)
    return _build_grid(start_of_month(reference), week_starts_on, fixed_weeks)


def build_months(
    reference: date,
    *,
    week_starts_on: int = 0,
    fixed_weeks: bool = False,
    number_of_months: int = 1,
    locale: str | None = None,
) -> VisibleWindow:
    """Build ``number_of_months`` consecutive grids starting at ``reference``'s month.

    Each grid starts on ``week_starts_on`` and ends on the day before it, with
    lead/trail days taken from the neighbouring months. With ``fixed_weeks``
    every grid is padded at the end to six weeks. Dates outside any min/max
    bounds are kept; the grid shape never depends on selection limits.

    ``locale`` is accepted so callers can pass their formatting options
    through unchanged; the week start is explicit, so it does not affect the
    result.
    """
    validate_week_starts_on(week_starts_on)
    validate_number_of_months(number_of_months)

    months = tuple(
        _build_grid(start_of_month(add_months(reference, index)), week_starts_on, fixed_weeks)
        for index in range(number_of_months)
    )
    logger.debug(
        f"Built {len(months)} month grid(s) from {months[0].month.isoformat()} "
        f"(week_starts_on={week_starts_on}, fixed_weeks={fixed_weeks}, locale={locale})"
    )
    return months


__all__ = ["build_month", "build_months"]
