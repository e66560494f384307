"""Paging rules for the visible window."""

from __future__ import annotations

from datetime import date

from .dates import add_months, end_of_month, is_after, is_before, start_of_month, subtract_months
from .grid import build_months
from .models import NavigationConfig, VisibleWindow


def page_step(config: NavigationConfig) -> int:
    """Months moved per next/prev action."""
    return config.number_of_months if config.paged_navigation else 1


def _rebuild(first_month: date, config: NavigationConfig, locale: str | None) -> VisibleWindow:
    return build_months(
        first_month,
        week_starts_on=config.week_starts_on,
        fixed_weeks=config.fixed_weeks,
        number_of_months=config.number_of_months,
        locale=locale,
    )


def next_window(window: VisibleWindow, config: NavigationConfig, locale: str | None = None) -> VisibleWindow:
    """Return a fresh window starting one step after ``window``'s first month."""
    return _rebuild(add_months(window[0].month, page_step(config)), config, locale)


def prev_window(window: VisibleWindow, config: NavigationConfig, locale: str | None = None) -> VisibleWindow:
    """Return a fresh window starting one step before ``window``'s first month."""
    return _rebuild(subtract_months(window[0].month, page_step(config)), config, locale)


def is_next_disabled(window: VisibleWindow, max_value: date | None, disabled: bool = False) -> bool:
    """True when the first day after the window lies beyond ``max_value``."""
    if disabled:
        return True
    if max_value is None or not window:
        return False
    first_day_of_next_page = start_of_month(add_months(window[-1].month, 1))
    return is_after(first_day_of_next_page, max_value)


def is_prev_disabled(window: VisibleWindow, min_value: date | None, disabled: bool = False) -> bool:
    """True when the last day before the window lies before ``min_value``."""
    if disabled:
        return True
    if min_value is None or not window:
        return False
    last_day_of_prev_page = end_of_month(subtract_months(window[0].month, 1))
    return is_before(last_day_of_prev_page, min_value)


__all__ = [
    "is_next_disabled",
    "is_prev_disabled",
    "next_window",
    "page_step",
    "prev_window",
]
