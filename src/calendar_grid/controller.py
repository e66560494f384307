"""Stateful calendar: visible window, cursor and derived views."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from .dates import is_same_month, start_of_month, to_date
from .formatting import DEFAULT_LOCALE, DateFormatter, LocaleFormatter, heading_label, weekday_labels
from .grid import build_months
from .models import Matcher, NavigationConfig, Selection, VisibleWindow, WEEKDAY_FORMATS, WeekdayFormat
from .navigation import is_next_disabled, is_prev_disabled, next_window, prev_window
from .state import DateStateEvaluator

logger = logging.getLogger(__name__)


class Calendar:
    """Owns the visible months and the cursor that anchors them.

    The window is rebuilt wholesale on every navigation or month change;
    observers never see a partially updated window.
    """

    def __init__(
        self,
        cursor: date,
        config: NavigationConfig | None = None,
        *,
        locale: str | None = None,
        weekday_format: WeekdayFormat = "narrow",
        disabled: bool = False,
        is_date_disabled: Matcher | None = None,
        is_date_unavailable: Matcher | None = None,
        selection: Selection | Callable[[], Selection] = None,
        formatter: LocaleFormatter | None = None,
        on_cursor_change: Callable[[date], None] | None = None,
    ):
        if weekday_format not in WEEKDAY_FORMATS:
            raise ValueError(f"weekday_format must be one of {', '.join(WEEKDAY_FORMATS)}, got {weekday_format!r}")

        self.config = config or NavigationConfig()
        self.weekday_format = weekday_format
        if formatter is None:
            formatter = DateFormatter(locale or DEFAULT_LOCALE)
        elif locale is not None:
            formatter.set_locale(locale)
        self._formatter: LocaleFormatter = formatter
        self._locale = formatter.get_locale()
        self._on_cursor_change = on_cursor_change
        self._state = DateStateEvaluator(
            min_value=self.config.min_value,
            max_value=self.config.max_value,
            is_date_disabled=is_date_disabled,
            is_date_unavailable=is_date_unavailable,
            disabled=disabled,
            selection=selection,
        )

        self._cursor = to_date(cursor)
        self._months: VisibleWindow = self._build(self._cursor)

    def _synced_formatter(self) -> LocaleFormatter:
        if self._formatter.get_locale() != self._locale:
            self._formatter.set_locale(self._locale)
        return self._formatter

    def _build(self, reference: date) -> VisibleWindow:
        return build_months(
            reference,
            week_starts_on=self.config.week_starts_on,
            fixed_weeks=self.config.fixed_weeks,
            number_of_months=self.config.number_of_months,
            locale=self._locale,
        )

    # ------------------------------------------------------------------
    # Inputs owned by the caller
    # ------------------------------------------------------------------
    @property
    def cursor(self) -> date:
        return self._cursor

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, value: str) -> None:
        self._locale = value
        self._formatter.set_locale(value)

    @property
    def formatter(self) -> LocaleFormatter:
        return self._formatter

    @property
    def disabled(self) -> bool:
        return self._state.disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._state.disabled = value

    @property
    def selection(self) -> Selection | Callable[[], Selection]:
        return self._state.selection

    @selection.setter
    def selection(self, value: Selection | Callable[[], Selection]) -> None:
        self._state.selection = value

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    @property
    def months(self) -> VisibleWindow:
        return self._months

    @property
    def visible_months(self) -> list[date]:
        return [grid.month for grid in self._months]

    @property
    def weekday_labels(self) -> list[str]:
        return weekday_labels(self._months, self._synced_formatter(), self.weekday_format)

    @property
    def heading_label(self) -> str:
        return heading_label(self._months, self._synced_formatter())

    @property
    def is_next_disabled(self) -> bool:
        return is_next_disabled(self._months, self.config.max_value, self.disabled)

    @property
    def is_prev_disabled(self) -> bool:
        return is_prev_disabled(self._months, self.config.min_value, self.disabled)

    @property
    def is_invalid_selection(self) -> bool:
        return self._state.is_invalid_selection

    def is_outside_visible_view(self, day: date) -> bool:
        return not any(is_same_month(day, month) for month in self.visible_months)

    def is_date_disabled(self, day: date) -> bool:
        return self._state.is_date_disabled(day)

    def is_date_unavailable(self, day: date) -> bool:
        return self._state.is_date_unavailable(day)

    def is_date_selected(self, day: date) -> bool:
        return self._state.is_date_selected(day)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def next_page(self) -> None:
        self._replace_window(next_window(self._months, self.config, self._locale))

    def prev_page(self) -> None:
        self._replace_window(prev_window(self._months, self.config, self._locale))

    def set_cursor(self, value: date) -> None:
        """Apply a cursor change that did not come from next/prev navigation."""
        value = to_date(value)
        previous = self._cursor
        self._cursor = value
        if is_same_month(value, previous):
            return
        logger.debug(f"Cursor moved {previous.isoformat()} -> {value.isoformat()}, rebuilding window")
        self._months = self._build(value)

    def _replace_window(self, months: VisibleWindow) -> None:
        self._months = months
        self._cursor = start_of_month(months[0].month)
        logger.debug(f"Navigated to {self._cursor.isoformat()}")
        if self._on_cursor_change is not None:
            self._on_cursor_change(self._cursor)


__all__ = ["Calendar"]
