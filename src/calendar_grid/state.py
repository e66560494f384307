"""Per-date state checks: disabled, unavailable, selected."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from .dates import is_after, is_before, is_same_day, to_date
from .models import Matcher, Selection, never


class DateStateEvaluator:
    """Classify dates against bounds, matchers and the current selection.

    ``selection`` is owned by the caller. It may be a date, a sequence of
    dates, ``None``, or a zero-argument callable returning one of those.
    """

    def __init__(
        self,
        *,
        min_value: date | None = None,
        max_value: date | None = None,
        is_date_disabled: Matcher | None = None,
        is_date_unavailable: Matcher | None = None,
        disabled: bool = False,
        selection: Selection | Callable[[], Selection] = None,
    ):
        self.min_value = to_date(min_value) if min_value is not None else None
        self.max_value = to_date(max_value) if max_value is not None else None
        self._disabled_matcher: Matcher = is_date_disabled or never
        self._unavailable_matcher: Matcher = is_date_unavailable or never
        self.disabled = disabled
        self.selection = selection

    def _current_selection(self) -> Selection:
        if callable(self.selection):
            return self.selection()
        return self.selection

    def is_date_disabled(self, day: date) -> bool:
        if self._disabled_matcher(day) or self.disabled:
            return True
        if self.max_value is not None and is_after(day, self.max_value):
            return True
        if self.min_value is not None and is_before(day, self.min_value):
            return True
        return False

    def is_date_unavailable(self, day: date) -> bool:
        return bool(self._unavailable_matcher(day))

    def is_date_selected(self, day: date) -> bool:
        selected = self._current_selection()
        if selected is None:
            return False
        if isinstance(selected, date):
            return is_same_day(selected, day)
        return any(is_same_day(item, day) for item in selected)

    @property
    def is_invalid_selection(self) -> bool:
        """True if any selected date is disabled or unavailable."""
        selected = self._current_selection()
        if selected is None:
            return False
        items = [selected] if isinstance(selected, date) else list(selected)
        for item in items:
            if self.is_date_disabled(item) or self.is_date_unavailable(item):
                return True
        return False


__all__ = ["DateStateEvaluator"]
