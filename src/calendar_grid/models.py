"""Data models and config objects for calendar grids."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date
from typing import Literal, Union

from .dates import is_after, is_same_month, to_date

# Days of the week, starting with Sunday.
SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)
DAYS_PER_WEEK = 7
FIXED_WEEKS = 6

DayOfWeek = int
Matcher = Callable[[date], bool]
WeekdayFormat = Literal["narrow", "short", "long"]
Selection = Union[date, Sequence[date], None]

WEEKDAY_FORMATS: tuple[str, ...] = ("narrow", "short", "long")


def never(day: date) -> bool:
    """Matcher used when no predicate is supplied."""
    return False


def validate_week_starts_on(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"week_starts_on must be an integer between 0 and 6, got {value!r}")
    if not 0 <= value <= 6:
        raise ValueError(f"week_starts_on must be between 0 and 6, got {value}")
    return value


def validate_number_of_months(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"number_of_months must be a positive integer, got {value!r}")
    if value < 1:
        raise ValueError(f"number_of_months must be at least 1, got {value}")
    return value


@dataclass(frozen=True)
class MonthGrid:
    """One visible month.

    ``month`` is the first of the month the grid represents. Days of the
    previous and next months are included in ``dates`` to fill out whole
    weeks, so ``month`` is the source of truth for which month is shown.
    """

    month: date
    dates: tuple[date, ...]

    @property
    def weeks(self) -> list[tuple[date, ...]]:
        """The grid split into rows of seven days."""
        return [
            self.dates[i : i + DAYS_PER_WEEK]
            for i in range(0, len(self.dates), DAYS_PER_WEEK)
        ]

    def in_month(self, day: date) -> bool:
        return is_same_month(day, self.month)


VisibleWindow = tuple[MonthGrid, ...]


@dataclass(frozen=True)
class NavigationConfig:
    """Grid shape and navigation options for one calendar."""

    week_starts_on: DayOfWeek = SUNDAY
    fixed_weeks: bool = False
    number_of_months: int = 1
    paged_navigation: bool = False
    min_value: date | None = None
    max_value: date | None = None

    def __post_init__(self) -> None:
        validate_week_starts_on(self.week_starts_on)
        validate_number_of_months(self.number_of_months)
        # Frozen dataclass: normalize bounds through object.__setattr__.
        if self.min_value is not None:
            object.__setattr__(self, "min_value", to_date(self.min_value))
        if self.max_value is not None:
            object.__setattr__(self, "max_value", to_date(self.max_value))
        if (
            self.min_value is not None
            and self.max_value is not None
            and is_after(self.min_value, self.max_value)
        ):
            raise ValueError(
                f"min_value {self.min_value.isoformat()} is after max_value {self.max_value.isoformat()}"
            )


__all__ = [
    "DAYS_PER_WEEK",
    "FIXED_WEEKS",
    "DayOfWeek",
    "Matcher",
    "MonthGrid",
    "NavigationConfig",
    "Selection",
    "VisibleWindow",
    "WEEKDAY_FORMATS",
    "WeekdayFormat",
    "never",
    "validate_number_of_months",
    "validate_week_starts_on",
    "SUNDAY",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
]
