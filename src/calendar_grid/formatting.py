"""Locale-aware labels: heading text and weekday names."""

from __future__ import annotations

import calendar
import logging
import re
from datetime import date
from typing import Protocol

from .models import DAYS_PER_WEEK, WEEKDAY_FORMATS, VisibleWindow, WeekdayFormat

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

# Indexed by date.weekday() (Monday = 0).
JA_WEEKDAY_LABELS = ["月", "火", "水", "木", "金", "土", "日"]


class LocaleFormatter(Protocol):
    """Formatting capability consumed by the heading and weekday labels."""

    def get_locale(self) -> str: ...

    def set_locale(self, locale: str) -> None: ...

    def month_name(self, value: date) -> str: ...

    def year_label(self, value: date) -> str: ...

    def month_and_year(self, value: date) -> str: ...

    def weekday_name(self, value: date, format: WeekdayFormat = "narrow") -> str: ...


def _language(locale: str) -> str:
    return re.split(r"[-_]", locale.strip(), maxsplit=1)[0].lower()


def _en_month(value: date) -> str:
    return calendar.month_name[value.month]


def _en_year(value: date) -> str:
    return str(value.year)


def _en_month_year(value: date) -> str:
    return f"{calendar.month_name[value.month]} {value.year}"


def _en_weekday(value: date, format: str) -> str:
    if format == "long":
        return calendar.day_name[value.weekday()]
    if format == "short":
        return calendar.day_abbr[value.weekday()]
    return calendar.day_name[value.weekday()][0]


def _ja_month(value: date) -> str:
    return f"{value.month}月"


def _ja_year(value: date) -> str:
    return f"{value.year}年"


def _ja_month_year(value: date) -> str:
    return f"{value.year}年{value.month}月"


def _ja_weekday(value: date, format: str) -> str:
    label = JA_WEEKDAY_LABELS[value.weekday()]
    if format == "long":
        return f"{label}曜日"
    return label


_LANGUAGES = {
    "en": (_en_month, _en_year, _en_month_year, _en_weekday),
    "ja": (_ja_month, _ja_year, _ja_month_year, _ja_weekday),
}


class DateFormatter:
    """Name tables for the supported languages.

    Locale tags are matched on their language subtag, so ``en-US`` and
    ``ja_JP`` work. Unknown languages fall back to English.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = DEFAULT_LOCALE
        self._language = DEFAULT_LOCALE
        self.set_locale(locale)

    def get_locale(self) -> str:
        return self._locale

    def set_locale(self, locale: str) -> None:
        language = _language(locale or DEFAULT_LOCALE)
        if language not in _LANGUAGES:
            logger.warning(f"Unsupported locale {locale!r}, falling back to {DEFAULT_LOCALE!r}")
            language = DEFAULT_LOCALE
        self._locale = locale
        self._language = language

    def month_name(self, value: date) -> str:
        return _LANGUAGES[self._language][0](value)

    def year_label(self, value: date) -> str:
        return _LANGUAGES[self._language][1](value)

    def month_and_year(self, value: date) -> str:
        return _LANGUAGES[self._language][2](value)

    def weekday_name(self, value: date, format: WeekdayFormat = "narrow") -> str:
        if format not in WEEKDAY_FORMATS:
            raise ValueError(f"weekday format must be one of {', '.join(WEEKDAY_FORMATS)}, got {format!r}")
        return _LANGUAGES[self._language][3](value, format)


def heading_label(window: VisibleWindow, formatter: LocaleFormatter) -> str:
    """Human-readable label for the months in view."""
    if not window:
        return ""

    if len(window) == 1:
        return formatter.month_and_year(window[0].month)

    start_month = window[0].month
    end_month = window[-1].month
    start_name = formatter.month_name(start_month)
    end_name = formatter.month_name(end_month)
    start_year = formatter.year_label(start_month)
    end_year = formatter.year_label(end_month)

    if start_month.year == end_month.year:
        return f"{start_name} - {end_name} {end_year}"
    return f"{start_name} {start_year} - {end_name} {end_year}"


def weekday_labels(
    window: VisibleWindow,
    formatter: LocaleFormatter,
    format: WeekdayFormat = "narrow",
) -> list[str]:
    """Weekday names for one grid row, in grid order."""
    if not window:
        return []
    return [formatter.weekday_name(day, format) for day in window[0].dates[:DAYS_PER_WEEK]]


__all__ = [
    "DEFAULT_LOCALE",
    "DateFormatter",
    "LocaleFormatter",
    "heading_label",
    "weekday_labels",
]
