"""Tests for heading and weekday labels."""

import logging
from datetime import date

import pytest

from calendar_grid.formatting import DateFormatter, heading_label, weekday_labels
from calendar_grid.grid import build_months
from calendar_grid.models import MONDAY


class TestHeadingLabel:
    """Tests for the visible-range heading."""

    def test_single_month(self):
        window = build_months(date(2024, 6, 1))
        assert heading_label(window, DateFormatter("en")) == "June 2024"

    def test_same_year_range(self):
        window = build_months(date(2024, 6, 1), number_of_months=2)
        assert heading_label(window, DateFormatter("en")) == "June - July 2024"

    def test_range_crossing_years(self):
        window = build_months(date(2024, 12, 1), number_of_months=2)
        assert heading_label(window, DateFormatter("en")) == "December 2024 - January 2025"

    def test_empty_window(self):
        assert heading_label((), DateFormatter("en")) == ""

    def test_japanese(self):
        formatter = DateFormatter("ja")
        assert heading_label(build_months(date(2024, 6, 1)), formatter) == "2024年6月"
        assert heading_label(build_months(date(2024, 6, 1), number_of_months=2), formatter) == "6月 - 7月 2024年"
        assert (
            heading_label(build_months(date(2024, 12, 1), number_of_months=2), formatter)
            == "12月 2024年 - 1月 2025年"
        )

    def test_follows_locale_switch(self):
        window = build_months(date(2024, 6, 1))
        formatter = DateFormatter("en")
        assert heading_label(window, formatter) == "June 2024"
        formatter.set_locale("ja-JP")
        assert heading_label(window, formatter) == "2024年6月"


class TestWeekdayLabels:
    """Tests for weekday header labels."""

    def test_narrow_sunday_start(self):
        window = build_months(date(2024, 6, 1))
        assert weekday_labels(window, DateFormatter("en")) == ["S", "M", "T", "W", "T", "F", "S"]

    def test_short_monday_start(self):
        window = build_months(date(2024, 6, 1), week_starts_on=MONDAY)
        assert weekday_labels(window, DateFormatter("en"), "short") == [
            "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun",
        ]

    def test_long_japanese(self):
        window = build_months(date(2024, 6, 1))
        labels = weekday_labels(window, DateFormatter("ja"), "long")
        assert labels[0] == "日曜日"
        assert labels[-1] == "土曜日"

    def test_empty_window(self):
        assert weekday_labels((), DateFormatter("en")) == []

    def test_rejects_unknown_format(self):
        window = build_months(date(2024, 6, 1))
        with pytest.raises(ValueError, match="weekday format"):
            weekday_labels(window, DateFormatter("en"), "tiny")


class TestDateFormatter:
    """Tests for locale resolution."""

    def test_region_subtag_is_ignored(self):
        formatter = DateFormatter("en-US")
        assert formatter.get_locale() == "en-US"
        assert formatter.month_name(date(2024, 6, 1)) == "June"

    def test_unknown_locale_falls_back_to_english(self, caplog):
        with caplog.at_level(logging.WARNING, logger="calendar_grid.formatting"):
            formatter = DateFormatter("xx")
        assert formatter.month_and_year(date(2024, 6, 1)) == "June 2024"
        assert "Unsupported locale" in caplog.text

    def test_year_label(self):
        assert DateFormatter("en").year_label(date(2025, 1, 1)) == "2025"
        assert DateFormatter("ja").year_label(date(2025, 1, 1)) == "2025年"
