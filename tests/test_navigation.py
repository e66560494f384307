"""Tests for paging rules."""

from datetime import date

from calendar_grid.grid import build_months
from calendar_grid.models import NavigationConfig
from calendar_grid.navigation import (
    is_next_disabled,
    is_prev_disabled,
    next_window,
    page_step,
    prev_window,
)


def test_page_step():
    assert page_step(NavigationConfig(number_of_months=3)) == 1
    assert page_step(NavigationConfig(number_of_months=3, paged_navigation=True)) == 3


def test_next_then_prev_returns_to_original_month():
    config = NavigationConfig(number_of_months=2)
    window = build_months(date(2024, 6, 10), number_of_months=2)

    forward = next_window(window, config)
    assert [grid.month for grid in forward] == [date(2024, 7, 1), date(2024, 8, 1)]

    back = prev_window(forward, config)
    assert [grid.month for grid in back] == [grid.month for grid in window]
    assert back == window


def test_paged_navigation_moves_whole_window():
    config = NavigationConfig(number_of_months=3, paged_navigation=True)
    window = build_months(date(2024, 1, 1), number_of_months=3)

    forward = next_window(window, config)
    assert forward[0].month == date(2024, 4, 1)
    assert len(forward) == 3

    back = prev_window(window, config)
    assert [grid.month for grid in back] == [date(2023, 10, 1), date(2023, 11, 1), date(2023, 12, 1)]


def test_navigation_keeps_input_window():
    config = NavigationConfig()
    window = build_months(date(2024, 6, 1))
    next_window(window, config)
    assert window[0].month == date(2024, 6, 1)


class TestIsNextDisabled:
    """Tests for the forward bound."""

    def test_disabled_when_next_page_starts_after_max(self):
        window = build_months(date(2024, 6, 1))
        assert is_next_disabled(window, date(2024, 6, 30))

    def test_enabled_when_next_page_starts_on_max(self):
        window = build_months(date(2024, 6, 1))
        assert not is_next_disabled(window, date(2024, 7, 1))

    def test_uses_last_visible_month(self):
        window = build_months(date(2024, 5, 1), number_of_months=2)
        assert is_next_disabled(window, date(2024, 6, 30))
        assert not is_next_disabled(window, date(2024, 7, 1))

    def test_no_max_never_disables(self):
        window = build_months(date(2024, 6, 1))
        assert not is_next_disabled(window, None)
        assert not is_next_disabled((), date(2024, 1, 1))

    def test_global_disable(self):
        window = build_months(date(2024, 6, 1))
        assert is_next_disabled(window, None, disabled=True)


class TestIsPrevDisabled:
    """Tests for the backward bound."""

    def test_disabled_when_min_is_first_of_visible_month(self):
        window = build_months(date(2024, 6, 1))
        assert is_prev_disabled(window, date(2024, 6, 1))

    def test_enabled_when_min_is_last_day_of_previous_month(self):
        window = build_months(date(2024, 6, 1))
        assert not is_prev_disabled(window, date(2024, 5, 31))

    def test_no_min_never_disables(self):
        window = build_months(date(2024, 6, 1))
        assert not is_prev_disabled(window, None)
        assert not is_prev_disabled((), date(2024, 1, 1))

    def test_global_disable(self):
        window = build_months(date(2024, 6, 1))
        assert is_prev_disabled(window, None, disabled=True)


def test_navigating_past_bound_still_builds_valid_window():
    config = NavigationConfig(max_value=date(2024, 6, 30))
    window = build_months(date(2024, 6, 1))
    assert is_next_disabled(window, config.max_value)

    beyond = next_window(window, config)
    assert beyond[0].month == date(2024, 7, 1)
    assert len(beyond[0].dates) % 7 == 0
