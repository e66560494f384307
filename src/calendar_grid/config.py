"""Configuration management."""

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from .formatting import DEFAULT_LOCALE
from .models import WEEKDAY_FORMATS, NavigationConfig, WeekdayFormat

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


def _env_date(name: str) -> date | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an ISO date (YYYY-MM-DD), got {raw!r}") from e


def navigation_config_from_env() -> NavigationConfig:
    """Build the grid/navigation options from ``CALENDAR_*`` variables."""
    return NavigationConfig(
        week_starts_on=_env_int("CALENDAR_WEEK_STARTS_ON", 0),
        fixed_weeks=_env_bool("CALENDAR_FIXED_WEEKS", False),
        number_of_months=_env_int("CALENDAR_NUMBER_OF_MONTHS", 1),
        paged_navigation=_env_bool("CALENDAR_PAGED_NAVIGATION", False),
        min_value=_env_date("CALENDAR_MIN_VALUE"),
        max_value=_env_date("CALENDAR_MAX_VALUE"),
    )


@dataclass(frozen=True)
class DisplayConfig:
    """Locale and label options."""

    locale: str = DEFAULT_LOCALE
    weekday_format: WeekdayFormat = "narrow"

    @classmethod
    def from_env(cls) -> "DisplayConfig":
        weekday_format = os.environ.get("CALENDAR_WEEKDAY_FORMAT", "narrow").strip() or "narrow"
        if weekday_format not in WEEKDAY_FORMATS:
            raise ValueError(
                f"CALENDAR_WEEKDAY_FORMAT must be one of {', '.join(WEEKDAY_FORMATS)}, got {weekday_format!r}"
            )
        return cls(
            locale=os.environ.get("CALENDAR_LOCALE", DEFAULT_LOCALE).strip() or DEFAULT_LOCALE,
            weekday_format=weekday_format,
        )


@dataclass(frozen=True)
class CalendarSettings:
    """Application configuration."""

    navigation: NavigationConfig
    display: DisplayConfig

    @classmethod
    def load(cls, env_file: Path | None = None) -> "CalendarSettings":
        """Load configuration from environment variables."""
        if env_file:
            load_dotenv(env_file, override=True)
        else:
            load_dotenv()

        return cls(
            navigation=navigation_config_from_env(),
            display=DisplayConfig.from_env(),
        )


__all__ = ["CalendarSettings", "DisplayConfig", "navigation_config_from_env"]
