"""Command-line interface."""

import dataclasses
import logging
import re
import sys
from datetime import date
from pathlib import Path

import click

from .config import CalendarSettings
from .controller import Calendar
from .models import MonthGrid

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def _parse_month(raw: str | None) -> date:
    if not raw:
        return date.today().replace(day=1)
    match = re.fullmatch(r"(\d{4})[-/](\d{1,2})", raw.strip())
    if not match:
        raise click.BadParameter(f"invalid month: {raw} (expected YYYY-MM)", param_hint="--month")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise click.BadParameter(f"invalid month: {raw} (month must be 1-12)", param_hint="--month")
    return date(year, month, 1)


def _format_grid(grid: MonthGrid) -> list[str]:
    lines = []
    for week in grid.weeks:
        cells = [f"{day.day:>3} " if grid.in_month(day) else f"({day.day:>2})" for day in week]
        lines.append(" ".join(cells))
    return lines


def _build_calendar(
    ctx: click.Context,
    month: str | None,
    months: int | None,
    week_starts_on: int | None,
    fixed_weeks: bool | None,
    locale: str | None,
) -> Calendar:
    try:
        settings = CalendarSettings.load(ctx.obj.get("env_file"))
        overrides = {}
        if months is not None:
            overrides["number_of_months"] = months
        if week_starts_on is not None:
            overrides["week_starts_on"] = week_starts_on
        if fixed_weeks is not None:
            overrides["fixed_weeks"] = fixed_weeks
        navigation = dataclasses.replace(settings.navigation, **overrides)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    return Calendar(
        _parse_month(month),
        navigation,
        locale=locale or settings.display.locale,
        weekday_format=settings.display.weekday_format,
    )


def _month_options(func):
    options = [
        click.option("--month", "-m", help="Month to show as YYYY-MM (default: current month)"),
        click.option("--months", "-n", type=int, default=None, help="Number of months in view"),
        click.option("--week-starts-on", "-w", type=int, default=None, help="First weekday, 0=Sunday .. 6=Saturday"),
        click.option("--fixed-weeks/--no-fixed-weeks", default=None, help="Always show 6 weeks"),
        click.option("--locale", "-l", default=None, help="Locale for labels (e.g. en, ja)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option(
    "--env-file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to .env file",
)
@click.option("--debug/--no-debug", default=False, help="Enable debug logging")
@click.pass_context
def main(ctx, env_file: Path | None, debug: bool):
    """Month grid and navigation inspector."""
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["env_file"] = env_file


@main.command()
@_month_options
@click.option("--page", "-p", type=int, default=0, help="Pages to navigate before printing (negative: back)")
@click.pass_context
def show(ctx, month, months, week_starts_on, fixed_weeks, locale, page: int):
    """Print the visible month grids."""
    cal = _build_calendar(ctx, month, months, week_starts_on, fixed_weeks, locale)
    for _ in range(abs(page)):
        if page > 0:
            cal.next_page()
        else:
            cal.prev_page()

    click.echo(cal.heading_label)
    header = " ".join(f"{label:>4}" for label in cal.weekday_labels)
    for grid in cal.months:
        click.echo("")
        click.echo(cal.formatter.month_and_year(grid.month))
        click.echo(header)
        for line in _format_grid(grid):
            click.echo(line)

    click.echo("")
    click.echo(f"Prev: {'disabled' if cal.is_prev_disabled else 'enabled'}")
    click.echo(f"Next: {'disabled' if cal.is_next_disabled else 'enabled'}")


@main.command()
@_month_options
@click.pass_context
def heading(ctx, month, months, week_starts_on, fixed_weeks, locale):
    """Print the heading label for the visible months."""
    cal = _build_calendar(ctx, month, months, week_starts_on, fixed_weeks, locale)
    click.echo(cal.heading_label)


if __name__ == "__main__":
    main()
