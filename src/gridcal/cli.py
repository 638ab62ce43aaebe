"""gridcal CLI - inspect calendar grids."""

import json
import logging
import sys

import click

from .config import load_config
from .grid import CalendarGrid


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """gridcal - week-aligned calendar grids."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.argument("start", required=False)
@click.option("--duration", "-n", default=None, help="Number of days (0 = whole month)")
@click.option("--first-day", "-f", "first_day", default=None, help="First day of week (0=Sun..6=Sat)")
@click.option("--prefill/--no-prefill", default=None, help="Pad the first week")
@click.option("--postfill/--no-postfill", default=None, help="Pad the last week")
@click.option("--month", "-m", "month", default=None, help="Only show this month (YYYY-MM)")
def show(
    start: str | None,
    duration: str | None,
    first_day: str | None,
    prefill: bool | None,
    postfill: bool | None,
    month: str | None,
):
    """Print the grid starting at START (YYYY-MM or YYYY-MM-DD) as JSON."""
    config = load_config()
    grid = CalendarGrid(
        start_date=start,
        duration=config.duration if duration is None else duration,
        first_day_of_week=config.first_day_of_week if first_day is None else first_day,
        prefill=config.prefill if prefill is None else prefill,
        postfill=config.postfill if postfill is None else postfill,
    )

    if not grid.is_valid:
        for error in grid.failure.errors:
            click.echo(f"Error: {error.format()}", err=True)
        sys.exit(1)

    if month:
        grid = grid.filter(month)

    click.echo(json.dumps(grid.to_dict(), indent=2, default=str))


@main.command()
@click.option("--first-day", "-f", "first_day", default=None, help="First day of week (0=Sun..6=Sat)")
def header(first_day: str | None):
    """Print weekday column labels."""
    config = load_config()
    grid = CalendarGrid(duration=1, first_day_of_week=config.first_day_of_week)
    if first_day is not None and not grid.set_first_day_of_week(first_day):
        click.echo(f"Error: {grid.failure.message}", err=True)
        sys.exit(1)

    click.echo(" ".join(grid.get_header()))


if __name__ == "__main__":
    main()
