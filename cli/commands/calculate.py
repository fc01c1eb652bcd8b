"""Date arithmetic commands: between, add, age and day-of-year."""

import logging
from datetime import datetime

import typer
from typing_extensions import Annotated

from dayscounter import date_calculator
from cli.context import get_context
from cli.display import console, format_date, format_days

logger = logging.getLogger(__name__)

DATE_FORMATS = ["%Y-%m-%d"]


def between(
    start: Annotated[
        datetime,
        typer.Argument(formats=DATE_FORMATS, help="Start date (YYYY-MM-DD)"),
    ],
    end: Annotated[
        datetime,
        typer.Argument(formats=DATE_FORMATS, help="End date (YYYY-MM-DD)"),
    ],
) -> None:
    """Show the number of days between two dates (order does not matter)."""
    days = date_calculator.days_between(start, end)
    logger.info(f"Difference between {start.date()} and {end.date()}: {days} days")
    console.print(f"Difference {format_days(days)}.")


def add(
    start: Annotated[
        datetime,
        typer.Argument(formats=DATE_FORMATS, help="Start date (YYYY-MM-DD)"),
    ],
    days: Annotated[
        float,
        typer.Option("--days", "-d", help="Days to add (negative to go back)"),
    ] = 0,
) -> None:
    """Show the date that lies a number of days after (or before) a start date."""
    ctx = get_context()
    try:
        result = date_calculator.add_days(start, days)
    except (OverflowError, ValueError):
        logger.error(f"Adding {days} days to {start.date()} does not give a valid date")
        raise typer.Exit(1)
    console.print(format_date(result, ctx.config.date_format))


def age(
    birth_date: Annotated[
        datetime,
        typer.Argument(formats=DATE_FORMATS, help="Birth date (YYYY-MM-DD)"),
    ],
    today: Annotated[
        datetime | None,
        typer.Option(
            "--today", formats=DATE_FORMATS, help="Reference day (default: current date)"
        ),
    ] = None,
) -> None:
    """Show how many days old someone born on a date is."""
    reference = date_calculator.to_date(today) if today else None
    days = date_calculator.age_in_days(birth_date, today=reference)
    console.print(f"You are {days:,} days old.")


def day_of_year(
    value: Annotated[
        datetime,
        typer.Argument(formats=DATE_FORMATS, metavar="DATE", help="Date (YYYY-MM-DD)"),
    ],
) -> None:
    """Show the ordinal day of a date within its year."""
    day = date_calculator.day_of_year(value)
    console.print(f"Day {day} of {value.year}.")
