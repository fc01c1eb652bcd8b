"""Export a full-day event to an ICS file."""

import logging
from datetime import datetime
from pathlib import Path

import typer
from rich.markup import escape
from typing_extensions import Annotated

from dayscounter import date_calculator
from dayscounter.exceptions import ExportError
from dayscounter.file_opener import open_file
from dayscounter.models.event import EventRecord
from cli.commands.calculate import DATE_FORMATS
from cli.context import get_context
from cli.display import console, format_path

logger = logging.getLogger(__name__)


def export_command(
    event_date: Annotated[
        datetime,
        typer.Argument(
            formats=DATE_FORMATS, metavar="DATE", help="Event date (YYYY-MM-DD)"
        ),
    ],
    plus: Annotated[
        float | None,
        typer.Option(
            "--plus",
            "-p",
            help="Export the date this many days after DATE, with a generated title",
        ),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="Event title"),
    ] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", "-D", help="Event description"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output", "-o", help="Output ICS path (default: from DAYSCOUNTER_EXPORT_FILENAME)"
        ),
    ] = None,
    open_after: Annotated[
        bool,
        typer.Option("--open", help="Open the file with the default calendar application"),
    ] = False,
) -> None:
    """
    Export a full-day event to an ICS file.

    With --plus, the event falls on DATE plus the given number of days and
    gets a title and description describing the calculation. --title and
    --description override the generated text.
    """
    ctx = get_context()
    config = ctx.config
    path = output or Path(config.export_filename)

    if plus is not None:
        try:
            target = date_calculator.add_days(event_date, plus)
        except (OverflowError, ValueError):
            logger.error(f"Adding {plus} days to {event_date.date()} does not give a valid date")
            raise typer.Exit(1)
        event = EventRecord.for_span(
            start=event_date.date(),
            days=plus,
            target=target,
            date_format=config.date_format,
        )
        if title is not None:
            event = event.model_copy(update={"title": title})
        if description is not None:
            event = event.model_copy(update={"description": description})
    else:
        event = EventRecord(
            title=title or "DaysCounter event",
            date=event_date,
            description=description or "",
        )

    try:
        written = ctx.writer.write(event, path)
    except ExportError as e:
        ctx.reporter.error(f"Export failed: {e}", e)
        raise typer.Exit(1)

    console.print("[bold green]✓[/bold green] Exported ICS")
    console.print(f"  {escape(format_path(written))}")
    console.print(f"  {escape(event.title)} on {event.date.strftime(config.date_format)}")

    if open_after:
        open_file(written, ctx.reporter)

