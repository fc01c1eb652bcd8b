"""CLI application and command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import add, age, between, config, day_of_year, export_command, gui
from cli.context import CLIContext, set_context

app = typer.Typer(
    name="dayscounter",
    help="Count days between dates and export full-day calendar events.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Days counter: date differences, date spans, age in days, day of year."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command("between")(between)
app.command("add")(add)
app.command("age")(age)
app.command("day-of-year")(day_of_year)
app.command("export")(export_command)
app.command("config")(config)
app.command("gui")(gui)
