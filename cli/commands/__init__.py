"""CLI commands package."""

from cli.commands.calculate import add, age, between, day_of_year
from cli.commands.config import config
from cli.commands.export import export_command
from cli.commands.gui import gui

__all__ = [
    "add",
    "age",
    "between",
    "config",
    "day_of_year",
    "export_command",
    "gui",
]
