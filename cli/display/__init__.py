"""Display module for rendering CLI output.

It provides:
- console: Shared Rich console instance
- Formatting functions for day counts, dates and paths
"""

from cli.display.console import console
from cli.display.formatters import format_date, format_days, format_path

__all__ = [
    # Console
    "console",
    # Formatters
    "format_date",
    "format_days",
    "format_path",
]
