"""Pure formatting functions for display output."""

from datetime import date
from pathlib import Path


def format_days(days: int) -> str:
    """Format a day count with thousands separators.

    Args:
        days: Number of days.

    Returns:
        Formatted string (e.g., "1 day", "12,345 days").
    """
    unit = "day" if abs(days) == 1 else "days"
    return f"{days:,} {unit}"


def format_date(value: date | None, fmt: str = "%Y-%m-%d") -> str:
    """Format a date with a weekday suffix.

    Args:
        value: Date to format, or None.
        fmt: strftime pattern for the date part.

    Returns:
        Formatted string (e.g., "2024-03-01 (Friday)"), or "N/A" if value is None.
    """
    if value is None:
        return "N/A"
    return f"{value.strftime(fmt)} ({value.strftime('%A')})"


def format_path(path: Path) -> str:
    """Format a path for display, relative to the working directory when possible."""
    resolved = path.resolve()
    try:
        return str(resolved.relative_to(Path.cwd()))
    except ValueError:
        return str(resolved)
