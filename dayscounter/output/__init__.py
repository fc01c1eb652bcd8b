"""Output layer for calendar files."""

from dayscounter.output.ics_writer import ICSWriter, create_calendar_file

__all__ = [
    "ICSWriter",
    "create_calendar_file",
]
