"""Date arithmetic and full-day iCalendar export."""

from dayscounter.date_calculator import (
    add_days,
    age_in_days,
    day_of_year,
    days_between,
    to_date,
)
from dayscounter.output.ics_writer import ICSWriter, create_calendar_file

__version__ = "1.0.0"

__all__ = [
    "ICSWriter",
    "add_days",
    "age_in_days",
    "create_calendar_file",
    "day_of_year",
    "days_between",
    "to_date",
]
