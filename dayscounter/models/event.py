"""Event record with Pydantic v2 validation."""

from datetime import date, datetime, timedelta

from pydantic import BaseModel, computed_field, field_validator


class EventRecord(BaseModel):
    """A single full-day event, built right before export."""

    title: str
    date: date
    description: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def truncate_datetime(cls, v):
        """Drop any time-of-day component."""
        if isinstance(v, datetime):
            return v.date()
        return v

    @computed_field
    @property
    def end_date(self) -> date:
        """Exclusive end of the full-day event (the following day)."""
        return self.date + timedelta(days=1)

    @classmethod
    def for_span(
        cls, start: date, days: float, target: date, date_format: str = "%Y-%m-%d"
    ) -> "EventRecord":
        """Build the event describing ``start`` plus ``days``."""
        days_text = _format_days(days)
        return cls(
            title=f"DaysCounter: Event after {days_text} days",
            date=target,
            description=(
                f"Calculated from {start.strftime(date_format)} plus {days_text} days."
            ),
        )


def _format_days(days: float) -> str:
    """Render a span without a trailing '.0' for whole numbers."""
    if float(days).is_integer():
        return str(int(days))
    return str(days)
