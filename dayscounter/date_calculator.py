"""Pure date arithmetic, independent of any UI.

Every function accepts either a ``date`` or a ``datetime``; a ``datetime`` is
truncated to its date component first, so time-of-day never changes a result.
"""

from datetime import date, datetime, time, timedelta


def to_date(value: date | datetime) -> date:
    """Return the date component of ``value``."""
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(start: date | datetime, end: date | datetime) -> int:
    """Absolute number of whole days between two dates."""
    return abs((to_date(end) - to_date(start)).days)


def add_days(start: date | datetime, days: float) -> date:
    """Add ``days`` to the date of ``start``.

    Fractional spans are applied to midnight of ``start`` and the date of the
    resulting timestamp is returned, so ``1.5`` adds one day and ``-1.5``
    goes back two.
    """
    midnight = datetime.combine(to_date(start), time.min)
    return (midnight + timedelta(days=days)).date()


def age_in_days(birth_date: date | datetime, today: date | None = None) -> int:
    """Days elapsed between ``birth_date`` and ``today`` (defaults to the current date)."""
    if today is None:
        today = date.today()
    return days_between(birth_date, today)


def day_of_year(value: date | datetime) -> int:
    """Ordinal day within the year, 1 for Jan 1 up to 366 in leap years."""
    return to_date(value).timetuple().tm_yday
