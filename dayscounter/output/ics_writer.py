"""ICS file writer for single full-day events."""

import logging
import zlib
from datetime import date, datetime
from pathlib import Path
from typing import Callable

from icalendar import vText

from dayscounter.config import DaysCounterConfig
from dayscounter.exceptions import ExportError
from dayscounter.models.event import EventRecord

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%dT%H%M%S"
DATE_FORMAT = "%Y%m%d"


def title_hash(title: str) -> str:
    """Stable short hash of an event title (CRC-32, hex)."""
    return f"{zlib.crc32(title.encode('utf-8')):08x}"


class ICSWriter:
    """Writer for one-event ICS files.

    The UID is built from the generation time and a hash of the title. That is
    unique enough for local files but not globally unique.
    """

    def __init__(
        self,
        config: DaysCounterConfig | None = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.config = config or DaysCounterConfig()
        self._now = now

    def _text(self, value: str) -> str:
        if not self.config.escape_text:
            return value
        # vText escapes backslash, semicolon, comma and newlines
        return vText(value).to_ical().decode("utf-8")

    def render(self, event: EventRecord) -> str:
        """Render the event as iCalendar text with ``\\n`` line endings."""
        stamp = self._now().strftime(TIMESTAMP_FORMAT)

        lines = [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            f"PRODID:{self.config.prodid}",
            "BEGIN:VEVENT",
            f"UID:{stamp}-{title_hash(event.title)}@{self.config.uid_domain}",
            f"DTSTAMP:{stamp}",
            # Full-day events end on the following day (exclusive bound)
            f"DTSTART;VALUE=DATE:{event.date.strftime(DATE_FORMAT)}",
            f"DTEND;VALUE=DATE:{event.end_date.strftime(DATE_FORMAT)}",
            f"SUMMARY:{self._text(event.title)}",
            f"DESCRIPTION:{self._text(event.description)}",
            "END:VEVENT",
            "END:VCALENDAR",
        ]
        return "".join(f"{line}\n" for line in lines)

    def write(self, event: EventRecord, path: Path) -> Path:
        """Write event to ICS file, creating or overwriting ``path``.

        Raises:
            ExportError: If the file cannot be created or written
        """
        path = Path(path)
        content = self.render(event)
        try:
            path.write_bytes(content.encode("utf-8"))
        except OSError as e:
            raise ExportError(f"Could not write calendar file {path}: {e}") from e

        logger.info(f"Exported '{event.title}' on {event.date.isoformat()} to {path}")
        return path

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"


def create_calendar_file(
    title: str,
    date: date | datetime,
    description: str,
    file_path: Path | str,
    config: DaysCounterConfig | None = None,
    now: Callable[[], datetime] = datetime.now,
) -> Path:
    """Create an ICS file for a full-day event on ``date``."""
    event = EventRecord(title=title, date=date, description=description)
    return ICSWriter(config, now=now).write(event, Path(file_path))
