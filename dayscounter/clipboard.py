"""Clipboard helpers for copying results and pasting dates."""

import logging
from datetime import date
from typing import Protocol

from dateutil import parser as date_parser

from dayscounter.exceptions import ClipboardError, DateParseError
from dayscounter.reporting import ErrorReporter

logger = logging.getLogger(__name__)


class Clipboard(Protocol):
    """Protocol for clipboard access.

    Implementations raise ClipboardError when the clipboard is unavailable.
    """

    def get_text(self) -> str | None:
        """Return clipboard text, or None if it holds no text."""
        ...

    def set_text(self, text: str) -> None:
        """Replace clipboard contents with ``text``."""
        ...


def parse_date_text(text: str) -> date:
    """Parse free-form date text such as '2024-03-01' or '1 March 2024'.

    Raises:
        DateParseError: If the text is not a recognizable date
    """
    try:
        return date_parser.parse(text.strip()).date()
    except (ValueError, OverflowError) as e:
        raise DateParseError(f"Not a valid date: {text!r}") from e


def copy_text(clipboard: Clipboard, text: str, reporter: ErrorReporter) -> bool:
    """Copy ``text`` to the clipboard; blank text is ignored.

    Returns:
        True if the text was copied
    """
    if not text or not text.strip():
        return False

    try:
        clipboard.set_text(text)
    except ClipboardError as e:
        reporter.error("An error occurred while copying to clipboard.", e)
        return False

    reporter.info("Copied to clipboard.")
    return True


def paste_date(clipboard: Clipboard, reporter: ErrorReporter) -> date | None:
    """Read a date from the clipboard.

    Returns:
        The parsed date, or None if the clipboard is empty, unreadable or
        does not contain a date
    """
    try:
        text = clipboard.get_text()
    except ClipboardError as e:
        reporter.error("An error occurred while reading from the clipboard.", e)
        return None

    if not text or not text.strip():
        reporter.info("The clipboard is empty or contains no text.")
        return None

    try:
        value = parse_date_text(text)
    except DateParseError:
        reporter.warning(f"The clipboard content '{text}' is not a valid date.")
        return None

    logger.debug(f"Pasted date {value.isoformat()} from clipboard")
    return value
