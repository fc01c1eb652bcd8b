"""Tests for clipboard helpers."""

from datetime import date

import pytest

from dayscounter.clipboard import copy_text, parse_date_text, paste_date
from dayscounter.exceptions import ClipboardError, DateParseError


class FakeClipboard:
    """In-memory clipboard that can be told to fail."""

    def __init__(self, text=None, fail=False):
        self.text = text
        self.fail = fail

    def get_text(self):
        if self.fail:
            raise ClipboardError("clipboard busy")
        return self.text

    def set_text(self, text):
        if self.fail:
            raise ClipboardError("clipboard busy")
        self.text = text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2024-03-01", date(2024, 3, 1)),
        ("  2024-03-01  ", date(2024, 3, 1)),
        ("1 March 2024", date(2024, 3, 1)),
        ("March 1, 2024", date(2024, 3, 1)),
        ("2024-03-01T23:59:00", date(2024, 3, 1)),
    ],
)
def test_parse_date_text(text, expected):
    """Test common date spellings are understood."""
    assert parse_date_text(text) == expected


@pytest.mark.parametrize("text", ["hello", "2023-02-29", ""])
def test_parse_date_text_invalid(text):
    """Test non-dates raise DateParseError."""
    with pytest.raises(DateParseError):
        parse_date_text(text)


def test_copy_text(reporter):
    """Test text is copied and the user informed."""
    clipboard = FakeClipboard()

    assert copy_text(clipboard, "Difference 5 days.", reporter) is True
    assert clipboard.text == "Difference 5 days."
    assert reporter.messages == [("info", "Copied to clipboard.", None)]


@pytest.mark.parametrize("text", ["", "   ", None])
def test_copy_blank_text_is_ignored(reporter, text):
    """Test blank text is not copied."""
    clipboard = FakeClipboard(text="unchanged")

    assert copy_text(clipboard, text, reporter) is False
    assert clipboard.text == "unchanged"
    assert reporter.messages == []


def test_copy_failure_is_reported(reporter):
    """Test clipboard failures are reported, not raised."""
    clipboard = FakeClipboard(fail=True)

    assert copy_text(clipboard, "text", reporter) is False
    assert reporter.levels() == ["error"]
    assert reporter.messages[0][1] == "An error occurred while copying to clipboard."
    assert isinstance(reporter.messages[0][2], ClipboardError)


def test_paste_date(reporter):
    """Test a date is read from the clipboard."""
    clipboard = FakeClipboard(text="2024-02-29")

    assert paste_date(clipboard, reporter) == date(2024, 2, 29)
    assert reporter.messages == []


@pytest.mark.parametrize("text", [None, "", "  \n"])
def test_paste_empty_clipboard(reporter, text):
    """Test an empty clipboard yields None and an info message."""
    assert paste_date(FakeClipboard(text=text), reporter) is None
    assert reporter.messages == [
        ("info", "The clipboard is empty or contains no text.", None)
    ]


def test_paste_invalid_date(reporter):
    """Test non-date clipboard text yields a warning."""
    assert paste_date(FakeClipboard(text="not a date"), reporter) is None
    assert reporter.messages == [
        ("warning", "The clipboard content 'not a date' is not a valid date.", None)
    ]


def test_paste_failure_is_reported(reporter):
    """Test clipboard read failures are reported."""
    assert paste_date(FakeClipboard(fail=True), reporter) is None
    assert reporter.levels() == ["error"]
    assert reporter.messages[0][1] == "An error occurred while reading from the clipboard."
