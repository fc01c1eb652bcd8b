"""Exception hierarchy for days counter operations."""


class DaysCounterError(Exception):
    """Base exception for days counter operations."""

    pass


class ExportError(DaysCounterError):
    """Error while writing a calendar file."""

    pass


class ClipboardError(DaysCounterError):
    """Clipboard could not be read or written."""

    pass


class DateParseError(DaysCounterError):
    """Text could not be interpreted as a date."""

    pass


class ConfigError(DaysCounterError):
    """Invalid configuration value."""

    pass
