import logging
from datetime import datetime

import pytest

from dayscounter.config import DaysCounterConfig


class RecordingReporter:
    """Reporter that remembers what it was asked to report."""

    def __init__(self):
        self.messages: list[tuple[str, str, BaseException | None]] = []

    def error(self, message, exc=None):
        self.messages.append(("error", message, exc))

    def warning(self, message):
        self.messages.append(("warning", message, None))

    def info(self, message):
        self.messages.append(("info", message, None))

    def levels(self) -> list[str]:
        return [level for level, _, _ in self.messages]


class FixedClock:
    """Callable clock that returns a fixed time and can be advanced."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep configuration and logs out of the working tree."""
    for key in [
        "DAYSCOUNTER_LOG_DIR",
        "DAYSCOUNTER_LOG_FILENAME",
        "DAYSCOUNTER_EXPORT_FILENAME",
        "DAYSCOUNTER_PRODID",
        "DAYSCOUNTER_UID_DOMAIN",
        "DAYSCOUNTER_ESCAPE_TEXT",
        "DAYSCOUNTER_DATE_FORMAT",
    ]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("DAYSCOUNTER_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.chdir(tmp_path)
    root_logger = logging.getLogger()
    level_before = root_logger.level
    yield
    # Drop the plain handlers installed by setup_logging; pytest's own
    # handlers are subclasses and are left alone
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.FileHandler, logging.StreamHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level_before)


@pytest.fixture
def reporter():
    """Reporter recording messages instead of showing them."""
    return RecordingReporter()


@pytest.fixture
def clock():
    """Clock fixed at 2024-03-01 10:30:00."""
    return FixedClock(datetime(2024, 3, 1, 10, 30, 0))


@pytest.fixture
def config():
    """Default configuration."""
    return DaysCounterConfig()
