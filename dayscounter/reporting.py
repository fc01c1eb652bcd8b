"""Error reporting passed to the components that talk to the user.

Full diagnostics go to the log; only a generic message is handed to the
``notify`` callback (message boxes in the GUI, the console in the CLI).
"""

import logging
import sys
import threading
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]


class ErrorReporter(Protocol):
    """Protocol for reporting problems to the user."""

    def error(self, message: str, exc: BaseException | None = None) -> None:
        """Report an error with a generic user message."""
        ...

    def warning(self, message: str) -> None:
        """Report a recoverable problem."""
        ...

    def info(self, message: str) -> None:
        """Report an informational message."""
        ...


class LoggingErrorReporter:
    """Reporter that logs and optionally notifies the user."""

    def __init__(
        self, notify: Notifier | None = None, log: logging.Logger | None = None
    ):
        """Initialize the reporter.

        Args:
            notify: Callback receiving ``(level, message)``; level is one of
                "error", "warning" or "info"
            log: Logger to write to (module logger if not provided)
        """
        self._notify = notify
        self._log = log or logger

    def _send(self, level: str, message: str) -> None:
        if self._notify is None:
            return
        try:
            self._notify(level, message)
        except Exception:
            # Never let a failing notification hide the original problem
            self._log.exception("Failed to notify user: %s", message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._log.error(
                "%s (%s: %s)",
                message,
                type(exc).__name__,
                exc,
                exc_info=(type(exc), exc, exc.__traceback__),
            )
        else:
            self._log.error(message)
        self._send("error", message)

    def warning(self, message: str) -> None:
        self._log.warning(message)
        self._send("warning", message)

    def info(self, message: str) -> None:
        self._log.info(message)
        self._send("info", message)


def install_exception_hooks(reporter: ErrorReporter) -> None:
    """Route unhandled exceptions on any thread to ``reporter``."""

    def excepthook(exc_type, exc, tb):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc, tb)
            return
        reporter.error("An unexpected error occurred. Please contact support.", exc)

    def thread_excepthook(args):
        if args.exc_type is SystemExit:
            return
        reporter.error("An error occurred in a background task.", args.exc_value)

    sys.excepthook = excepthook
    threading.excepthook = thread_excepthook
