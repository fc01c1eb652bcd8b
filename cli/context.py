"""Shared CLI context with lazy-initialized dependencies."""

from rich.text import Text

from dayscounter.config import DaysCounterConfig
from dayscounter.output.ics_writer import ICSWriter
from dayscounter.reporting import LoggingErrorReporter
from cli.display import console


def _print_notification(level: str, message: str) -> None:
    """Show a reporter message on the console."""
    styles = {"error": "red", "warning": "yellow", "info": "dim"}
    console.print(Text(message, style=styles.get(level, "")))


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        ctx.writer.write(event, path)
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: DaysCounterConfig | None = None
        self._reporter: LoggingErrorReporter | None = None
        self._writer: ICSWriter | None = None

    @property
    def config(self) -> DaysCounterConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = DaysCounterConfig.from_env()
        return self._config

    @property
    def reporter(self) -> LoggingErrorReporter:
        """Get error reporter that prints to the console (lazy-loaded)."""
        if self._reporter is None:
            self._reporter = LoggingErrorReporter(notify=_print_notification)
        return self._reporter

    @property
    def writer(self) -> ICSWriter:
        """Get ICS writer (lazy-loaded)."""
        if self._writer is None:
            self._writer = ICSWriter(self.config)
        return self._writer


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
