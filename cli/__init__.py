"""CLI package for the days counter."""

import logging
import sys

from dayscounter.config import DaysCounterConfig

LOG_FILE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_CONSOLE_FORMAT = "%(levelname)s: %(message)s"

# handlers added by the last setup_logging call
_installed: list[logging.Handler] = []


def console_level(verbose: bool = False, quiet: bool = False) -> int:
    """Console log level for the verbosity flags; --quiet wins over --verbose."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: DaysCounterConfig | None = None
) -> None:
    """Send every record to the log file and the chosen levels to stderr.

    Calling it again replaces the handlers of the previous call; handlers
    installed by anything else are left on the root logger.
    """
    config = config or DaysCounterConfig.from_env()
    config.log_dir.mkdir(parents=True, exist_ok=True)

    log_file = logging.FileHandler(config.log_dir / config.log_filename, encoding="utf-8")
    log_file.setLevel(logging.DEBUG)
    log_file.setFormatter(logging.Formatter(LOG_FILE_FORMAT))

    stderr = logging.StreamHandler(sys.stderr)
    stderr.setLevel(console_level(verbose, quiet))
    stderr.setFormatter(logging.Formatter(LOG_CONSOLE_FORMAT))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()
    for handler in (log_file, stderr):
        root.addHandler(handler)
        _installed.append(handler)


def main() -> None:
    """Run the dayscounter command line."""
    from cli.parser import app

    app()


__all__ = ["console_level", "main", "setup_logging"]
