"""Open files with the default application of the operating system."""

import logging
import os
import subprocess
import sys
from pathlib import Path

from dayscounter.reporting import ErrorReporter

logger = logging.getLogger(__name__)


def _open_command(path: Path) -> list[str]:
    if sys.platform == "darwin":
        return ["open", str(path)]
    return ["xdg-open", str(path)]


def open_file(path: Path | str, reporter: ErrorReporter) -> bool:
    """Ask the OS to open ``path``; failures are reported, never raised.

    Returns:
        True if the open request was handed to the OS
    """
    path = Path(path)
    try:
        if sys.platform == "win32":
            os.startfile(path)  # type: ignore[attr-defined]
        else:
            subprocess.Popen(
                _open_command(path),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
    except OSError as e:
        reporter.error("The file could not be opened automatically.", e)
        return False

    logger.info(f"Opened {path} with default application")
    return True
