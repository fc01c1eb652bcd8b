"""Graphical interface for the days counter."""

from dayscounter.config import DaysCounterConfig


def main() -> None:
    """Entry point for the desktop application."""
    from cli import setup_logging
    from gui.main_form import run

    config = DaysCounterConfig.from_env()
    setup_logging(config=config)
    run(config)


__all__ = ["main"]
