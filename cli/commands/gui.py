"""Launch the graphical days counter."""

import logging

import typer

from cli.context import get_context

logger = logging.getLogger(__name__)


def gui() -> None:
    """Open the days counter window."""
    ctx = get_context()
    try:
        # tkinter is optional on some Linux distributions
        from gui.main_form import run
    except ImportError as e:
        logger.error(f"The graphical interface is not available: {e}")
        raise typer.Exit(1)

    run(ctx.config)
