"""Shared Rich console used by every CLI command."""

from rich.console import Console

console = Console(highlight=False)
