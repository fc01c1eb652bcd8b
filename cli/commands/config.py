"""Display configuration file path and settings."""

import os
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from dayscounter.config import DaysCounterConfig
from cli.context import get_context
from cli.display import console


def _find_env_file() -> Path | None:
    """Find .env file by searching current directory and parent directories."""
    current = Path.cwd()

    for path in [current] + list(current.parents):
        env_file = path / ".env"
        if env_file.exists():
            return env_file.resolve()

    return None


def _get_source(env_key: str) -> str:
    """Determine the source of a config value."""
    return "env" if env_key in os.environ else "default"


def _create_table(setting_width: int, source_width: int) -> Table:
    """Create a styled table for config sections with fixed column widths."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SETTING", style="cyan", min_width=setting_width, no_wrap=True)
    table.add_column("SOURCE", style="dim", min_width=source_width, no_wrap=True)
    table.add_column("VALUE")
    return table


def config() -> None:
    """Display configuration file path and settings."""
    env_file = _find_env_file()
    cfg: DaysCounterConfig = get_context().config

    sections: list[tuple[str, list[tuple[str, str, str]]]] = [
        (
            "Logging",
            [
                ("log_dir", str(cfg.log_dir.resolve()), _get_source("DAYSCOUNTER_LOG_DIR")),
                ("log_filename", cfg.log_filename, _get_source("DAYSCOUNTER_LOG_FILENAME")),
            ],
        ),
        (
            "Calendar Export",
            [
                (
                    "export_filename",
                    cfg.export_filename,
                    _get_source("DAYSCOUNTER_EXPORT_FILENAME"),
                ),
                ("prodid", cfg.prodid, _get_source("DAYSCOUNTER_PRODID")),
                ("uid_domain", cfg.uid_domain, _get_source("DAYSCOUNTER_UID_DOMAIN")),
                (
                    "escape_text",
                    str(cfg.escape_text).lower(),
                    _get_source("DAYSCOUNTER_ESCAPE_TEXT"),
                ),
            ],
        ),
        (
            "Display",
            [
                ("date_format", cfg.date_format, _get_source("DAYSCOUNTER_DATE_FORMAT")),
            ],
        ),
    ]

    # Calculate max widths across all sections
    all_rows = [row for _, rows in sections for row in rows]
    setting_width = max(max(len(row[0]) for row in all_rows), len("SETTING"))
    source_width = max(max(len(row[2]) for row in all_rows), len("SOURCE"))

    console.print()
    console.print("━" * 50)
    console.print("[bold]  Configuration[/bold]")
    console.print("━" * 50)

    console.print("\n[bold]Config File:[/bold]")
    if env_file:
        console.print(f"  [cyan]{escape(str(env_file))}[/cyan]")
    else:
        console.print("  [dim]Not found (using defaults and environment variables)[/dim]")

    for section_name, rows in sections:
        console.print(f"\n[bold]{section_name}:[/bold]")
        table = _create_table(setting_width, source_width)
        for setting, value, source in rows:
            table.add_row(setting, source, escape(value))
        console.print(table)

    console.print()
