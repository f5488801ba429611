"""Options command for schemascan CLI.

Lists the options of an endpoint explain document either as a table or as a
JSON array of ``{"name", "value", "description"}`` objects.
"""

from __future__ import annotations

import json
from enum import Enum

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from apps.cli.schemascan_cli.utils import InputError, read_input
from packages.common.logging import get_logger
from packages.extraction.parsers import extract_option_rows
from packages.extraction.types import OptionRow

console = Console(emoji=False)
logger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Output formats for the options command."""

    TABLE = "table"
    JSON = "json"


def _cell(value: str | None) -> str:
    """Render an absent cell dimmed so it stays distinct from an empty value."""
    if value is None:
        return "[dim]-[/dim]"
    return escape(value)


def _render_table(rows: list[OptionRow]) -> Table:
    table = Table(title=f"Options ({len(rows)})")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_column("Description")

    for row in rows:
        table.add_row(escape(row.name), _cell(row.value), _cell(row.description))

    return table


def options_command(path: str, output_format: OutputFormat = OutputFormat.TABLE) -> None:
    """Print the option rows of the explain document at ``path``.

    Args:
        path: File path, or ``-`` for stdin.
        output_format: ``table`` or ``json``.

    Raises:
        typer.Exit: Code 1 if the input cannot be read.
    """
    try:
        content = read_input(path)
    except InputError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        logger.error(f"Failed to read input: {e}", exc_info=True)
        raise typer.Exit(1) from None

    rows = extract_option_rows(content)
    logger.debug(f"Rendering {len(rows)} option row(s) as {output_format.value}")

    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps([row.as_dict() for row in rows], indent=2))
        return

    if not rows:
        console.print("[yellow]No options found[/yellow]")
        return

    console.print(_render_table(rows))


__all__ = ["OutputFormat", "options_command"]
