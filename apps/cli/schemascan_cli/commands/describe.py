"""Describe command for schemascan CLI.

Prints the description of one property from a generated component JSON
document. A missing property or description is not an error unless
``--strict`` is given.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from apps.cli.schemascan_cli.utils import InputError, read_input
from packages.common.logging import get_logger
from packages.extraction.parsers import extract_description

console = Console(emoji=False)
logger = get_logger(__name__)

NOT_FOUND_EXIT_CODE = 2


def describe_command(path: str, field: str, strict: bool = False) -> None:
    """Print the description of ``field`` from the document at ``path``.

    Args:
        path: File path, or ``-`` for stdin.
        field: Property name.
        strict: Exit with code 2 when no description is found.

    Raises:
        typer.Exit: Code 1 if the input cannot be read, code 2 when strict and
            nothing was found.
    """
    try:
        content = read_input(path)
    except InputError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        logger.error(f"Failed to read input: {e}", exc_info=True)
        raise typer.Exit(1) from None

    description = extract_description(content, field)
    if description is None:
        console.print(f"[yellow]No description found for {escape(repr(field))}[/yellow]")
        if strict:
            raise typer.Exit(NOT_FOUND_EXIT_CODE)
        return

    console.print(description, markup=False, highlight=False, soft_wrap=True)


__all__ = ["NOT_FOUND_EXIT_CODE", "describe_command"]
