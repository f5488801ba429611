"""schemascan CLI - Typer command-line interface for JSON schema scanning."""

from __future__ import annotations

from typing import Annotated

import typer

from apps.cli.schemascan_cli.commands.options import OutputFormat
from packages.common.config import LOG_LEVELS
from packages.common.logging import get_logger, setup_logging
from packages.common.tracing import TracingContext

app = typer.Typer(
    name="schemascan",
    help="schemascan - JSON schema kinds and generated-JSON option extraction",
    add_completion=False,
)
logger = get_logger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level override (DEBUG, INFO, WARNING, ...)"),
    ] = None,
) -> None:
    """Configure logging and open a correlation context for the command."""
    if log_level is not None and log_level.strip().upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )

    setup_logging(log_level.strip() if log_level else None)
    corr_id = ctx.with_resource(TracingContext())
    logger.debug(f"Starting {ctx.invoked_subcommand} (correlation_id={corr_id})")


@app.command(name="classify")
def classify(
    name: Annotated[str, typer.Argument(help="Canonical type name, e.g. java.lang.Long")],
    is_array: Annotated[
        bool | None,
        typer.Option(
            "--array/--no-array",
            help="Array flag (default: derived from a trailing [])",
        ),
    ] = None,
    is_enum: Annotated[bool, typer.Option("--enum", help="Type is an enumeration")] = False,
    primitive: Annotated[
        bool,
        typer.Option("--primitive-only", help="Only consult the primitive table"),
    ] = False,
) -> None:
    """
    Print the JSON schema kind for a type.

    Examples:
        schemascan classify java.lang.Long
        schemascan classify byte[] --primitive-only
        schemascan classify com.example.Color --enum
    """
    from apps.cli.schemascan_cli.commands.classify import classify_command

    classify_command(name, is_array=is_array, is_enum=is_enum, primitive=primitive)


@app.command(name="describe")
def describe(
    path: Annotated[str, typer.Argument(help="Component JSON file, or - for stdin")],
    field: Annotated[str, typer.Argument(help="Property name")],
    strict: Annotated[
        bool, typer.Option("--strict", help="Exit with code 2 when nothing is found")
    ] = False,
) -> None:
    """
    Print the description of a property from generated component JSON.

    Examples:
        schemascan describe timer.json period
        cat timer.json | schemascan describe - period --strict
    """
    from apps.cli.schemascan_cli.commands.describe import describe_command

    describe_command(path, field, strict=strict)


@app.command(name="options")
def options(
    path: Annotated[str, typer.Argument(help="Endpoint explain JSON file, or - for stdin")],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.TABLE,
) -> None:
    """
    List the options of an endpoint explain document.

    Examples:
        schemascan options explain.json
        schemascan options explain.json --format json
    """
    from apps.cli.schemascan_cli.commands.options import options_command

    options_command(path, output_format=output_format)


if __name__ == "__main__":
    app()
