"""Shared helpers for CLI commands."""

from apps.cli.schemascan_cli.utils.input import InputError, read_input

__all__ = ["InputError", "read_input"]
