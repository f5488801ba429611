"""Compatibility module exposing the CLI Typer app under ``apps.cli``.

Tests and the console script entry point import ``apps.cli.main:app``; the
commands themselves live in ``schemascan_cli``.
"""

from __future__ import annotations

from apps.cli.schemascan_cli.main import app

__all__ = ["app"]
