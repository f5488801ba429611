"""Tests for the describe CLI command."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from apps.cli.main import app
from apps.cli.schemascan_cli.commands.describe import NOT_FOUND_EXIT_CODE

runner = CliRunner()


@pytest.fixture
def component_file(tmp_path: Path, component_json: str) -> Path:
    path = tmp_path / "timer.json"
    path.write_text(component_json, encoding="utf-8")
    return path


def test_describe_prints_description(component_file: Path) -> None:
    result = runner.invoke(app, ["describe", str(component_file), "timerName"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "The name of the timer"


def test_describe_reads_stdin(component_json: str) -> None:
    result = runner.invoke(app, ["describe", "-", "delay"], input=component_json)

    assert result.exit_code == 0, result.output
    assert "milliseconds to wait" in result.output


def test_describe_missing_field_is_not_an_error(component_file: Path) -> None:
    result = runner.invoke(app, ["describe", str(component_file), "fixedRate"])

    assert result.exit_code == 0
    assert "No description found" in result.output


def test_describe_strict_missing_field(component_file: Path) -> None:
    result = runner.invoke(app, ["describe", str(component_file), "fixedRate", "--strict"])

    assert result.exit_code == NOT_FOUND_EXIT_CODE


def test_describe_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["describe", str(tmp_path / "absent.json"), "delay"])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_describe_rejects_oversize_input(
    component_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SCHEMASCAN_MAX_INPUT_BYTES", "16")

    result = runner.invoke(app, ["describe", str(component_file), "delay"])

    assert result.exit_code == 1


def test_describe_rejects_undecodable_input(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'"delay": { "description": "caf\xe9" }')

    result = runner.invoke(app, ["describe", str(path), "delay"])

    assert result.exit_code == 1


def test_describe_prints_emoji_shortcodes_verbatim(tmp_path: Path) -> None:
    """Test :name: shortcodes in a description are printed as extracted."""
    path = tmp_path / "shortcodes.json"
    path.write_text('"field": { "description": "Use :smile: or :warning: here" },\n')

    result = runner.invoke(app, ["describe", str(path), "field"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Use :smile: or :warning: here"


def test_invalid_log_level_is_a_usage_error(component_file: Path) -> None:
    result = runner.invoke(app, ["--log-level", "LOUD", "describe", str(component_file), "delay"])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
    assert "--log-level" in result.output


def test_log_level_option_accepts_lowercase(component_file: Path) -> None:
    result = runner.invoke(app, ["--log-level", "error", "describe", str(component_file), "delay"])

    assert result.exit_code == 0, result.output
    assert "milliseconds to wait" in result.output
