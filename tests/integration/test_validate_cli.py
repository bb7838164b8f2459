"""Integration tests for the validate CLI command.

These tests verify the validate command works end-to-end, including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Fencing advisories are displayed as warnings
- Exit codes are correct
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from fences.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_clean_config(
        self,
        runner: CliRunner,
        write_config: Callable[..., Path],
        clean_config_data: dict[str, Any],
    ) -> None:
        result = runner.invoke(app, ["validate", str(write_config(clean_config_data))])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_warnings_exit_code(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        """The default plan has spacing and corrugation warnings."""
        result = runner.invoke(app, ["validate", str(write_config({}))])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "sides.right.length" in result.output
        assert "Suggestion:" in result.output
        assert "Validation passed with 4 warning(s)" in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        result = runner.invoke(app, ["validate", str(write_config('{"unit": "m",'))])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 1" in result.output

    def test_schema_error(self, runner: CliRunner, write_config: Callable[..., Path]) -> None:
        config = write_config({"sides": {"front": {"length": -3}}})
        result = runner.invoke(app, ["validate", str(config)])

        assert result.exit_code == 1
        assert "sides.front.length" in result.output
        assert "Validation failed." in result.output

    def test_unknown_field(self, runner: CliRunner, write_config: Callable[..., Path]) -> None:
        result = runner.invoke(app, ["validate", str(write_config({"fence": {}}))])

        assert result.exit_code == 1
        assert "fence" in result.output
