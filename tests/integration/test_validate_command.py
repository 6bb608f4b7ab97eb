"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Manifest items that can never fit are reported as warnings
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from crates.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.mark.integration
class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_minimal_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_minimal.json")])
        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_full_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_full.json")])
        assert result.exit_code == 0
        assert "Errors:" not in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output
        assert "Validation failed." in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 5" in result.output

    def test_invalid_values(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_values.json")])
        assert result.exit_code == 1
        assert "pallet.width" in result.output
        assert "Value: -84" in result.output
        assert "framing.colour" in result.output

    def test_unsupported_version(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unsupported_version.json")])
        assert result.exit_code == 1
        assert "Unsupported schema version" in result.output

    def test_oversized_item_warns(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "oversized_item.json")])
        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "manifest.TANK: will not fit on an empty crate" in result.output
        assert "PIPE-120" not in result.output
        assert "Validation passed with 1 warning(s)" in result.output
