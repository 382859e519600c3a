"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Small positive sizes are accepted as given
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from decking.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner, write_config) -> None:
        """Valid config should pass with exit code 0."""
        path = write_config(
            {
                "schema_version": "1.1",
                "deck": {
                    "shape": "L",
                    "dimensions": {
                        "width": 4,
                        "height": 3,
                        "extension_width": 2,
                        "extension_height": 2,
                    },
                    "edge_selection": {"top": True, "bottom": False},
                },
                "output": {"formats": ["txt", "pdf"]},
            }
        )
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_small_sizes_are_valid(self, runner: CliRunner, write_config) -> None:
        """Positive sizes under the fallback values pass without warnings."""
        path = write_config(
            {
                "deck": {
                    "shape": "U",
                    "dimensions": {
                        "width": 0.5,
                        "height": 3,
                        "extension_width": 1.5,
                        "extension_height": 2,
                    },
                }
            }
        )
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0
        assert "warning" not in result.output
        assert "Validation passed. Configuration is valid." in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(tmp_path / "nonexistent.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output
        assert "Validation failed." in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, tmp_path: Path) -> None:
        """Invalid JSON should fail with exit code 1."""
        path = tmp_path / "broken.json"
        path.write_text('{"deck": ', encoding="utf-8")
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 1" in result.output

    def test_schema_errors_list_paths(self, runner: CliRunner, write_config) -> None:
        """Schema errors should show the JSON path and offending value."""
        path = write_config(
            {"deck": {"shape": "octogone", "dimensions": {"width": -1, "height": 3}}}
        )
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "deck.shape" in result.output
        assert "deck.dimensions.width" in result.output
        assert "Value: 'octogone'" in result.output
