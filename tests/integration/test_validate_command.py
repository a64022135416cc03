"""Integration tests for the 'validate' CLI command.

This module tests the validate command end-to-end using the Typer
CliRunner, covering exit codes, error display and warning display.
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cladding.cli.main import app

runner = CliRunner()

pytestmark = pytest.mark.integration


def write_json(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data))
    return path


class TestValidateCommand:
    """Test suite for 'cladding validate'."""

    def test_valid_document_exits_0(self, tmp_path: Path) -> None:
        """A clean document is reported valid."""
        path = write_json(
            tmp_path / "line.json",
            {
                "schema_version": "1.1",
                "grid": {"cubes": [{"row": 1, "col": c} for c in range(3)]},
            },
        )
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 0
        assert f"Validating {path}..." in result.output
        assert "Document is valid." in result.output

    def test_warnings_exit_2(self, tmp_path: Path) -> None:
        """Advisories give exit code 2 and a suggestion."""
        path = write_json(
            tmp_path / "covered.json",
            {
                "schema_version": "1.1",
                "grid": {
                    "cubes": [
                        {"row": 1, "col": 0, "clad": ["N", "E"]},
                        {"row": 1, "col": 1},
                    ]
                },
            },
        )
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Suggestion: Remove them from the clad list" in result.output
        assert "Document is valid with warnings." in result.output

    def test_branching_exits_1(self, tmp_path: Path) -> None:
        """A T junction is an error naming the junction cube."""
        path = write_json(
            tmp_path / "tee.json",
            {
                "schema_version": "1.1",
                "grid": {
                    "cubes": [{"row": 0, "col": c} for c in range(3)] + [{"row": 1, "col": 1}]
                },
            },
        )
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Cubes: (0, 1)" in result.output
        assert "Validation failed." in result.output

    def test_schema_error_shows_path(self, tmp_path: Path) -> None:
        """Schema errors name the offending field."""
        path = write_json(
            tmp_path / "bad.json",
            {"schema_version": "1.1", "grid": {"cubes": [{"row": 0, "col": 0, "exit": "Q"}]}},
        )
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "grid.cubes[0].exit" in result.output
        assert "Value: 'Q'" in result.output

    def test_invalid_json(self, tmp_path: Path) -> None:
        """JSON syntax errors show line and column."""
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.1",')
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 1" in result.output

    def test_json_findings(self, tmp_path: Path) -> None:
        """--json prints machine-readable findings with the cubes involved."""
        path = write_json(
            tmp_path / "tee.json",
            {
                "schema_version": "1.1",
                "grid": {
                    "cubes": [{"row": 0, "col": c} for c in range(3)] + [{"row": 1, "col": 1}]
                },
            },
        )
        result = runner.invoke(app, ["validate", str(path), "--json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["is_valid"] is False
        assert data["errors"][0]["cubes"] == [[0, 1]]

    def test_json_load_error(self, tmp_path: Path) -> None:
        """--json reports load failures with their category."""
        path = tmp_path / "broken.json"
        path.write_text("{")
        result = runner.invoke(app, ["validate", str(path), "--json"])

        assert result.exit_code == 1
        assert json.loads(result.output)["error_type"] == "json_parse"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing files are reported."""
        path = tmp_path / "missing.json"
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert f"File not found: {path}" in result.output
