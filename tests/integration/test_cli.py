"""Integration tests for the calculate, diagram and export CLI commands.

These run the Typer app end-to-end with CliRunner against grid documents
written to a temporary directory and against the bundled presets.
"""

import csv
import io
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cladding.cli.main import app

runner = CliRunner()

pytestmark = pytest.mark.integration


def write_document(path: Path, cubes: list[dict], **options) -> Path:
    path.write_text(
        json.dumps(
            {
                "schema_version": "1.1",
                "grid": {"rows": 3, "cols": 3, "cubes": cubes},
                "options": options,
            }
        )
    )
    return path


LINE = [
    {"row": 1, "col": 0, "entry": "W", "exit": "E"},
    {"row": 1, "col": 1, "entry": "W", "exit": "E"},
    {"row": 1, "col": 2, "entry": "W", "exit": "E"},
]

PLUS = [
    {"row": 0, "col": 1},
    {"row": 1, "col": 0},
    {"row": 1, "col": 1},
    {"row": 1, "col": 2},
    {"row": 2, "col": 1},
]


@pytest.fixture
def line_file(tmp_path: Path) -> Path:
    return write_document(tmp_path / "line.json", LINE)


@pytest.fixture
def plus_file(tmp_path: Path) -> Path:
    return write_document(tmp_path / "plus.json", PLUS)


class TestCalculateCommand:
    """Tests for 'cladding calculate'."""

    def test_text_report(self, line_file: Path) -> None:
        """The default output is a requirements report."""
        result = runner.invoke(app, ["calculate", str(line_file)])

        assert result.exit_code == 0
        assert "CLADDING REQUIREMENTS" in result.output
        assert "2 Pack Regular (2 side panels)" in result.output

    def test_json_output(self, line_file: Path) -> None:
        """--format json prints the full calculation."""
        result = runner.invoke(app, ["calculate", str(line_file), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["requirements"]["fourPackRegular"] == 1
        assert data["requirements"]["twoPackRegular"] == 2
        assert data["requirements"]["straightCouplings"] == 2

    def test_csv_output(self, line_file: Path) -> None:
        """--format csv prints the bill of materials as CSV."""
        result = runner.invoke(app, ["calculate", str(line_file), "-f", "csv"])

        assert result.exit_code == 0
        rows = list(csv.reader(io.StringIO(result.output)))
        assert rows[0][0] == "Key"
        assert [row[0] for row in rows[1:]] == [
            "fourPackRegular",
            "twoPackRegular",
            "straightCouplings",
        ]

    def test_bom_output(self, line_file: Path) -> None:
        """--format bom prints the text bill of materials."""
        result = runner.invoke(app, ["calculate", str(line_file), "--format", "bom"])

        assert result.exit_code == 0
        assert "BILL OF MATERIALS" in result.output

    def test_preset(self) -> None:
        """--preset calculates a bundled grid."""
        result = runner.invoke(app, ["calculate", "--preset", "u-shape", "-f", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["requirements"]["cornerConnectors"] == 2
        assert data["requirements"]["twoPackRegular"] == 4

    def test_clad_only_flag(self) -> None:
        """--clad-only counts only clad faces."""
        result = runner.invoke(
            app, ["calculate", "--preset", "u-shape", "--clad-only", "-f", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["requirements"]["twoPackRegular"] == 2
        assert data["requirements"]["sidePanels"] == 1

    def test_height_flag(self, line_file: Path) -> None:
        """--height extra_tall switches bundle fields."""
        result = runner.invoke(
            app, ["calculate", str(line_file), "--height", "extra_tall", "-f", "json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["requirements"]["fourPackExtraTall"] == 1

    def test_unknown_height(self, line_file: Path) -> None:
        """Unknown heights are rejected."""
        result = runner.invoke(app, ["calculate", str(line_file), "--height", "giant"])

        assert result.exit_code == 1
        assert "Unknown height" in result.output

    def test_invalid_placement_exits_1(self, plus_file: Path) -> None:
        """A branching grid prints the error and exits with code 1."""
        result = runner.invoke(app, ["calculate", str(plus_file)])

        assert result.exit_code == 1
        assert "INVALID GRID (branching_configuration)" in result.output

    def test_repair_flow_flag(self, tmp_path: Path) -> None:
        """--repair-flow lets a discontinuous document calculate."""
        cubes = [dict(LINE[0]), {"row": 1, "col": 1, "entry": "N", "exit": "S"}, dict(LINE[2])]
        path = write_document(tmp_path / "broken.json", cubes)

        assert runner.invoke(app, ["calculate", str(path)]).exit_code == 1
        assert runner.invoke(app, ["calculate", str(path), "--repair-flow"]).exit_code == 0

    def test_requires_one_input(self, line_file: Path) -> None:
        """A file and a preset cannot both be given, and one is needed."""
        neither = runner.invoke(app, ["calculate"])
        both = runner.invoke(app, ["calculate", str(line_file), "--preset", "single"])

        assert neither.exit_code == 1
        assert both.exit_code == 1
        assert "Provide either a grid file or --preset" in neither.output

    def test_unknown_preset(self) -> None:
        """Unknown presets list the available ones."""
        result = runner.invoke(app, ["calculate", "--preset", "zigzag"])

        assert result.exit_code == 1
        assert "Available presets: single, straight, l-shape, u-shape" in result.output

    def test_unknown_format(self, line_file: Path) -> None:
        """Unsupported output formats are rejected."""
        result = runner.invoke(app, ["calculate", str(line_file), "--format", "xml"])

        assert result.exit_code == 1
        assert "Unknown format 'xml'" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing grid file is reported."""
        result = runner.invoke(app, ["calculate", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output


class TestDiagramCommand:
    """Tests for 'cladding diagram'."""

    def test_diagram(self, line_file: Path) -> None:
        """The diagram shows flow arrows."""
        result = runner.invoke(app, ["diagram", str(line_file)])

        assert result.exit_code == 0
        assert "GRID (3x3)" in result.output
        assert "  1  >   >   >  " in result.output

    def test_invalid_grid_marks_cubes(self, plus_file: Path) -> None:
        """Invalid grids are drawn, then the command fails."""
        result = runner.invoke(app, ["diagram", str(plus_file)])

        assert result.exit_code == 1
        assert "!" in result.output
        assert "Error: Invalid cube placement" in result.output


class TestExportCommand:
    """Tests for 'cladding export'."""

    def test_export_all(self, line_file: Path, tmp_path: Path) -> None:
        """Every registered format is written."""
        out_dir = tmp_path / "out"
        result = runner.invoke(
            app, ["export", str(line_file), "--output-dir", str(out_dir)]
        )

        assert result.exit_code == 0
        assert "Exported files:" in result.output
        assert (out_dir / "cladding_json.json").exists()
        assert (out_dir / "cladding_bom.txt").exists()

    def test_export_selected_format(self, tmp_path: Path) -> None:
        """--formats limits the files written."""
        result = runner.invoke(
            app,
            [
                "export",
                "--preset",
                "l-shape",
                "--formats",
                "json",
                "-o",
                str(tmp_path),
                "--project-name",
                "garden",
            ],
        )

        assert result.exit_code == 0
        data = json.loads((tmp_path / "garden_json.json").read_text())
        assert data["requirements"]["cornerConnectors"] == 1
        assert not (tmp_path / "garden_bom.txt").exists()

    def test_unknown_format(self, line_file: Path, tmp_path: Path) -> None:
        """Unknown formats list the available ones."""
        result = runner.invoke(
            app, ["export", str(line_file), "--formats", "dxf", "-o", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "Unknown formats: dxf" in result.output

    def test_invalid_grid_not_exported(self, plus_file: Path, tmp_path: Path) -> None:
        """Nothing is written for an invalid grid."""
        out_dir = tmp_path / "out"
        result = runner.invoke(app, ["export", str(plus_file), "-o", str(out_dir)])

        assert result.exit_code == 1
        assert not out_dir.exists()
