"""Integration tests for the 'presets' CLI commands.

This module tests `presets list`, `presets show` and `presets init`
end-to-end using the Typer CliRunner.
"""

import json
import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cladding.cli.main import app

runner = CliRunner()

pytestmark = pytest.mark.integration


class TestPresetsListCommand:
    """Test suite for 'presets list'."""

    def test_list_shows_all_presets(self) -> None:
        """Every bundled preset is listed with its description."""
        result = runner.invoke(app, ["presets", "list"])

        assert result.exit_code == 0
        assert "Available presets:" in result.output
        assert "u-shape   - Five cubes with two turns, partially clad" in result.output
        assert "cladding presets init" in result.output


class TestPresetsShowCommand:
    """Test suite for 'presets show'."""

    def test_show_diagram(self) -> None:
        """A preset is drawn with its flow."""
        result = runner.invoke(app, ["presets", "show", "l-shape"])

        assert result.exit_code == 0
        assert "  1  >   v   .  " in result.output

    def test_show_json(self) -> None:
        """--json prints the preset document."""
        result = runner.invoke(app, ["presets", "show", "single", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["name"] == "Single cube"

    def test_show_unknown(self) -> None:
        """Unknown presets exit with code 1."""
        result = runner.invoke(app, ["presets", "show", "zigzag"])

        assert result.exit_code == 1
        assert "Preset not found: zigzag" in result.output


class TestPresetsInitCommand:
    """Test suite for 'presets init'."""

    def test_init_default_name(self, tmp_path: Path) -> None:
        """init writes <name>.json in the working directory."""
        original_cwd = os.getcwd()
        try:
            os.chdir(tmp_path)
            result = runner.invoke(app, ["presets", "init", "straight"])

            assert result.exit_code == 0
            assert "Created: straight.json" in result.output
            content = json.loads((tmp_path / "straight.json").read_text())
            assert len(content["grid"]["cubes"]) == 3
        finally:
            os.chdir(original_cwd)

    def test_init_custom_output(self, tmp_path: Path) -> None:
        """--output chooses the file name."""
        output = tmp_path / "garden.json"
        result = runner.invoke(app, ["presets", "init", "u-shape", "--output", str(output)])

        assert result.exit_code == 0
        assert output.exists()

    def test_init_refuses_to_overwrite(self, tmp_path: Path) -> None:
        """Existing files need --force."""
        output = tmp_path / "taken.json"
        output.write_text("{}")

        refused = runner.invoke(app, ["presets", "init", "single", "-o", str(output)])
        assert refused.exit_code == 1
        assert "Use --force to overwrite." in refused.output
        assert output.read_text() == "{}"

        forced = runner.invoke(app, ["presets", "init", "single", "-o", str(output), "--force"])
        assert forced.exit_code == 0
        assert json.loads(output.read_text())["name"] == "Single cube"

    def test_init_unknown(self, tmp_path: Path) -> None:
        """Unknown presets are not written."""
        output = tmp_path / "nope.json"
        result = runner.invoke(app, ["presets", "init", "zigzag", "-o", str(output)])

        assert result.exit_code == 1
        assert not output.exists()
