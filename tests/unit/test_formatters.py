"""Unit tests for the requirements report and grid diagram formatters."""

from cladding.application.commands import CalculateRequirementsCommand
from cladding.contracts.dtos import CalculationOutput
from cladding.domain.entities import Grid
from cladding.domain.services.engine import CladdingEngine, EngineSettings
from cladding.domain.value_objects import PanelHeight
from cladding.infrastructure.formatters import GridDiagramFormatter, RequirementsFormatter


class TestRequirementsFormatter:
    """Tests for RequirementsFormatter."""

    def test_valid_report(
        self, calculate_command: CalculateRequirementsCommand, line_grid: Grid
    ) -> None:
        """The report lists bundles, raw counts and runs."""
        report = RequirementsFormatter().format(calculate_command.execute(line_grid))
        assert "CLADDING REQUIREMENTS" in report
        assert "4 Pack Regular (2 side + 1 left + 1 right)" in report
        assert "Side panels: 6  Left: 1  Right: 1" in report
        assert "RUNS" in report
        assert "straight" in report

    def test_runs_can_be_hidden(
        self, calculate_command: CalculateRequirementsCommand, line_grid: Grid
    ) -> None:
        """show_runs=False leaves out the per-run table."""
        report = RequirementsFormatter(show_runs=False).format(
            calculate_command.execute(line_grid)
        )
        assert "RUNS" not in report

    def test_settings_shown(
        self, calculate_command: CalculateRequirementsCommand, line_grid: Grid
    ) -> None:
        """Height and clad-only counting are stated."""
        settings = EngineSettings(count_clad_only=True, height=PanelHeight.EXTRA_TALL)
        report = RequirementsFormatter().format(calculate_command.execute(line_grid, settings))
        assert "Height: extra tall" in report
        assert "Counting clad faces only" in report

    def test_invalid_grid(
        self, calculate_command: CalculateRequirementsCommand, plus_grid: Grid
    ) -> None:
        """Invalid grids show the error and the cubes involved."""
        report = RequirementsFormatter().format(calculate_command.execute(plus_grid))
        assert "INVALID GRID (branching_configuration)" in report
        assert "Cubes: (1, 1)" in report

    def test_input_errors(self) -> None:
        """Input errors are listed instead of requirements."""
        output = CalculationOutput(grid=None, settings=EngineSettings(), errors=["bad cube"])
        report = RequirementsFormatter().format(output)
        assert "  - bad cube" in report

    def test_empty_grid(self, calculate_command: CalculateRequirementsCommand) -> None:
        """An empty grid has nothing to order."""
        report = RequirementsFormatter().format(calculate_command.execute(Grid.empty()))
        assert "(Nothing to order)" in report


class TestGridDiagramFormatter:
    """Tests for GridDiagramFormatter."""

    def test_flow_arrows(self, engine: CladdingEngine, l_grid: Grid) -> None:
        """Each cube shows the direction flow leaves it."""
        diagram = GridDiagramFormatter().format(l_grid, engine.validate_and_compute(l_grid))
        lines = diagram.splitlines()
        assert lines[0] == "GRID (3x3)"
        assert lines[4] == "  1  >   v   .  "
        assert lines[5] == "  2  .   v   .  "

    def test_single_cube_has_no_flow(self, engine: CladdingEngine, single_grid: Grid) -> None:
        """An isolated cube is drawn without an arrow."""
        diagram = GridDiagramFormatter().format(
            single_grid, engine.validate_and_compute(single_grid)
        )
        assert diagram.splitlines()[4] == "  1  .   o   .  "

    def test_rejected_cubes_marked(self, engine: CladdingEngine, plus_grid: Grid) -> None:
        """Cubes named in a grid error are marked."""
        diagram = GridDiagramFormatter().format(plus_grid, engine.validate_and_compute(plus_grid))
        assert diagram.splitlines()[4] == "  1  o   !   o  "

    def test_without_result(self, line_grid: Grid) -> None:
        """Without a result every cube is drawn without flow."""
        diagram = GridDiagramFormatter().format(line_grid)
        assert diagram.splitlines()[4] == "  1  o   o   o  "
