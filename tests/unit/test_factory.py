"""Unit tests for ServiceFactory and CalculateRequirementsCommand."""

from collections.abc import Iterator

import pytest

from cladding.application.commands import CalculateRequirementsCommand
from cladding.application.config import load_document_from_dict
from cladding.application.factory import (
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from cladding.domain.entities import Grid
from cladding.domain.services.engine import CladdingEngine, EngineSettings
from cladding.domain.value_objects import PanelHeight
from cladding.infrastructure.observers import RecordingObserver


@pytest.fixture
def restore_factory() -> Iterator[None]:
    reset_factory()
    yield
    reset_factory()


@pytest.mark.usefixtures("restore_factory")
class TestServiceFactory:
    """Tests for ServiceFactory and the module-level default."""

    def test_get_factory_is_cached(self) -> None:
        """get_factory() returns the same instance until reset."""
        assert get_factory() is get_factory()

    def test_set_and_reset(self) -> None:
        """set_factory() swaps the default; reset_factory() discards it."""
        custom = ServiceFactory()
        set_factory(custom)
        assert get_factory() is custom
        reset_factory()
        assert get_factory() is not custom

    def test_create_engine_uses_settings_and_observer(self, line_grid: Grid) -> None:
        """Engines share the factory's observer."""
        observer = RecordingObserver()
        factory = ServiceFactory(observer=observer)
        engine = factory.create_engine(EngineSettings(height=PanelHeight.EXTRA_TALL))
        assert isinstance(engine, CladdingEngine)
        assert engine.settings.height is PanelHeight.EXTRA_TALL
        engine.validate_and_compute(line_grid)
        assert observer.names()[-1] == "complete"

    def test_preset_manager_is_shared(self) -> None:
        """The preset manager is created once per factory."""
        factory = ServiceFactory()
        assert factory.get_preset_manager() is factory.get_preset_manager()

    def test_create_grid_editor(self, u_grid: Grid) -> None:
        """Editors start from the given grid."""
        editor = ServiceFactory().create_grid_editor(grid=u_grid)
        assert editor.grid is u_grid
        assert editor.requirements.corner_connectors == 2


class TestCalculateRequirementsCommand:
    """Tests for CalculateRequirementsCommand."""

    def test_execute(
        self, calculate_command: CalculateRequirementsCommand, line_grid: Grid
    ) -> None:
        """execute() returns requirements and a bill of materials."""
        output = calculate_command.execute(line_grid)
        assert output.is_valid
        assert output.requirements is not None
        assert output.requirements.two_pack_regular == 2
        assert output.bill_of_materials is not None
        assert output.error_messages == []

    def test_execute_invalid(
        self, calculate_command: CalculateRequirementsCommand, plus_grid: Grid
    ) -> None:
        """Grid errors are reported through the output."""
        output = calculate_command.execute(plus_grid)
        assert not output.is_valid
        assert output.bill_of_materials is not None
        assert output.bill_of_materials.items == ()
        assert "T-shaped" in output.error_messages[0]

    def test_execute_document_uses_options(
        self, calculate_command: CalculateRequirementsCommand
    ) -> None:
        """Document options and catalog feed the calculation."""
        document = load_document_from_dict(
            {
                "schema_version": "1.1",
                "grid": {"cubes": [{"row": 1, "col": 1}]},
                "options": {"height": "extra_tall"},
                "catalog": {"fourPackExtraTall": {"unit_price": 95.0}},
            }
        )
        output = calculate_command.execute_document(document)
        assert output.settings.height is PanelHeight.EXTRA_TALL
        assert output.bill_of_materials is not None
        assert output.bill_of_materials.total_cost == 95.0

    def test_execute_document_settings_override(
        self, calculate_command: CalculateRequirementsCommand
    ) -> None:
        """Explicit settings win over the document's options."""
        document = load_document_from_dict(
            {
                "schema_version": "1.1",
                "grid": {"cubes": [{"row": 1, "col": 1, "clad": []}]},
                "options": {"count_clad_only": True},
            }
        )
        output = calculate_command.execute_document(document, EngineSettings())
        assert output.requirements is not None
        assert output.requirements.four_pack_regular == 1
