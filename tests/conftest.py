"""Pytest configuration and shared fixtures for cladding tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest

from cladding.domain.entities import Grid
from helpers import E, N, S, W, cube

if TYPE_CHECKING:
    from cladding.application.commands import CalculateRequirementsCommand
    from cladding.domain.services.engine import CladdingEngine


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests that exercise several layers together"
    )


# =============================================================================
# Canonical grids
# =============================================================================


@pytest.fixture
def single_grid() -> Grid:
    """One cube in the middle of a 3x3 grid, flowing west to east."""
    return Grid.from_cells([cube(1, 1, W, E)])


@pytest.fixture
def line_grid() -> Grid:
    """Three cubes across the middle row, flowing west to east."""
    return Grid.from_cells([cube(1, 0, W, E), cube(1, 1, W, E), cube(1, 2, W, E)])


@pytest.fixture
def l_grid() -> Grid:
    """Three cubes turning south at (1, 1)."""
    return Grid.from_cells([cube(1, 0, W, E), cube(1, 1, W, S), cube(2, 1, N, S)])


@pytest.fixture
def u_grid() -> Grid:
    """Five cubes forming a U open to the north."""
    return Grid.from_cells(
        [
            cube(1, 0, N, S),
            cube(2, 0, N, E),
            cube(2, 1, W, E),
            cube(2, 2, W, N),
            cube(1, 2, S, N),
        ]
    )


@pytest.fixture
def plus_grid() -> Grid:
    """A plus-shaped cluster; the centre cube has four neighbours."""
    return Grid.from_pattern([".X.", "XXX", ".X."])


# =============================================================================
# Shared fixtures for service creation
# =============================================================================


@pytest.fixture
def engine() -> "CladdingEngine":
    """Engine with default settings."""
    from cladding.application.factory import get_factory

    return get_factory().create_engine()


@pytest.fixture
def calculate_command() -> "CalculateRequirementsCommand":
    """Create a CalculateRequirementsCommand using the factory."""
    from cladding.application.factory import get_factory

    return get_factory().create_calculate_command()


@pytest.fixture
def clean_validator_registry() -> Iterator[None]:
    """Run a test against an empty validator registry, then restore it."""
    from cladding.application.config.validators import ValidatorRegistry

    original = dict(ValidatorRegistry._validators)
    disabled = set(ValidatorRegistry._disabled)
    ValidatorRegistry.clear()
    yield
    ValidatorRegistry.clear()
    ValidatorRegistry._validators.update(original)
    ValidatorRegistry._disabled.update(disabled)
