"""Pydantic schema for grid documents.

A grid document is the JSON file format used by the CLI, the REST API and
the bundled presets. It describes the cube layout, optional supplied flow
and cladding, calculation options, and an optional product catalog.
"""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from cladding.domain.entities import DEFAULT_GRID_SIZE, MAX_GRID_SIZE
from cladding.domain.services.packer import STOREFRONT_KEYS
from cladding.domain.value_objects import CompassDirection, PanelHeight

# Supported schema versions for grid documents
# Version 1.0: Cube layout, supplied flow and cladding
# Version 1.1: Added panel height and product catalog
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

CURRENT_VERSION = "1.1"


class CubeConfig(BaseModel):
    """One cube on the grid.

    Attributes:
        row: Zero-based row index.
        col: Zero-based column index.
        entry: Face flow enters through (optional, N/S/E/W).
        exit: Face flow leaves through (optional, N/S/E/W).
        clad: Faces marked as clad. Omitted means every exposed face.
    """

    model_config = ConfigDict(extra="forbid")

    row: int = Field(..., ge=0, lt=MAX_GRID_SIZE)
    col: int = Field(..., ge=0, lt=MAX_GRID_SIZE)
    entry: CompassDirection | None = None
    exit: CompassDirection | None = None
    clad: list[CompassDirection] | None = None

    @field_validator("clad")
    @classmethod
    def no_duplicate_faces(
        cls, v: list[CompassDirection] | None
    ) -> list[CompassDirection] | None:
        if v is not None and len(set(v)) != len(v):
            raise ValueError("Cladding faces must not repeat")
        return v

    @model_validator(mode="after")
    def entry_differs_from_exit(self) -> CubeConfig:
        if self.entry is not None and self.entry == self.exit:
            raise ValueError("entry and exit must be different faces")
        return self


class GridConfig(BaseModel):
    """Grid dimensions and the cubes placed on it.

    Attributes:
        rows: Number of rows (1 to 8, default 3).
        cols: Number of columns (1 to 8, default 3).
        cubes: Occupied cells.
    """

    model_config = ConfigDict(extra="forbid")

    rows: int = Field(default=DEFAULT_GRID_SIZE, ge=1, le=MAX_GRID_SIZE)
    cols: int = Field(default=DEFAULT_GRID_SIZE, ge=1, le=MAX_GRID_SIZE)
    cubes: list[CubeConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def cubes_fit_grid(self) -> GridConfig:
        seen: set[tuple[int, int]] = set()
        for cube in self.cubes:
            if cube.row >= self.rows or cube.col >= self.cols:
                raise ValueError(
                    f"Cube ({cube.row}, {cube.col}) is outside the "
                    f"{self.rows}x{self.cols} grid"
                )
            key = (cube.row, cube.col)
            if key in seen:
                raise ValueError(f"Cube ({cube.row}, {cube.col}) is listed twice")
            seen.add(key)
        return self


class OptionsConfig(BaseModel):
    """Calculation options.

    Attributes:
        count_clad_only: Count only faces marked as clad.
        repair_flow: Repair supplied flow that breaks continuity.
        height: Cube height (standard or extra_tall, v1.1+).
    """

    model_config = ConfigDict(extra="forbid")

    count_clad_only: bool = False
    repair_flow: bool = False
    height: PanelHeight = PanelHeight.STANDARD


class CatalogEntryConfig(BaseModel):
    """Storefront product for one requirement line.

    Attributes:
        label: Display label overriding the default.
        variant_id: Storefront variant identifier.
        unit_price: Price per unit for cost estimation.
    """

    model_config = ConfigDict(extra="forbid")

    label: str | None = Field(default=None, min_length=1)
    variant_id: str | None = Field(default=None, min_length=1)
    unit_price: float | None = Field(default=None, ge=0)


class GridDocument(BaseModel):
    """Root model of a grid document.

    Example:
        >>> doc = GridDocument(
        ...     schema_version="1.0",
        ...     grid=GridConfig(cubes=[CubeConfig(row=1, col=1)]),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    name: str | None = Field(default=None, description="Optional document title")
    grid: GridConfig = Field(default_factory=GridConfig)
    options: OptionsConfig = Field(default_factory=OptionsConfig)
    catalog: dict[str, CatalogEntryConfig] = Field(default_factory=dict)

    @field_validator("catalog")
    @classmethod
    def known_catalog_keys(
        cls, v: dict[str, CatalogEntryConfig]
    ) -> dict[str, CatalogEntryConfig]:
        unknown = sorted(set(v) - set(STOREFRONT_KEYS.values()))
        if unknown:
            raise ValueError(
                f"Unknown catalog keys: {', '.join(unknown)}. "
                f"Expected any of: {', '.join(STOREFRONT_KEYS.values())}"
            )
        return v

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
