"""Conversion between grid documents and domain objects."""

from __future__ import annotations

from typing import Any

from cladding.application.bill_of_materials import DEFAULT_CATALOG, CatalogEntry
from cladding.application.config.schema import CURRENT_VERSION, GridDocument
from cladding.domain.entities import Cell, Grid
from cladding.domain.services.engine import EngineSettings
from cladding.domain.services.topology import GridTopology
from cladding.domain.value_objects import FACE_ORDER, Connection, GridPosition


def document_to_grid(document: GridDocument) -> Grid:
    """Build the grid snapshot a document describes.

    Cubes without an explicit ``clad`` list get every exposed face clad,
    matching what the grid editor does when a cube is placed.
    """
    config = document.grid
    occupancy = Grid.from_cells(
        (Cell(row=cube.row, col=cube.col, has_cube=True) for cube in config.cubes),
        rows=config.rows,
        cols=config.cols,
    )
    topology = GridTopology(occupancy)

    cells = []
    for cube in config.cubes:
        if cube.clad is None:
            clad = topology.exposed_directions(GridPosition(cube.row, cube.col))
        else:
            clad = cube.clad
        cells.append(
            Cell(
                row=cube.row,
                col=cube.col,
                has_cube=True,
                connection=Connection(entry=cube.entry, exit=cube.exit),
                clad=frozenset(clad),
            )
        )
    return Grid.from_cells(cells, rows=config.rows, cols=config.cols)


def document_to_settings(document: GridDocument) -> EngineSettings:
    options = document.options
    return EngineSettings(
        count_clad_only=options.count_clad_only,
        repair_flow=options.repair_flow,
        height=options.height,
    )


def document_to_catalog(document: GridDocument) -> dict[str, CatalogEntry]:
    """Merge the document's catalog overrides onto the default labels."""
    catalog: dict[str, CatalogEntry] = {}
    for key, entry in document.catalog.items():
        catalog[key] = CatalogEntry(
            label=entry.label or DEFAULT_CATALOG[key].label,
            variant_id=entry.variant_id,
            unit_price=entry.unit_price,
        )
    return catalog


def grid_to_document(
    grid: Grid,
    settings: EngineSettings | None = None,
    name: str | None = None,
) -> dict[str, Any]:
    """Serialize a grid snapshot as a grid document dictionary.

    Cladding is always written explicitly so the round trip keeps faces the
    user has un-clad.
    """
    cubes: list[dict[str, Any]] = []
    for cell in grid.occupied():
        cube: dict[str, Any] = {"row": cell.row, "col": cell.col}
        if cell.connection.entry is not None:
            cube["entry"] = cell.connection.entry.value
        if cell.connection.exit is not None:
            cube["exit"] = cell.connection.exit.value
        cube["clad"] = [d.value for d in FACE_ORDER if d in cell.clad]
        cubes.append(cube)

    document: dict[str, Any] = {"schema_version": CURRENT_VERSION}
    if name:
        document["name"] = name
    document["grid"] = {"rows": grid.rows, "cols": grid.cols, "cubes": cubes}
    if settings is not None:
        document["options"] = {
            "count_clad_only": settings.count_clad_only,
            "repair_flow": settings.repair_flow,
            "height": settings.height.value,
        }
    return document
