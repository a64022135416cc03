"""Cladding and supplied flow checks for grid documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cladding.application.config.adapter import document_to_grid
from cladding.domain.services.topology import GridTopology
from cladding.domain.value_objects import GridPosition

from .base import ValidationResult

if TYPE_CHECKING:
    from cladding.application.config.schema import GridDocument


class CladdingValidator:
    """Advisories for cladding marks on each cube.

    - Cladding listed on a face covered by a neighbouring cube is ignored.
    - With count_clad_only, a cube with no clad faces adds no panels.
    """

    @property
    def name(self) -> str:
        return "cladding"

    def validate(self, document: GridDocument) -> ValidationResult:
        result = ValidationResult()
        topology = GridTopology(document_to_grid(document))

        for i, cube in enumerate(document.grid.cubes):
            if cube.clad is None:
                continue
            path = f"grid.cubes[{i}].clad"
            exposed = set(topology.exposed_directions(GridPosition(cube.row, cube.col)))
            hidden = [d.value for d in cube.clad if d not in exposed]
            if hidden:
                result.add_warning(
                    path=path,
                    message=(
                        f"Faces {', '.join(hidden)} of cube ({cube.row}, {cube.col}) "
                        "touch another cube and cannot be clad"
                    ),
                    suggestion="Remove them from the clad list",
                )
            if document.options.count_clad_only and not exposed & set(cube.clad):
                result.add_warning(
                    path=path,
                    message=f"Cube ({cube.row}, {cube.col}) has no clad faces",
                )
        return result


class FlowValidator:
    """Advisories for supplied entry/exit faces.

    Flow is only used when every cube of a run carries both an entry and an
    exit; anything less is ignored and the run is traced automatically.
    """

    @property
    def name(self) -> str:
        return "flow"

    def validate(self, document: GridDocument) -> ValidationResult:
        result = ValidationResult()
        cubes = document.grid.cubes
        with_flow = 0
        for i, cube in enumerate(cubes):
            if (cube.entry is None) != (cube.exit is None):
                result.add_warning(
                    path=f"grid.cubes[{i}]",
                    message=(
                        f"Cube ({cube.row}, {cube.col}) has only one of entry/exit; "
                        "its flow will be traced automatically"
                    ),
                )
            if cube.entry is not None and cube.exit is not None:
                with_flow += 1

        if 0 < with_flow < len(cubes):
            result.add_warning(
                path="grid.cubes",
                message=(
                    f"Flow is given for {with_flow} of {len(cubes)} cubes; runs "
                    "without complete flow will be traced automatically"
                ),
            )
        return result
