"""Folding face and joint classifications into raw counts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from cladding.domain.value_objects import ConnectorType, PanelType, ShapeKind

from .connector_classifier import Joint
from .panel_classifier import FacePanel


@dataclass(frozen=True)
class RawRequirements:
    """Unpacked panel and connector counts."""

    side_panels: int = 0
    left_panels: int = 0
    right_panels: int = 0
    straight_couplings: int = 0
    corner_connectors: int = 0

    def __post_init__(self) -> None:
        if min(
            self.side_panels,
            self.left_panels,
            self.right_panels,
            self.straight_couplings,
            self.corner_connectors,
        ) < 0:
            raise ValueError("Requirement counts must be non-negative")

    @property
    def total_panels(self) -> int:
        return self.side_panels + self.left_panels + self.right_panels

    @property
    def total_connectors(self) -> int:
        return self.straight_couplings + self.corner_connectors

    def __add__(self, other: RawRequirements) -> RawRequirements:
        if not isinstance(other, RawRequirements):
            return NotImplemented
        return RawRequirements(
            side_panels=self.side_panels + other.side_panels,
            left_panels=self.left_panels + other.left_panels,
            right_panels=self.right_panels + other.right_panels,
            straight_couplings=self.straight_couplings + other.straight_couplings,
            corner_connectors=self.corner_connectors + other.corner_connectors,
        )


@dataclass(frozen=True)
class RunRequirements:
    """Raw counts for one run, kept for reporting."""

    index: int
    length: int
    exposed_faces: int
    shape: ShapeKind
    raw: RawRequirements


class RequirementAggregator:
    """Counts panels and connectors.

    Args:
        count_clad_only: Count only faces marked as clad instead of every
            exposed face.
    """

    def __init__(self, count_clad_only: bool = False) -> None:
        self.count_clad_only = count_clad_only

    def aggregate(
        self, faces: Iterable[FacePanel], joints: Iterable[Joint]
    ) -> RawRequirements:
        panels = {panel_type: 0 for panel_type in PanelType}
        for face in faces:
            if self.count_clad_only and not face.clad:
                continue
            panels[face.panel_type] += 1

        straight = corner = 0
        for joint in joints:
            if joint.connector is ConnectorType.STRAIGHT:
                straight += 1
            else:
                corner += 1

        return RawRequirements(
            side_panels=panels[PanelType.SIDE],
            left_panels=panels[PanelType.LEFT],
            right_panels=panels[PanelType.RIGHT],
            straight_couplings=straight,
            corner_connectors=corner,
        )
