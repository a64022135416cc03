"""Unit tests for RequirementAggregator and PanelPacker."""

import pytest

from cladding.domain.services.aggregator import RawRequirements, RequirementAggregator
from cladding.domain.services.connector_classifier import Joint
from cladding.domain.services.packer import (
    FOUR_PACK,
    TWO_PACK,
    PackedRequirements,
    PanelPacker,
)
from cladding.domain.services.panel_classifier import FacePanel
from cladding.domain.value_objects import (
    ConnectorType,
    GridPosition,
    PanelHeight,
    PanelType,
)
from helpers import E, N, S, W


def face(panel_type: PanelType, clad: bool = True, direction=N) -> FacePanel:
    return FacePanel(
        position=GridPosition(0, 0),
        direction=direction,
        panel_type=panel_type,
        clad=clad,
    )


def joint(connector: ConnectorType) -> Joint:
    return Joint(
        upstream=GridPosition(0, 0),
        downstream=GridPosition(0, 1),
        connector=connector,
    )


class TestRawRequirements:
    """Tests for RawRequirements."""

    def test_negative_counts_rejected(self) -> None:
        """Counts must never go below zero."""
        with pytest.raises(ValueError, match="non-negative"):
            RawRequirements(side_panels=-1)

    def test_addition(self) -> None:
        """Requirements add field by field."""
        total = RawRequirements(side_panels=2, left_panels=1) + RawRequirements(
            side_panels=4, straight_couplings=1
        )
        assert total == RawRequirements(side_panels=6, left_panels=1, straight_couplings=1)

    def test_totals(self) -> None:
        """Totals add up panels and connectors separately."""
        raw = RawRequirements(
            side_panels=6,
            left_panels=1,
            right_panels=1,
            straight_couplings=1,
            corner_connectors=1,
        )
        assert raw.total_panels == 8
        assert raw.total_connectors == 2


class TestRequirementAggregator:
    """Tests for RequirementAggregator."""

    def test_counts_every_exposed_face_by_default(self) -> None:
        """Clad flags are ignored unless clad-only counting is on."""
        faces = [
            face(PanelType.SIDE, clad=False),
            face(PanelType.SIDE),
            face(PanelType.LEFT, clad=False, direction=W),
            face(PanelType.RIGHT, direction=E),
        ]
        raw = RequirementAggregator().aggregate(faces, [])
        assert (raw.side_panels, raw.left_panels, raw.right_panels) == (2, 1, 1)

    def test_clad_only_skips_unclad_faces(self) -> None:
        """Only faces marked clad are counted in clad-only mode."""
        faces = [
            face(PanelType.SIDE, clad=False),
            face(PanelType.SIDE, direction=S),
            face(PanelType.LEFT, clad=False, direction=W),
            face(PanelType.RIGHT, direction=E),
        ]
        raw = RequirementAggregator(count_clad_only=True).aggregate(faces, [])
        assert (raw.side_panels, raw.left_panels, raw.right_panels) == (1, 0, 1)

    def test_clad_only_leaves_connectors_alone(self) -> None:
        """Connectors are counted regardless of cladding."""
        joints = [
            joint(ConnectorType.STRAIGHT),
            joint(ConnectorType.CORNER_LEFT),
            joint(ConnectorType.CORNER_RIGHT),
        ]
        raw = RequirementAggregator(count_clad_only=True).aggregate([], joints)
        assert raw.straight_couplings == 1
        assert raw.corner_connectors == 2


class TestPanelPacker:
    """Tests for PanelPacker."""

    @pytest.fixture
    def packer(self) -> PanelPacker:
        return PanelPacker()

    def test_bundle_compositions(self) -> None:
        """A four-pack holds four panels and a two-pack two sides."""
        assert (FOUR_PACK.side, FOUR_PACK.left, FOUR_PACK.right) == (2, 1, 1)
        assert FOUR_PACK.size == 4
        assert TWO_PACK.size == 2

    def test_single_cube(self, packer: PanelPacker) -> None:
        """Two sides, one left and one right make a single four-pack."""
        packed = packer.pack(RawRequirements(side_panels=2, left_panels=1, right_panels=1))
        assert packed == PackedRequirements(four_pack_regular=1)

    def test_line(self, packer: PanelPacker) -> None:
        """Six sides pack into a four-pack and two two-packs."""
        packed = packer.pack(
            RawRequirements(
                side_panels=6, left_panels=1, right_panels=1, straight_couplings=2
            )
        )
        assert packed.four_pack_regular == 1
        assert packed.two_pack_regular == 2
        assert packed.loose_panels == 0
        assert packed.straight_couplings == 2

    def test_odd_side_count_leaves_one_loose(self, packer: PanelPacker) -> None:
        """Two-packs round down; the odd side panel is sold loose."""
        packed = packer.pack(RawRequirements(side_panels=7, left_panels=1, right_panels=1))
        assert packed.four_pack_regular == 1
        assert packed.two_pack_regular == 2
        assert packed.side_panels == 1

    def test_unbalanced_ends_left_loose(self, packer: PanelPacker) -> None:
        """End panels without a partner stay loose."""
        packed = packer.pack(RawRequirements(side_panels=4, left_panels=2, right_panels=1))
        assert packed.four_pack_regular == 1
        assert packed.two_pack_regular == 1
        assert packed.left_panels == 1

    def test_too_few_sides_for_four_pack(self, packer: PanelPacker) -> None:
        """A four-pack needs two side panels."""
        packed = packer.pack(RawRequirements(side_panels=1, left_panels=1, right_panels=1))
        assert packed.four_packs == 0
        assert packed.loose_panels == 3

    def test_nothing_to_pack(self, packer: PanelPacker) -> None:
        """Zero panels pack into nothing."""
        assert packer.pack(RawRequirements()).is_empty

    def test_extra_tall_uses_extra_tall_fields(self) -> None:
        """Extra-tall cubes fill the extra-tall bundle counts only."""
        packed = PanelPacker(height=PanelHeight.EXTRA_TALL).pack(
            RawRequirements(side_panels=6, left_panels=1, right_panels=1)
        )
        assert packed.four_pack_regular == 0
        assert packed.two_pack_regular == 0
        assert packed.four_pack_extra_tall == 1
        assert packed.two_pack_extra_tall == 2

    @pytest.mark.parametrize(
        "side,left,right",
        [(0, 0, 0), (2, 1, 1), (6, 1, 1), (7, 1, 1), (10, 3, 1), (3, 0, 5)],
    )
    def test_every_panel_delivered_once(
        self, packer: PanelPacker, side: int, left: int, right: int
    ) -> None:
        """Bundled plus loose panels equal the raw panel count."""
        raw = RawRequirements(side_panels=side, left_panels=left, right_panels=right)
        packed = packer.pack(raw)
        assert packed.total_panels == raw.total_panels


class TestPackedRequirements:
    """Tests for PackedRequirements."""

    def test_to_dict_uses_camel_case(self) -> None:
        """Serialized keys match the storefront's names."""
        data = PackedRequirements(four_pack_regular=1, corner_connectors=2).to_dict()
        assert data["fourPackRegular"] == 1
        assert data["cornerConnectors"] == 2
        assert set(data) == {
            "fourPackRegular",
            "fourPackExtraTall",
            "twoPackRegular",
            "twoPackExtraTall",
            "sidePanels",
            "leftPanels",
            "rightPanels",
            "straightCouplings",
            "cornerConnectors",
        }

    def test_negative_counts_rejected(self) -> None:
        """Packed counts must never go below zero."""
        with pytest.raises(ValueError):
            PackedRequirements(two_pack_regular=-1)
