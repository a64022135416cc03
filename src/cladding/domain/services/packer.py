"""Packing raw panel counts into purchasable bundles.

Panels are sold in two bundles:

- four-pack: 2 side + 1 left + 1 right panels
- two-pack: 2 side panels

Four-packs are filled first, then two-packs from the remaining side panels.
Anything left over is sold loose.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from cladding.domain.value_objects import PanelHeight

from .aggregator import RawRequirements

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BundleComposition:
    """Number of each panel type in one bundle."""

    side: int
    left: int = 0
    right: int = 0

    @property
    def size(self) -> int:
        return self.side + self.left + self.right


FOUR_PACK = BundleComposition(side=2, left=1, right=1)
TWO_PACK = BundleComposition(side=2)

# Keys used by the storefront when the requirements are serialized.
STOREFRONT_KEYS: dict[str, str] = {
    "four_pack_regular": "fourPackRegular",
    "four_pack_extra_tall": "fourPackExtraTall",
    "two_pack_regular": "twoPackRegular",
    "two_pack_extra_tall": "twoPackExtraTall",
    "side_panels": "sidePanels",
    "left_panels": "leftPanels",
    "right_panels": "rightPanels",
    "straight_couplings": "straightCouplings",
    "corner_connectors": "cornerConnectors",
}


@dataclass(frozen=True)
class PackedRequirements:
    """Bundled requirements.

    ``side_panels``, ``left_panels`` and ``right_panels`` are the loose panels
    left over after bundling.
    """

    four_pack_regular: int = 0
    four_pack_extra_tall: int = 0
    two_pack_regular: int = 0
    two_pack_extra_tall: int = 0
    side_panels: int = 0
    left_panels: int = 0
    right_panels: int = 0
    straight_couplings: int = 0
    corner_connectors: int = 0

    def __post_init__(self) -> None:
        if any(value < 0 for value in asdict(self).values()):
            raise ValueError("Packed requirement counts must be non-negative")

    @property
    def four_packs(self) -> int:
        return self.four_pack_regular + self.four_pack_extra_tall

    @property
    def two_packs(self) -> int:
        return self.two_pack_regular + self.two_pack_extra_tall

    @property
    def loose_panels(self) -> int:
        return self.side_panels + self.left_panels + self.right_panels

    @property
    def total_panels(self) -> int:
        """Panels delivered, bundled and loose."""
        return (
            self.four_packs * FOUR_PACK.size
            + self.two_packs * TWO_PACK.size
            + self.loose_panels
        )

    @property
    def is_empty(self) -> bool:
        return not any(asdict(self).values())

    def to_dict(self) -> dict[str, int]:
        """Serialize with the storefront's camelCase keys."""
        return {STOREFRONT_KEYS[key]: value for key, value in asdict(self).items()}


class PanelPacker:
    """Greedy bundle packer.

    Args:
        height: Cube height; selects the regular or extra-tall bundle fields.
    """

    def __init__(self, height: PanelHeight = PanelHeight.STANDARD) -> None:
        self.height = height

    def pack(self, raw: RawRequirements) -> PackedRequirements:
        side, left, right = raw.side_panels, raw.left_panels, raw.right_panels

        four_packs = min(
            left // FOUR_PACK.left,
            right // FOUR_PACK.right,
            side // FOUR_PACK.side,
        )
        side -= four_packs * FOUR_PACK.side
        left -= four_packs * FOUR_PACK.left
        right -= four_packs * FOUR_PACK.right

        two_packs = side // TWO_PACK.side
        side -= two_packs * TWO_PACK.side

        logger.debug(
            f"Packed {raw.total_panels} panels into {four_packs} four-pack(s), "
            f"{two_packs} two-pack(s) and {side + left + right} loose"
        )

        extra_tall = self.height is PanelHeight.EXTRA_TALL
        return PackedRequirements(
            four_pack_regular=0 if extra_tall else four_packs,
            four_pack_extra_tall=four_packs if extra_tall else 0,
            two_pack_regular=0 if extra_tall else two_packs,
            two_pack_extra_tall=two_packs if extra_tall else 0,
            side_panels=side,
            left_panels=left,
            right_panels=right,
            straight_couplings=raw.straight_couplings,
            corner_connectors=raw.corner_connectors,
        )
