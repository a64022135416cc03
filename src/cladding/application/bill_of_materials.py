"""Bill of materials for packed cladding requirements.

Turns ``PackedRequirements`` into ordered purchasable line items, optionally
mapped to storefront variant ids and unit prices from a catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from cladding.domain.services.packer import PackedRequirements

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogEntry:
    """Storefront product for one requirement line.

    Attributes:
        label: Display label.
        variant_id: Storefront variant identifier, if the item is sold online.
        unit_price: Price per unit for cost estimation.
    """

    label: str
    variant_id: str | None = None
    unit_price: float | None = None

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("Catalog label must not be empty")
        if self.unit_price is not None and self.unit_price < 0:
            raise ValueError("Unit price must be non-negative")


# Default labels keyed by storefront requirement key, in display order.
DEFAULT_CATALOG: dict[str, CatalogEntry] = {
    "fourPackRegular": CatalogEntry("4 Pack Regular (2 side + 1 left + 1 right)"),
    "fourPackExtraTall": CatalogEntry("4 Pack Extra Tall (2 side + 1 left + 1 right)"),
    "twoPackRegular": CatalogEntry("2 Pack Regular (2 side panels)"),
    "twoPackExtraTall": CatalogEntry("2 Pack Extra Tall (2 side panels)"),
    "leftPanels": CatalogEntry("Left End Panels"),
    "rightPanels": CatalogEntry("Right End Panels"),
    "sidePanels": CatalogEntry("Side Panels"),
    "cornerConnectors": CatalogEntry("Corner Connectors"),
    "straightCouplings": CatalogEntry("Straight Couplings"),
}


@dataclass(frozen=True)
class LineItem:
    """One purchasable line of the bill of materials."""

    key: str
    label: str
    quantity: int
    variant_id: str | None = None
    unit_price: float | None = None

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Quantity must be non-negative")

    @property
    def total_cost(self) -> float | None:
        """Calculate total cost if unit price is available."""
        if self.unit_price is None:
            return None
        return self.unit_price * self.quantity


@dataclass
class BillOfMaterials:
    """Ordered line items for one calculation.

    Attributes:
        items: Line items in catalog display order.
    """

    items: tuple[LineItem, ...] = field(default_factory=tuple)

    @classmethod
    def from_requirements(
        cls,
        requirements: PackedRequirements,
        catalog: Mapping[str, CatalogEntry] | None = None,
        include_zero: bool = False,
    ) -> BillOfMaterials:
        """Build line items from packed requirements.

        Args:
            requirements: Packed requirements to list.
            catalog: Entries overriding DEFAULT_CATALOG, keyed by storefront key.
            include_zero: Keep lines with zero quantity.
        """
        entries = {**DEFAULT_CATALOG, **(catalog or {})}
        quantities = requirements.to_dict()
        items = []
        for key in DEFAULT_CATALOG:
            quantity = quantities[key]
            if quantity == 0 and not include_zero:
                continue
            entry = entries[key]
            items.append(
                LineItem(
                    key=key,
                    label=entry.label,
                    quantity=quantity,
                    variant_id=entry.variant_id,
                    unit_price=entry.unit_price,
                )
            )
        return cls(items=tuple(items))

    @property
    def is_empty(self) -> bool:
        return all(item.quantity == 0 for item in self.items)

    @property
    def total_units(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def total_cost(self) -> float | None:
        """Total cost of priced items, or None if nothing is priced."""
        priced = [item.total_cost for item in self.items if item.total_cost is not None]
        if not priced:
            return None
        return sum(priced)

    def variant_quantities(self) -> dict[str, int]:
        """Quantity per storefront variant id, for building a cart.

        Lines without a variant id are skipped; lines sharing a variant id
        are summed.
        """
        quantities: dict[str, int] = {}
        for item in self.items:
            if item.variant_id is None or item.quantity == 0:
                continue
            quantities[item.variant_id] = quantities.get(item.variant_id, 0) + item.quantity
        unmapped = [item.key for item in self.items if item.variant_id is None and item.quantity]
        if unmapped:
            logger.debug(f"No variant id for: {', '.join(unmapped)}")
        return quantities
