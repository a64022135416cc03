"""Unit tests for BillOfMaterials and catalog entries."""

import pytest

from cladding.application.bill_of_materials import (
    DEFAULT_CATALOG,
    BillOfMaterials,
    CatalogEntry,
    LineItem,
)
from cladding.domain.services.packer import PackedRequirements


@pytest.fixture
def l_shape_requirements() -> PackedRequirements:
    return PackedRequirements(
        four_pack_regular=1,
        two_pack_regular=2,
        straight_couplings=1,
        corner_connectors=1,
    )


class TestCatalogEntry:
    """Tests for CatalogEntry."""

    def test_empty_label_rejected(self) -> None:
        """Every entry needs a label."""
        with pytest.raises(ValueError, match="label"):
            CatalogEntry("")

    def test_negative_price_rejected(self) -> None:
        """Prices cannot be negative."""
        with pytest.raises(ValueError, match="non-negative"):
            CatalogEntry("Side Panels", unit_price=-0.5)

    def test_default_catalog_covers_every_requirement(self) -> None:
        """The default catalog has a label for each requirement key."""
        assert set(DEFAULT_CATALOG) == set(PackedRequirements().to_dict())


class TestLineItem:
    """Tests for LineItem."""

    def test_total_cost(self) -> None:
        """Total cost is quantity times unit price."""
        item = LineItem(key="sidePanels", label="Side Panels", quantity=3, unit_price=12.5)
        assert item.total_cost == 37.5

    def test_total_cost_without_price(self) -> None:
        """Unpriced items have no total."""
        assert LineItem(key="sidePanels", label="Side Panels", quantity=3).total_cost is None

    def test_negative_quantity_rejected(self) -> None:
        """Quantities cannot be negative."""
        with pytest.raises(ValueError):
            LineItem(key="sidePanels", label="Side Panels", quantity=-1)


class TestBillOfMaterials:
    """Tests for BillOfMaterials."""

    def test_lines_in_display_order(self, l_shape_requirements: PackedRequirements) -> None:
        """Lines follow catalog order and skip zero quantities."""
        bill = BillOfMaterials.from_requirements(l_shape_requirements)
        assert [item.key for item in bill.items] == [
            "fourPackRegular",
            "twoPackRegular",
            "cornerConnectors",
            "straightCouplings",
        ]
        assert bill.total_units == 5

    def test_include_zero(self) -> None:
        """include_zero keeps every line."""
        bill = BillOfMaterials.from_requirements(PackedRequirements(), include_zero=True)
        assert len(bill.items) == len(DEFAULT_CATALOG)
        assert bill.is_empty

    def test_catalog_overrides(self, l_shape_requirements: PackedRequirements) -> None:
        """Catalog entries replace labels and add ids and prices."""
        catalog = {
            "fourPackRegular": CatalogEntry("Starter pack", variant_id="v-4", unit_price=80.0),
            "twoPackRegular": CatalogEntry("Side pair", variant_id="v-2", unit_price=30.0),
        }
        bill = BillOfMaterials.from_requirements(l_shape_requirements, catalog)
        assert bill.items[0].label == "Starter pack"
        assert bill.total_cost == 140.0

    def test_total_cost_none_when_unpriced(
        self, l_shape_requirements: PackedRequirements
    ) -> None:
        """Without prices there is no total cost."""
        assert BillOfMaterials.from_requirements(l_shape_requirements).total_cost is None

    def test_variant_quantities(self, l_shape_requirements: PackedRequirements) -> None:
        """Variant quantities skip unmapped lines and sum shared ids."""
        catalog = {
            "fourPackRegular": CatalogEntry("Four", variant_id="v-pack"),
            "twoPackRegular": CatalogEntry("Two", variant_id="v-pack"),
            "cornerConnectors": CatalogEntry("Corner", variant_id="v-corner"),
        }
        bill = BillOfMaterials.from_requirements(l_shape_requirements, catalog)
        assert bill.variant_quantities() == {"v-pack": 3, "v-corner": 1}
