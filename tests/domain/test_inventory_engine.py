"""Unit tests for the inventory operation engine."""

import pytest

from warehouse.domain.model.product import Product
from warehouse.domain.model.results import Accepted, ErrorReason, Rejected
from warehouse.domain.service import inventory_engine


def _product(in_stock: int, reserved: int = 0) -> Product:
    return Product(id=1, name="Widget", in_stock_quantity=in_stock, reserved_quantity=reserved)


class TestOrder:

    def test_order_increases_reserved(self):
        result = inventory_engine.order(_product(10, 2), 3)
        assert isinstance(result, Accepted)
        assert result.success
        assert result.product.reserved_quantity == 5
        assert result.product.in_stock_quantity == 10

    def test_order_exceeding_stock_rejected(self):
        assert inventory_engine.order(_product(10, 8), 3) == Rejected(
            ErrorReason.NOT_ENOUGH_QUANTITY
        )

    def test_order_up_to_stock_accepted(self):
        result = inventory_engine.order(_product(10, 8), 2)
        assert isinstance(result, Accepted)
        assert result.product.reserved_quantity == 10

    def test_order_zero_is_noop(self):
        result = inventory_engine.order(_product(10, 8), 0)
        assert result == Accepted(_product(10, 8))

    def test_order_negative_rejected(self):
        assert inventory_engine.order(_product(10), -1) == Rejected(
            ErrorReason.QUANTITY_INVALID
        )

    def test_order_missing_product_rejected(self):
        assert inventory_engine.order(None, 1) == Rejected(ErrorReason.INVALID_REQUEST)

    def test_missing_product_wins_over_negative_quantity(self):
        assert inventory_engine.order(None, -1) == Rejected(ErrorReason.INVALID_REQUEST)

    def test_negative_quantity_wins_over_capacity(self):
        # 7 + -1 > 5 would also trip the capacity check.
        over_reserved = _product(5, 7)
        assert inventory_engine.order(over_reserved, -1) == Rejected(
            ErrorReason.QUANTITY_INVALID
        )

    def test_rejected_order_leaves_product_untouched(self):
        product = _product(10, 8)
        inventory_engine.order(product, 50)
        assert product == _product(10, 8)


class TestShip:

    def test_ship_reduces_reserved_and_stock(self):
        result = inventory_engine.ship(_product(10, 4), 3)
        assert isinstance(result, Accepted)
        assert result.product.reserved_quantity == 1
        assert result.product.in_stock_quantity == 7

    def test_ship_more_than_reserved_rejected(self):
        assert inventory_engine.ship(_product(5, 5), 6) == Rejected(
            ErrorReason.NOT_ENOUGH_QUANTITY
        )

    def test_ship_everything_reserved(self):
        result = inventory_engine.ship(_product(5, 5), 5)
        assert isinstance(result, Accepted)
        assert result.product.reserved_quantity == 0
        assert result.product.in_stock_quantity == 0

    def test_ship_floors_stock_at_zero(self):
        # Inconsistent input: more reserved than in stock.
        result = inventory_engine.ship(_product(2, 5), 4)
        assert isinstance(result, Accepted)
        assert result.product.in_stock_quantity == 0
        assert result.product.reserved_quantity == 1

    def test_ship_unreserved_stock_rejected(self):
        assert inventory_engine.ship(_product(100, 0), 1) == Rejected(
            ErrorReason.NOT_ENOUGH_QUANTITY
        )

    def test_ship_negative_rejected(self):
        assert inventory_engine.ship(_product(5, 5), -2) == Rejected(
            ErrorReason.QUANTITY_INVALID
        )

    def test_ship_missing_product_rejected(self):
        assert inventory_engine.ship(None, 1) == Rejected(ErrorReason.INVALID_REQUEST)


class TestRestock:

    def test_restock_increases_stock(self):
        result = inventory_engine.restock(_product(10, 3), 15)
        assert isinstance(result, Accepted)
        assert result.product.in_stock_quantity == 25
        assert result.product.reserved_quantity == 3

    def test_restock_zero_is_noop(self):
        assert inventory_engine.restock(_product(10, 3), 0) == Accepted(_product(10, 3))

    def test_restock_has_no_upper_bound(self):
        result = inventory_engine.restock(_product(10), 10**12)
        assert isinstance(result, Accepted)
        assert result.product.in_stock_quantity == 10**12 + 10

    def test_restock_negative_rejected(self):
        assert inventory_engine.restock(_product(10), -5) == Rejected(
            ErrorReason.QUANTITY_INVALID
        )

    def test_restock_missing_product_rejected(self):
        assert inventory_engine.restock(None, 5) == Rejected(ErrorReason.INVALID_REQUEST)


class TestNegativeQuantityAlwaysRejected:

    @pytest.mark.parametrize("operation", [
        inventory_engine.order,
        inventory_engine.ship,
        inventory_engine.restock,
    ])
    @pytest.mark.parametrize("quantity", [-1, -10, -(10**9)])
    def test_negative_quantity(self, operation, quantity):
        product = _product(10, 5)
        assert operation(product, quantity) == Rejected(ErrorReason.QUANTITY_INVALID)
        assert product == _product(10, 5)


class TestAdd:

    def test_add_builds_unstored_product(self):
        result = inventory_engine.add("Widget", 7, [])
        assert result == Accepted(
            Product(id=None, name="Widget", in_stock_quantity=7, reserved_quantity=0)
        )

    def test_add_trims_name(self):
        result = inventory_engine.add("  Widget  ", 1, [])
        assert isinstance(result, Accepted)
        assert result.product.name == "Widget"

    def test_add_makes_name_unique(self):
        result = inventory_engine.add("Widget", 1, ["Widget", "widget (1)"])
        assert isinstance(result, Accepted)
        assert result.product.name == "Widget (2)"

    def test_add_zero_stock_accepted(self):
        assert isinstance(inventory_engine.add("Widget", 0, []), Accepted)

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
    def test_add_blank_name_rejected(self, name):
        assert inventory_engine.add(name, 1, []) == Rejected(ErrorReason.INVALID_REQUEST)

    def test_add_negative_stock_rejected(self):
        assert inventory_engine.add("Widget", -1, []) == Rejected(
            ErrorReason.QUANTITY_INVALID
        )

    def test_blank_name_wins_over_negative_stock(self):
        assert inventory_engine.add(" ", -1, []) == Rejected(ErrorReason.INVALID_REQUEST)
