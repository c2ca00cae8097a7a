"""Tests for part and product validation."""

from decimal import Decimal

import pytest

from partsman.models import InHouse, Part, Product
from partsman.validation import validate_part, validate_part_in_products, validate_product


def make_part(**overrides):
    fields = dict(
        id=None,
        name="Bolt",
        price=Decimal("5"),
        stock=0,
        min=0,
        max=10,
        source=InHouse(machine_id=1),
    )
    fields.update(overrides)
    return Part(**fields)


def make_product(parts=None, **overrides):
    fields = dict(id=None, name="Gearbox", price=Decimal("40"), stock=3, min=1, max=10)
    fields.update(overrides)
    product = Product(**fields)
    for part in [make_part()] if parts is None else parts:
        product.add_associated_part(part)
    return product


class TestValidatePart:
    """Rules are checked in order; the first failure is reported."""

    def test_valid_part(self):
        result = validate_part(make_part())
        assert result.valid is True
        assert result.error_code is None
        assert result.message is None
        assert bool(result) is True

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"stock": -1},
            {"price": Decimal("-1")},
            {"min": -1},
            {"min": 5, "max": 1},
            {"stock": 99},
        ],
    )
    def test_empty_name_wins_over_everything(self, overrides):
        result = validate_part(make_part(name="", **overrides))
        assert result.valid is False
        assert result.error_code == "NAME_REQUIRED"
        assert result.message == "name required"

    def test_negative_stock(self):
        result = validate_part(make_part(stock=-1, price=Decimal("-1")))
        assert result.error_code == "NEGATIVE_STOCK"
        assert result.message == "stock must be non-negative"

    def test_negative_price(self):
        result = validate_part(make_part(price=Decimal("-0.01"), min=-1))
        assert result.error_code == "NEGATIVE_PRICE"
        assert result.message == "price must be non-negative"

    def test_negative_min(self):
        result = validate_part(make_part(min=-1, max=-5))
        assert result.error_code == "NEGATIVE_MIN"
        assert result.message == "min must be non-negative"

    @pytest.mark.parametrize("stock", [0, 4, 7, 50])
    def test_min_above_max(self, stock):
        """min > max is reported whatever the stock level."""
        result = validate_part(make_part(stock=stock, min=5, max=3))
        assert result.error_code == "MIN_EXCEEDS_MAX"
        assert result.message == "min must not exceed max"

    @pytest.mark.parametrize("stock", [1, 11])
    def test_stock_out_of_range(self, stock):
        result = validate_part(make_part(stock=stock, min=2, max=10))
        assert result.error_code == "STOCK_OUT_OF_RANGE"
        assert result.message == "stock must be within [min, max]"

    @pytest.mark.parametrize("stock", [2, 10])
    def test_bounds_are_inclusive(self, stock):
        assert validate_part(make_part(stock=stock, min=2, max=10)).valid

    def test_zero_stock_bolt(self):
        """stock = min = 0, max = 10, price = 5 is fine."""
        part = make_part(name="Bolt", stock=0, min=0, max=10, price=Decimal("5"))
        assert validate_part(part).valid

    def test_does_not_mutate(self):
        part = make_part(stock=99)
        before = Part(**vars(part))
        validate_part(part)
        assert part == before


class TestValidateProduct:
    """Product rules: basics, then parts, then bounds."""

    def test_valid_product(self):
        assert validate_product(make_product()).valid

    def test_empty_name(self):
        result = validate_product(make_product(name="", parts=[]))
        assert result.error_code == "NAME_REQUIRED"

    def test_negative_stock_before_parts(self):
        result = validate_product(make_product(stock=-1, parts=[]))
        assert result.error_code == "NEGATIVE_STOCK"

    def test_negative_price_before_parts(self):
        result = validate_product(make_product(price=Decimal("-1"), parts=[]))
        assert result.error_code == "NEGATIVE_PRICE"

    def test_no_parts(self):
        """A product without parts is rejected even if otherwise valid."""
        result = validate_product(make_product(parts=[]))
        assert result.valid is False
        assert result.error_code == "NO_PARTS"
        assert result.message == "product requires at least one part"

    def test_no_parts_reported_before_bounds(self):
        result = validate_product(make_product(parts=[], min=5, max=1))
        assert result.error_code == "NO_PARTS"

    def test_price_below_parts_cost(self):
        product = make_product(parts=[make_part(price=Decimal("10"))], price=Decimal("5"))
        result = validate_product(product)
        assert result.error_code == "PARTS_COST_EXCEEDS_PRICE"
        assert result.message == "product price must cover associated parts' total cost"

    def test_price_equal_to_parts_cost(self):
        parts = [make_part(price=Decimal("2.50")), make_part(price=Decimal("2.50"))]
        assert validate_product(make_product(parts=parts, price=Decimal("5"))).valid

    def test_cost_reported_before_bounds(self):
        product = make_product(
            parts=[make_part(price=Decimal("10"))], price=Decimal("5"), min=-1
        )
        assert validate_product(product).error_code == "PARTS_COST_EXCEEDS_PRICE"

    def test_negative_min(self):
        assert validate_product(make_product(min=-1)).error_code == "NEGATIVE_MIN"

    def test_min_above_max(self):
        assert validate_product(make_product(min=5, max=2)).error_code == "MIN_EXCEEDS_MAX"

    def test_stock_out_of_range(self):
        result = validate_product(make_product(stock=0, min=1, max=10))
        assert result.error_code == "STOCK_OUT_OF_RANGE"

    def test_uses_parts_attached_at_call_time(self):
        product = make_product(parts=[])
        assert validate_product(product).error_code == "NO_PARTS"
        product.add_associated_part(make_part())
        assert validate_product(product).valid


class TestValidatePartInProducts:
    """A changed part is checked against the products that use it."""

    def test_no_products(self):
        assert validate_part_in_products(make_part(id=1), []).valid

    def test_cost_still_covered(self):
        product = make_product(parts=[make_part(id=1), make_part(id=2)])
        assert validate_part_in_products(make_part(id=1, price=Decimal("35")), [product]).valid

    def test_cost_exceeds_price(self):
        product = make_product(parts=[make_part(id=1), make_part(id=2)])
        result = validate_part_in_products(make_part(id=1, price=Decimal("36")), [product])
        assert result.error_code == "PRODUCT_PRICE_BELOW_PARTS_COST"
        assert result.message == "part price would raise a product's parts cost above its price"
        assert product.parts_cost == Decimal("10")

    def test_repeated_association_counts_each_time(self):
        product = make_product(parts=[make_part(id=1), make_part(id=1)])
        result = validate_part_in_products(make_part(id=1, price=Decimal("21")), [product])
        assert result.valid is False
