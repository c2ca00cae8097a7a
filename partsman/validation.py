"""
Part and product validation.

Checks run in a fixed order and stop at the first violated rule, so the
reported message is deterministic:

    result = validate_part(part)
    if not result.valid:
        print(result.error_code, result.message)

Nothing here mutates the candidate or touches the catalog. A product is
checked against the parts attached to it at call time.
"""

from decimal import Decimal

from partsman.models import Part, Product
from partsman.protocols.catalog import VALID, ValidationResult


VALIDATION_MESSAGES = {
    "NAME_REQUIRED": "name required",
    "NEGATIVE_STOCK": "stock must be non-negative",
    "NEGATIVE_PRICE": "price must be non-negative",
    "NEGATIVE_MIN": "min must be non-negative",
    "MIN_EXCEEDS_MAX": "min must not exceed max",
    "STOCK_OUT_OF_RANGE": "stock must be within [min, max]",
    "NO_PARTS": "product requires at least one part",
    "PARTS_COST_EXCEEDS_PRICE": "product price must cover associated parts' total cost",
    "PRODUCT_PRICE_BELOW_PARTS_COST": "part price would raise a product's parts cost above its price",
}


def _fail(code: str) -> ValidationResult:
    return ValidationResult(valid=False, error_code=code, message=VALIDATION_MESSAGES[code])


def _check_basics(entity: Part | Product) -> str | None:
    if entity.name == "":
        return "NAME_REQUIRED"
    if entity.stock < 0:
        return "NEGATIVE_STOCK"
    if entity.price < 0:
        return "NEGATIVE_PRICE"
    return None


def _check_bounds(entity: Part | Product) -> str | None:
    if entity.min < 0:
        return "NEGATIVE_MIN"
    if entity.min > entity.max:
        return "MIN_EXCEEDS_MAX"
    if entity.stock < entity.min or entity.stock > entity.max:
        return "STOCK_OUT_OF_RANGE"
    return None


def validate_part(part: Part) -> ValidationResult:
    """Check name, stock, price, then the min/max/stock bounds."""
    code = _check_basics(part) or _check_bounds(part)
    return _fail(code) if code else VALID


def validate_product(product: Product) -> ValidationResult:
    """
    Check a product.

    Same rules as a part, with the bill-of-materials checks (at least one
    part, price covers the parts' cost) placed before the bounds checks.
    """
    code = _check_basics(product)
    if code is None:
        if not product.associated_parts:
            code = "NO_PARTS"
        elif product.parts_cost > product.price:
            code = "PARTS_COST_EXCEEDS_PRICE"
        else:
            code = _check_bounds(product)
    return _fail(code) if code else VALID


def validate_part_in_products(part: Part, products: list[Product]) -> ValidationResult:
    """
    Check that replacing a stored part keeps its products valid.

    Each product's parts cost is recomputed with ``part`` in place of every
    association sharing its id. The first product whose price no longer
    covers that cost fails the check.
    """
    for product in products:
        cost = sum(
            (
                part.price if associated.id == part.id else associated.price
                for associated in product.associated_parts
            ),
            Decimal("0"),
        )
        if cost > product.price:
            return _fail("PRODUCT_PRICE_BELOW_PARTS_COST")
    return VALID
