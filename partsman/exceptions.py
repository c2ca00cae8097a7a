"""Partsman exceptions."""

from typing import Any


ERROR_MESSAGES = {
    "ID_REQUIRED": "Entity has no id assigned",
    "PART_NOT_FOUND": "Part not found",
    "PRODUCT_NOT_FOUND": "Product not found",
    "DUPLICATE_PART_ID": "A part with this id already exists",
    "DUPLICATE_PRODUCT_ID": "A product with this id already exists",
    "PART_NOT_IN_CATALOG": "Associated part is not in the catalog",
    "PRODUCT_HAS_PARTS": "This product has associated parts.",
    "INVALID_ID_ALLOCATOR": "Configured ID_ALLOCATOR does not implement IdAllocator",
}


class CatalogError(Exception):
    """
    Structured exception for catalog operations.

    Usage:
        try:
            service.delete_product(7)
        except CatalogError as e:
            if e.code == "PRODUCT_HAS_PARTS":
                print(f"Product {e.product_id} still has parts")
    """

    def __init__(self, code: str, message: str = "", **data: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    @property
    def part_id(self) -> int | None:
        return self.data.get("part_id")

    @property
    def product_id(self) -> int | None:
        return self.data.get("product_id")

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }
