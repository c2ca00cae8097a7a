"""Product model."""

from dataclasses import dataclass, field
from decimal import Decimal

from partsman.models.part import Part


@dataclass
class Product:
    """
    Sellable assembly of one or more parts.

    ``associated_parts`` holds references to parts owned by the catalog,
    in the order they were associated. The same part may appear twice.
    """

    id: int | None
    name: str
    price: Decimal
    stock: int
    min: int
    max: int
    associated_parts: list[Part] = field(default_factory=list)

    def __str__(self):
        return f"#{self.id} - {self.name}"

    def add_associated_part(self, part: Part) -> None:
        self.associated_parts.append(part)

    def lookup_associated_part(self, part_id: int) -> Part | None:
        for part in self.associated_parts:
            if part.id == part_id:
                return part
        return None

    def remove_associated_part(self, part_id: int) -> bool:
        """Remove the first associated part with this id."""
        for index, part in enumerate(self.associated_parts):
            if part.id == part_id:
                del self.associated_parts[index]
                return True
        return False

    def purge_associated_parts(self) -> None:
        self.associated_parts = []

    @property
    def associated_parts_count(self) -> int:
        return len(self.associated_parts)

    @property
    def parts_cost(self) -> Decimal:
        """Summed unit price of the associated parts."""
        return sum((Decimal(part.price) for part in self.associated_parts), Decimal("0"))
