"""Part model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class InHouse:
    """Part manufactured in-house, on a given machine."""

    machine_id: int


@dataclass(frozen=True)
class Outsourced:
    """Part bought from an outside vendor."""

    company_name: str


PartSource = InHouse | Outsourced


@dataclass
class Part:
    """
    Raw component kept in stock.

    Where the part comes from is carried by ``source``, either
    ``InHouse(machine_id)`` or ``Outsourced(company_name)``.
    """

    id: int | None
    name: str
    price: Decimal
    stock: int
    min: int
    max: int
    source: PartSource

    def __str__(self):
        return f"#{self.id} - {self.name}"

    @property
    def kind(self) -> str:
        match self.source:
            case InHouse():
                return "in_house"
            case Outsourced():
                return "outsourced"
        raise TypeError(f"Unknown part source: {self.source!r}")

    @property
    def machine_id(self) -> int | None:
        match self.source:
            case InHouse(machine_id=machine_id):
                return machine_id
        return None

    @property
    def company_name(self) -> str | None:
        match self.source:
            case Outsourced(company_name=company_name):
                return company_name
        return None
