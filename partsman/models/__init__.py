"""Partsman models."""

from partsman.models.part import InHouse, Outsourced, Part, PartSource
from partsman.models.product import Product

__all__ = [
    "InHouse",
    "Outsourced",
    "Part",
    "PartSource",
    "Product",
]
