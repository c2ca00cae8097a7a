"""Partsman protocols."""

from partsman.protocols.catalog import (
    VALID,
    IdAllocator,
    ValidationResult,
)

__all__ = [
    "IdAllocator",
    "VALID",
    "ValidationResult",
]
