"""Partsman adapters."""

from partsman.adapters.sequence import SequenceIdAllocator

__all__ = [
    "SequenceIdAllocator",
]
