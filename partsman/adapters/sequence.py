"""
SequenceIdAllocator -- default IdAllocator.

Hands out strictly increasing ids starting at PARTSMAN["FIRST_ID"].
Ids are never reused, so deleting a record can't make a later record
collide with it.

Usage in settings.py:
    PARTSMAN = {
        "ID_ALLOCATOR": "partsman.adapters.sequence.SequenceIdAllocator",
        "FIRST_ID": 1,
    }
"""

from __future__ import annotations

from partsman.protocols.catalog import IdAllocator


class SequenceIdAllocator:
    """Monotonic counter, decoupled from collection size."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        return self._next

    def advance_past(self, used_id: int) -> None:
        if used_id >= self._next:
            self._next = used_id + 1

    def __repr__(self) -> str:
        return f"SequenceIdAllocator(next={self._next})"


# Verify protocol compliance at import time.
if not isinstance(SequenceIdAllocator(), IdAllocator):
    raise TypeError("SequenceIdAllocator does not implement IdAllocator protocol")
