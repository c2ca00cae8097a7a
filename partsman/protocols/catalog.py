"""Catalog protocols."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ValidationResult:
    """Validation result.

    Carries at most one violated rule: the first one in check order.
    """

    valid: bool
    error_code: str | None = None
    message: str | None = None

    def __bool__(self) -> bool:
        return self.valid


VALID = ValidationResult(valid=True)


@runtime_checkable
class IdAllocator(Protocol):
    """Interface for handing out entity ids."""

    def next_id(self) -> int:
        """Return a fresh id and consume it."""
        ...

    def peek(self) -> int:
        """Return the id next_id() would hand out, without consuming it."""
        ...

    def advance_past(self, used_id: int) -> None:
        """Make sure no id <= used_id is handed out afterwards."""
        ...
