"""Value objects for the catalogue domain."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductId:
    """Identifier for a Product aggregate, assigned by the store on insert."""

    value: int

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)
