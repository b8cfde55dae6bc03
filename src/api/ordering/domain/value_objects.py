"""Value objects for the ordering domain."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderId:
    """Identifier for an Order, assigned by the store on insert."""

    value: int

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)


@dataclass(frozen=True)
class OrderSummary:
    """Read model of an order as shown to its owner.

    ``product`` is the product's name rather than its id.
    """

    id: OrderId
    product: str
    quantity: int
