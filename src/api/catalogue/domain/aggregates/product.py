"""Product aggregate for the catalogue context."""

from __future__ import annotations

from dataclasses import dataclass

from catalogue.domain.value_objects import ProductId


@dataclass(frozen=True)
class Product:
    """A sellable item and a snapshot of its stock on hand.

    ``quantity`` is only ever lowered by the inventory store's conditional
    decrement; instances are read snapshots, never written back.
    """

    id: ProductId
    name: str
    price: int
    quantity: int

    def __eq__(self, other: object) -> bool:
        """Products are equal if they have the same ID."""
        if not isinstance(other, Product):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
