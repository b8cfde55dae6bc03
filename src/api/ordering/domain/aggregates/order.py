"""Order aggregate for the ordering context."""

from __future__ import annotations

from dataclasses import dataclass

from catalogue.domain.value_objects import ProductId
from iam.domain.value_objects import UserId
from ordering.domain.value_objects import OrderId


@dataclass(frozen=True)
class Order:
    """A ledger entry recording units taken from stock for a user.

    Holds references to the user and product by id only. Orders are
    append-only: never mutated or deleted once recorded.
    """

    id: OrderId
    user_id: UserId
    product_id: ProductId
    quantity: int

    def __eq__(self, other: object) -> bool:
        """Orders are equal if they have the same ID."""
        if not isinstance(other, Order):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
