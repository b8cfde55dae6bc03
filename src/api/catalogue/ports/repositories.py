"""Repository protocols (ports) for the catalogue bounded context.

Implementations never manage transactions; the calling application
service owns the transaction boundary.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from catalogue.domain.aggregates import Product
from catalogue.domain.value_objects import ProductId


@runtime_checkable
class IProductRepository(Protocol):
    """Repository for Product aggregates (the inventory store)."""

    async def list_all(self) -> list[Product]:
        """List every product in insertion order."""
        ...

    async def get_by_id(self, product_id: ProductId) -> Product | None:
        """Retrieve a product by ID.

        Args:
            product_id: The unique identifier of the product

        Returns:
            The Product aggregate, or None if not found
        """
        ...

    async def create(self, name: str, price: int, quantity: int) -> Product:
        """Insert a new product and return it with its store-assigned id."""
        ...

    async def decrement_if_sufficient(self, product_id: ProductId, amount: int) -> bool:
        """Atomically lower stock by ``amount`` if at least that much is on hand.

        Must be a single storage-level conditional write. Two concurrent
        callers can never both succeed against stock that covers only one.

        Args:
            product_id: Product whose stock to lower
            amount: Positive number of units to take

        Returns:
            True if stock was lowered, False if it was insufficient or the
            product does not exist (stock untouched in both cases)
        """
        ...
