"""Repository protocols (ports) for the ordering bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from catalogue.domain.value_objects import ProductId
from iam.domain.value_objects import UserId
from ordering.domain.aggregates import Order
from ordering.domain.value_objects import OrderSummary


@runtime_checkable
class IOrderRepository(Protocol):
    """Repository for the order ledger.

    Append-only; the calling service owns the transaction boundary.
    """

    async def append(
        self, user_id: UserId, product_id: ProductId, quantity: int
    ) -> Order:
        """Record an order and return it with its store-assigned id.

        Only called after the paired stock decrement succeeded, inside the
        same transaction.
        """
        ...

    async def list_by_user(self, user_id: UserId) -> list[OrderSummary]:
        """List a user's orders with product names, oldest first.

        Args:
            user_id: Owner of the orders

        Returns:
            Summaries ordered by order id
        """
        ...
