"""Order application service.

Places orders against shared, finite stock. The stock decrement and the
ledger append are committed together or not at all.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from catalogue.domain.value_objects import ProductId
from catalogue.ports.exceptions import ProductNotFoundError
from catalogue.ports.repositories import IProductRepository
from iam.domain.value_objects import UserId
from ordering.application.observability import (
    DefaultOrderServiceProbe,
    OrderServiceProbe,
)
from ordering.domain.aggregates import Order
from ordering.domain.value_objects import OrderSummary
from ordering.ports.exceptions import InsufficientStockError
from ordering.ports.repositories import IOrderRepository
from shared_kernel.exceptions import DomainError
from shared_kernel.validation import require_fields, require_storable_int

PRODUCT_NOT_FOUND_MESSAGE = "Product not found"
INSUFFICIENT_STOCK_MESSAGE = "Insufficient stock"


class OrderService:
    """Application service for placing and listing orders."""

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
        session: AsyncSession,
        probe: OrderServiceProbe | None = None,
    ):
        """Initialize OrderService with dependencies.

        Args:
            order_repository: The order ledger
            product_repository: The inventory store
            session: Database session shared by both repositories; this
                service owns its transaction boundary
            probe: Optional domain probe for observability
        """
        self._order_repository = order_repository
        self._product_repository = product_repository
        self._session = session
        self._probe = probe or DefaultOrderServiceProbe()

    async def place_order(
        self, user_id: UserId, product_id: Any, quantity: Any
    ) -> Order:
        """Take ``quantity`` units of a product from stock and record the order.

        Stock is only ever lowered through the inventory store's conditional
        decrement, so concurrent orders can never oversell. The decrement and
        the ledger append share one transaction: any failure after the
        decrement rolls both back.

        Args:
            user_id: Authenticated caller placing the order
            product_id: Id of the product to order
            quantity: Units to take, a positive integer

        Returns:
            The recorded Order

        Raises:
            ValidationError: If product_id or quantity is missing, not a
                positive integer, or too large to store
            ProductNotFoundError: If no product has that id
            InsufficientStockError: If stock on hand is below quantity
        """
        try:
            require_fields(product_id=product_id, quantity=quantity)
            require_storable_int("product_id", product_id, minimum=1)
            require_storable_int("quantity", quantity, minimum=1)

            pid = ProductId(value=product_id)
            async with self._session.begin():
                product = await self._product_repository.get_by_id(pid)
                if product is None:
                    raise ProductNotFoundError(PRODUCT_NOT_FOUND_MESSAGE)

                if not await self._product_repository.decrement_if_sufficient(
                    pid, quantity
                ):
                    raise InsufficientStockError(INSUFFICIENT_STOCK_MESSAGE)

                order = await self._order_repository.append(
                    user_id=user_id, product_id=pid, quantity=quantity
                )

        except DomainError as e:
            self._probe.order_rejected(
                user_id=user_id.value,
                product_id=product_id,
                quantity=quantity,
                reason=str(e),
            )
            raise

        self._probe.order_placed(
            order_id=order.id.value,
            user_id=user_id.value,
            product_id=pid.value,
            quantity=quantity,
        )
        return order

    async def list_orders(self, user_id: UserId) -> list[OrderSummary]:
        """List the caller's orders with product names, oldest first."""
        async with self._session.begin():
            summaries = await self._order_repository.list_by_user(user_id)

        self._probe.orders_listed(user_id=user_id.value, count=len(summaries))
        return summaries
