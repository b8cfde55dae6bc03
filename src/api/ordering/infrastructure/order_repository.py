"""SQL implementation of IOrderRepository (the order ledger)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalogue.domain.value_objects import ProductId
from catalogue.infrastructure.models import ProductModel
from iam.domain.value_objects import UserId
from ordering.domain.aggregates import Order
from ordering.domain.value_objects import OrderId, OrderSummary
from ordering.infrastructure.models import OrderModel
from ordering.infrastructure.observability import (
    DefaultOrderRepositoryProbe,
    OrderRepositoryProbe,
)
from ordering.ports.repositories import IOrderRepository


class OrderRepository(IOrderRepository):
    """SQLAlchemy-backed order ledger.

    Runs inside the caller's transaction and never commits on its own.
    """

    def __init__(
        self, session: AsyncSession, probe: OrderRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultOrderRepositoryProbe()

    async def append(
        self, user_id: UserId, product_id: ProductId, quantity: int
    ) -> Order:
        """Insert an order row and flush to obtain its id."""
        model = OrderModel(
            user_id=user_id.value,
            product_id=product_id.value,
            quantity=quantity,
        )
        self._session.add(model)
        await self._session.flush()

        self._probe.order_appended(
            model.id, user_id.value, product_id.value, quantity
        )
        return Order(
            id=OrderId(value=model.id),
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
        )

    async def list_by_user(self, user_id: UserId) -> list[OrderSummary]:
        """List a user's orders joined with product names, ordered by id."""
        stmt = (
            select(OrderModel.id, ProductModel.name, OrderModel.quantity)
            .join(ProductModel, OrderModel.product_id == ProductModel.id)
            .where(OrderModel.user_id == user_id.value)
            .order_by(OrderModel.id)
        )
        result = await self._session.execute(stmt)
        summaries = [
            OrderSummary(id=OrderId(value=order_id), product=name, quantity=quantity)
            for order_id, name, quantity in result.all()
        ]

        self._probe.orders_retrieved(user_id.value, len(summaries))
        return summaries
