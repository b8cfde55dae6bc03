"""Domain probe for order ledger operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class OrderRepositoryProbe(Protocol):
    """Domain probe for order repository operations."""

    def order_appended(
        self, order_id: int, user_id: int, product_id: int, quantity: int
    ) -> None:
        """Record that an order row was inserted."""
        ...

    def orders_retrieved(self, user_id: int, count: int) -> None:
        """Record that a user's orders were listed."""
        ...

    def with_context(self, context: ObservationContext) -> OrderRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultOrderRepositoryProbe:
    """Default implementation of OrderRepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultOrderRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultOrderRepositoryProbe(logger=self._logger, context=context)

    def order_appended(
        self, order_id: int, user_id: int, product_id: int, quantity: int
    ) -> None:
        self._logger.debug(
            "order_appended",
            order_id=order_id,
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            **self._get_context_kwargs(),
        )

    def orders_retrieved(self, user_id: int, count: int) -> None:
        self._logger.debug(
            "orders_retrieved",
            user_id=user_id,
            count=count,
            **self._get_context_kwargs(),
        )
