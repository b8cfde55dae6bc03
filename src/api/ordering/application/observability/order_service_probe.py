"""Protocol for order service observability.

Defines the interface for domain probes that capture order placement
outcomes, including every refusal reason.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class OrderServiceProbe(Protocol):
    """Domain probe for order service operations."""

    def order_placed(
        self, order_id: int, user_id: int, product_id: int, quantity: int
    ) -> None:
        """Record that an order committed together with its stock decrement."""
        ...

    def order_rejected(
        self,
        user_id: int,
        product_id: Any,
        quantity: Any,
        reason: str,
    ) -> None:
        """Record that an order was refused; nothing was written."""
        ...

    def orders_listed(self, user_id: int, count: int) -> None:
        """Record that a user listed their orders."""
        ...

    def with_context(self, context: ObservationContext) -> OrderServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultOrderServiceProbe:
    """Default implementation of OrderServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultOrderServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultOrderServiceProbe(logger=self._logger, context=context)

    def order_placed(
        self, order_id: int, user_id: int, product_id: int, quantity: int
    ) -> None:
        self._logger.info(
            "order_placed",
            order_id=order_id,
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            **self._get_context_kwargs(),
        )

    def order_rejected(
        self,
        user_id: int,
        product_id: Any,
        quantity: Any,
        reason: str,
    ) -> None:
        self._logger.info(
            "order_rejected",
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def orders_listed(self, user_id: int, count: int) -> None:
        self._logger.debug(
            "orders_listed",
            user_id=user_id,
            count=count,
            **self._get_context_kwargs(),
        )
