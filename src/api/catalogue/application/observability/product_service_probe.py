"""Protocol for catalogue service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class ProductServiceProbe(Protocol):
    """Domain probe for catalogue service operations."""

    def product_added(
        self, product_id: int, name: str, price: int, quantity: int
    ) -> None:
        """Record that a product was added to the catalogue."""
        ...

    def product_rejected(self, reason: str) -> None:
        """Record that a product submission failed validation."""
        ...

    def with_context(self, context: ObservationContext) -> ProductServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultProductServiceProbe:
    """Default implementation of ProductServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultProductServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultProductServiceProbe(logger=self._logger, context=context)

    def product_added(
        self, product_id: int, name: str, price: int, quantity: int
    ) -> None:
        self._logger.info(
            "product_added",
            product_id=product_id,
            name=name,
            price=price,
            quantity=quantity,
            **self._get_context_kwargs(),
        )

    def product_rejected(self, reason: str) -> None:
        self._logger.info(
            "product_rejected",
            reason=reason,
            **self._get_context_kwargs(),
        )
