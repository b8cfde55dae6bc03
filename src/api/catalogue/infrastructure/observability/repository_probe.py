"""Domain probe for inventory store operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class ProductRepositoryProbe(Protocol):
    """Domain probe for product repository operations."""

    def product_created(self, product_id: int, name: str, quantity: int) -> None:
        """Record that a product row was inserted."""
        ...

    def product_retrieved(self, product_id: int) -> None:
        """Record that a product was retrieved."""
        ...

    def product_not_found(self, product_id: int) -> None:
        """Record that a product was not found."""
        ...

    def products_listed(self, count: int) -> None:
        """Record that the catalogue was listed."""
        ...

    def stock_decremented(self, product_id: int, amount: int) -> None:
        """Record that the conditional decrement took stock."""
        ...

    def stock_insufficient(self, product_id: int, amount: int) -> None:
        """Record that the conditional decrement matched no row."""
        ...

    def with_context(self, context: ObservationContext) -> ProductRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultProductRepositoryProbe:
    """Default implementation of ProductRepositoryProbe using structlog."""

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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultProductRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultProductRepositoryProbe(logger=self._logger, context=context)

    def product_created(self, product_id: int, name: str, quantity: int) -> None:
        self._logger.info(
            "product_created",
            product_id=product_id,
            name=name,
            quantity=quantity,
            **self._get_context_kwargs(),
        )

    def product_retrieved(self, product_id: int) -> None:
        self._logger.debug(
            "product_retrieved",
            product_id=product_id,
            **self._get_context_kwargs(),
        )

    def product_not_found(self, product_id: int) -> None:
        self._logger.debug(
            "product_not_found",
            product_id=product_id,
            **self._get_context_kwargs(),
        )

    def products_listed(self, count: int) -> None:
        self._logger.debug(
            "products_listed",
            count=count,
            **self._get_context_kwargs(),
        )

    def stock_decremented(self, product_id: int, amount: int) -> None:
        self._logger.info(
            "stock_decremented",
            product_id=product_id,
            amount=amount,
            **self._get_context_kwargs(),
        )

    def stock_insufficient(self, product_id: int, amount: int) -> None:
        self._logger.info(
            "stock_insufficient",
            product_id=product_id,
            amount=amount,
            **self._get_context_kwargs(),
        )
