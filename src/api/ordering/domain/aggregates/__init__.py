"""Domain aggregates for the ordering context."""

from ordering.domain.aggregates.order import Order

__all__ = [
    "Order",
]
