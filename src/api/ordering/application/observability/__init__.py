"""Domain-Oriented Observability for the ordering application layer."""

from ordering.application.observability.order_service_probe import (
    DefaultOrderServiceProbe,
    OrderServiceProbe,
)

__all__ = [
    "DefaultOrderServiceProbe",
    "OrderServiceProbe",
]
