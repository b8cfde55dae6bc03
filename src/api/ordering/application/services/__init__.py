"""Application services for the ordering bounded context."""

from ordering.application.services.order_service import OrderService

__all__ = [
    "OrderService",
]
