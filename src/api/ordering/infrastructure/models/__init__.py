"""SQLAlchemy ORM models for the ordering bounded context."""

from ordering.infrastructure.models.order import OrderModel

__all__ = [
    "OrderModel",
]
