"""Ports (interfaces) for the ordering bounded context."""

from ordering.ports.exceptions import InsufficientStockError
from ordering.ports.repositories import IOrderRepository

__all__ = [
    "IOrderRepository",
    "InsufficientStockError",
]
