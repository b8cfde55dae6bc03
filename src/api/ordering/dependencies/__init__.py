"""Dependency injection for the ordering bounded context."""

from ordering.dependencies.order import (
    get_order_repository,
    get_order_service,
    get_order_service_probe,
)

__all__ = [
    "get_order_repository",
    "get_order_service",
    "get_order_service_probe",
]
