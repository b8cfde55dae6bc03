"""Dependency injection for the catalogue bounded context."""

from catalogue.dependencies.product import (
    get_product_repository,
    get_product_service,
    get_product_service_probe,
)

__all__ = [
    "get_product_repository",
    "get_product_service",
    "get_product_service_probe",
]
