"""Application services for the catalogue bounded context."""

from catalogue.application.services.product_service import ProductService

__all__ = [
    "ProductService",
]
