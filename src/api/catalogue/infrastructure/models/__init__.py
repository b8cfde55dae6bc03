"""SQLAlchemy ORM models for the catalogue bounded context."""

from catalogue.infrastructure.models.product import ProductModel

__all__ = [
    "ProductModel",
]
