"""Ports (interfaces) for the catalogue bounded context."""

from catalogue.ports.exceptions import ProductNotFoundError
from catalogue.ports.repositories import IProductRepository

__all__ = [
    "IProductRepository",
    "ProductNotFoundError",
]
