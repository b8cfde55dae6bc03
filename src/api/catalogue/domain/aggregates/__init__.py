"""Domain aggregates for the catalogue context."""

from catalogue.domain.aggregates.product import Product

__all__ = [
    "Product",
]
