"""Domain-Oriented Observability for catalogue infrastructure."""

from catalogue.infrastructure.observability.repository_probe import (
    DefaultProductRepositoryProbe,
    ProductRepositoryProbe,
)

__all__ = [
    "ProductRepositoryProbe",
    "DefaultProductRepositoryProbe",
]
