"""Domain-Oriented Observability for the catalogue application layer."""

from catalogue.application.observability.product_service_probe import (
    DefaultProductServiceProbe,
    ProductServiceProbe,
)

__all__ = [
    "DefaultProductServiceProbe",
    "ProductServiceProbe",
]
