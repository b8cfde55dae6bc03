"""Domain-Oriented Observability for ordering infrastructure."""

from ordering.infrastructure.observability.repository_probe import (
    DefaultOrderRepositoryProbe,
    OrderRepositoryProbe,
)

__all__ = [
    "OrderRepositoryProbe",
    "DefaultOrderRepositoryProbe",
]
