"""Catalogue application service."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from catalogue.application.observability import (
    DefaultProductServiceProbe,
    ProductServiceProbe,
)
from catalogue.domain.aggregates import Product
from catalogue.ports.repositories import IProductRepository
from shared_kernel.exceptions import ValidationError
from shared_kernel.validation import require_fields, require_storable_int


class ProductService:
    """Application service for listing and adding products."""

    def __init__(
        self,
        product_repository: IProductRepository,
        session: AsyncSession,
        probe: ProductServiceProbe | None = None,
    ):
        """Initialize ProductService with dependencies.

        Args:
            product_repository: Repository for product persistence
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._product_repository = product_repository
        self._session = session
        self._probe = probe or DefaultProductServiceProbe()

    async def list_products(self) -> list[Product]:
        """List the whole catalogue in insertion order."""
        async with self._session.begin():
            return await self._product_repository.list_all()

    async def add_product(
        self, name: str | None, price: int | None, quantity: int | None
    ) -> Product:
        """Add a product with its initial stock.

        Args:
            name: Display name, must be non-blank
            price: Unit price, a non-negative integer
            quantity: Initial stock on hand, a non-negative integer

        Returns:
            The created Product

        Raises:
            ValidationError: If a field is missing or out of range
        """
        try:
            require_fields(name=name, price=price, quantity=quantity)
            require_storable_int("price", price, minimum=0)
            require_storable_int("quantity", quantity, minimum=0)
        except ValidationError as e:
            self._probe.product_rejected(reason=str(e))
            raise

        async with self._session.begin():
            product = await self._product_repository.create(
                name=name, price=price, quantity=quantity
            )

        self._probe.product_added(
            product_id=product.id.value,
            name=product.name,
            price=product.price,
            quantity=product.quantity,
        )
        return product
