"""SQL implementation of IProductRepository (the inventory store)."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalogue.domain.aggregates import Product
from catalogue.domain.value_objects import ProductId
from catalogue.infrastructure.models import ProductModel
from catalogue.infrastructure.observability import (
    DefaultProductRepositoryProbe,
    ProductRepositoryProbe,
)
from catalogue.ports.repositories import IProductRepository


class ProductRepository(IProductRepository):
    """SQLAlchemy-backed repository for Product aggregates.

    Runs inside the caller's transaction and never commits on its own.
    Reads use ``populate_existing`` so a row already in the session's
    identity map is refreshed rather than served stale after a decrement.
    """

    def __init__(
        self, session: AsyncSession, probe: ProductRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultProductRepositoryProbe()

    async def list_all(self) -> list[Product]:
        """List every product ordered by id (insertion order)."""
        stmt = (
            select(ProductModel)
            .order_by(ProductModel.id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        products = [self._to_domain(model) for model in result.scalars().all()]

        self._probe.products_listed(len(products))
        return products

    async def get_by_id(self, product_id: ProductId) -> Product | None:
        """Retrieve a product by ID.

        Args:
            product_id: The unique identifier of the product

        Returns:
            The Product aggregate, or None if not found
        """
        stmt = (
            select(ProductModel)
            .where(ProductModel.id == product_id.value)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.product_not_found(product_id.value)
            return None

        self._probe.product_retrieved(model.id)
        return self._to_domain(model)

    async def create(self, name: str, price: int, quantity: int) -> Product:
        """Insert a new product row and flush to obtain its id."""
        model = ProductModel(name=name, price=price, quantity=quantity)
        self._session.add(model)
        await self._session.flush()

        self._probe.product_created(model.id, name, quantity)
        return self._to_domain(model)

    async def decrement_if_sufficient(self, product_id: ProductId, amount: int) -> bool:
        """Lower stock by ``amount`` in one conditional UPDATE.

        The ``quantity >= amount`` guard is evaluated by the database against
        the row it locks for the write, so concurrent decrements serialize on
        the row and a losing writer matches zero rows instead of going negative.

        Returns:
            True if exactly one row was updated
        """
        stmt = (
            update(ProductModel)
            .where(
                ProductModel.id == product_id.value,
                ProductModel.quantity >= amount,
            )
            .values(quantity=ProductModel.quantity - amount)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        if result.rowcount != 1:
            self._probe.stock_insufficient(product_id.value, amount)
            return False

        self._probe.stock_decremented(product_id.value, amount)
        return True

    @staticmethod
    def _to_domain(model: ProductModel) -> Product:
        return Product(
            id=ProductId(value=model.id),
            name=model.name,
            price=model.price,
            quantity=model.quantity,
        )
