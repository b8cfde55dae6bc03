from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalogue.application.observability import (
    DefaultProductServiceProbe,
    ProductServiceProbe,
)
from catalogue.application.services import ProductService
from catalogue.infrastructure.observability import DefaultProductRepositoryProbe
from catalogue.infrastructure.product_repository import ProductRepository
from infrastructure.database.dependencies import get_write_session
from infrastructure.observability import ObservationContext, get_observation_context


def get_product_service_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> ProductServiceProbe:
    """Get ProductServiceProbe instance.

    Args:
        context: Request-scoped observation context

    Returns:
        DefaultProductServiceProbe bound to the request's context
    """
    return DefaultProductServiceProbe().with_context(context)


def get_product_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> ProductRepository:
    """Get ProductRepository instance.

    Args:
        session: Async database session

    Returns:
        ProductRepository instance
    """
    return ProductRepository(session=session, probe=DefaultProductRepositoryProbe())


def get_product_service(
    product_repo: Annotated[ProductRepository, Depends(get_product_repository)],
    session: Annotated[AsyncSession, Depends(get_write_session)],
    probe: Annotated[ProductServiceProbe, Depends(get_product_service_probe)],
) -> ProductService:
    """Get ProductService instance.

    Args:
        product_repo: Product repository (shares session via FastAPI dependency caching)
        session: Database session for transaction management
        probe: Product service probe for observability

    Returns:
        ProductService instance
    """
    return ProductService(
        product_repository=product_repo,
        session=session,
        probe=probe,
    )
