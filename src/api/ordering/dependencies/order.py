from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalogue.dependencies.product import get_product_repository
from catalogue.infrastructure.product_repository import ProductRepository
from infrastructure.database.dependencies import get_write_session
from infrastructure.observability import ObservationContext, get_observation_context
from ordering.application.observability import (
    DefaultOrderServiceProbe,
    OrderServiceProbe,
)
from ordering.application.services import OrderService
from ordering.infrastructure.observability import DefaultOrderRepositoryProbe
from ordering.infrastructure.order_repository import OrderRepository


def get_order_service_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> OrderServiceProbe:
    """Get OrderServiceProbe bound to the request's observation context."""
    return DefaultOrderServiceProbe().with_context(context)


def get_order_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> OrderRepository:
    """Get OrderRepository instance.

    Args:
        session: Async database session

    Returns:
        OrderRepository instance
    """
    return OrderRepository(session=session, probe=DefaultOrderRepositoryProbe())


def get_order_service(
    order_repo: Annotated[OrderRepository, Depends(get_order_repository)],
    product_repo: Annotated[ProductRepository, Depends(get_product_repository)],
    session: Annotated[AsyncSession, Depends(get_write_session)],
    probe: Annotated[OrderServiceProbe, Depends(get_order_service_probe)],
) -> OrderService:
    """Get OrderService instance.

    Both repositories share the request's session (FastAPI caches
    ``get_write_session`` per request), so the service's transaction
    spans the decrement and the append.

    Returns:
        OrderService instance
    """
    return OrderService(
        order_repository=order_repo,
        product_repository=product_repo,
        session=session,
        probe=probe,
    )
