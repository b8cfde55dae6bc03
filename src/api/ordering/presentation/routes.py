"""HTTP routes for the ordering bounded context.

Every route requires a valid bearer token.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.user import get_current_user
from ordering.application.services import OrderService
from ordering.dependencies.order import get_order_service
from ordering.presentation.models import OrderSummaryResponse, PlaceOrderRequest
from shared_kernel.exceptions import DomainError

router = APIRouter(
    prefix="/orders",
    tags=["ordering"],
    dependencies=[Depends(get_current_user)],
)


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
)
async def place_order(
    request: PlaceOrderRequest,
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    service: Annotated[OrderService, Depends(get_order_service)],
) -> PlainTextResponse:
    """Place an order for the authenticated user.

    Raises:
        HTTPException: 400 for invalid input, unknown product or
            insufficient stock
    """
    try:
        await service.place_order(
            user_id=current_user.user_id,
            product_id=request.product_id,
            quantity=request.quantity,
        )
    except DomainError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return PlainTextResponse(
        "Order placed successfully", status_code=status.HTTP_201_CREATED
    )


@router.get("/")
async def list_orders(
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    service: Annotated[OrderService, Depends(get_order_service)],
) -> list[OrderSummaryResponse]:
    """List the authenticated user's orders with product names."""
    summaries = await service.list_orders(current_user.user_id)
    return [OrderSummaryResponse.from_domain(s) for s in summaries]
