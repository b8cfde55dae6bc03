"""HTTP routes for the catalogue bounded context."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from catalogue.application.services import ProductService
from catalogue.dependencies.product import get_product_service
from catalogue.presentation.models import AddProductRequest, ProductResponse
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.user import get_current_user
from shared_kernel.exceptions import ValidationError

router = APIRouter(prefix="/products", tags=["catalogue"])


@router.get("/")
async def list_products(
    service: Annotated[ProductService, Depends(get_product_service)],
) -> list[ProductResponse]:
    """List every product with its current stock."""
    products = await service.list_products()
    return [ProductResponse.from_domain(p) for p in products]


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
)
async def add_product(
    request: AddProductRequest,
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    service: Annotated[ProductService, Depends(get_product_service)],
) -> PlainTextResponse:
    """Add a product to the catalogue.

    Requires a valid bearer token.

    Raises:
        HTTPException: 400 if a field is missing or invalid
    """
    try:
        await service.add_product(
            name=request.name,
            price=request.price,
            quantity=request.quantity,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return PlainTextResponse(
        "Product added successfully", status_code=status.HTTP_201_CREATED
    )
