"""Pydantic models for catalogue API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt

from catalogue.domain.aggregates import Product


class AddProductRequest(BaseModel):
    """Request model for adding a product.

    Numbers must be JSON integers; strings, floats and booleans are rejected.
    """

    name: str | None = Field(default=None, description="Product name")
    price: StrictInt | None = Field(default=None, description="Unit price")
    quantity: StrictInt | None = Field(default=None, description="Initial stock")


class ProductResponse(BaseModel):
    """Response model for a product."""

    id: int = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    price: int = Field(..., description="Unit price")
    quantity: int = Field(..., description="Units on hand")

    @classmethod
    def from_domain(cls, product: Product) -> ProductResponse:
        """Convert domain Product aggregate to API response."""
        return cls(
            id=product.id.value,
            name=product.name,
            price=product.price,
            quantity=product.quantity,
        )
