"""Pydantic models for ordering API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt

from ordering.domain.value_objects import OrderSummary


class PlaceOrderRequest(BaseModel):
    """Request model for placing an order."""

    product_id: StrictInt | None = Field(default=None, description="Product ID")
    quantity: StrictInt | None = Field(default=None, description="Units to order")


class OrderSummaryResponse(BaseModel):
    """Response model for one of the caller's orders."""

    id: int = Field(..., description="Order ID")
    product: str = Field(..., description="Product name")
    quantity: int = Field(..., description="Units ordered")

    @classmethod
    def from_domain(cls, summary: OrderSummary) -> OrderSummaryResponse:
        """Convert an OrderSummary read model to API response."""
        return cls(
            id=summary.id.value,
            product=summary.product,
            quantity=summary.quantity,
        )
