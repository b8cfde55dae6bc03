"""Unit tests for ordering HTTP routes."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from catalogue.ports.exceptions import ProductNotFoundError
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.user import get_current_user
from iam.domain.value_objects import UserId
from ordering.application.services import OrderService
from ordering.dependencies.order import get_order_service
from ordering.domain.value_objects import OrderId, OrderSummary
from ordering.ports.exceptions import InsufficientStockError
from ordering.presentation import router
from shared_kernel.exceptions import ValidationError

ALICE = AuthenticatedUser(user_id=UserId(value=1), username="alice")


@pytest.fixture
def mock_order_service() -> AsyncMock:
    return AsyncMock(spec=OrderService)


@pytest.fixture
def app(mock_order_service) -> FastAPI:
    app = FastAPI()
    app.dependency_overrides[get_order_service] = lambda: mock_order_service
    app.include_router(router)
    return app


@pytest.fixture
def client(app) -> TestClient:
    app.dependency_overrides[get_current_user] = lambda: ALICE
    return TestClient(app)


class TestAuthentication:
    @pytest.mark.parametrize("method", ["get", "post"])
    def test_every_route_requires_token(self, app, mock_order_service, method):
        anonymous = TestClient(app)

        response = getattr(anonymous, method)("/orders/")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        mock_order_service.place_order.assert_not_called()
        mock_order_service.list_orders.assert_not_called()


class TestPlaceOrder:
    def test_returns_201_plain_text(self, client, mock_order_service):
        response = client.post("/orders/", json={"product_id": 6, "quantity": 3})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.text == "Order placed successfully"
        mock_order_service.place_order.assert_called_once_with(
            user_id=UserId(value=1), product_id=6, quantity=3
        )

    @pytest.mark.parametrize(
        "error",
        [
            InsufficientStockError("Insufficient stock"),
            ProductNotFoundError("Product not found"),
            ValidationError("quantity must be a positive integer"),
        ],
    )
    def test_domain_errors_return_400(self, client, mock_order_service, error):
        mock_order_service.place_order.side_effect = error

        response = client.post("/orders/", json={"product_id": 6, "quantity": 3})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": str(error)}


class TestListOrders:
    def test_returns_callers_orders(self, client, mock_order_service):
        mock_order_service.list_orders.return_value = [
            OrderSummary(id=OrderId(value=1), product="Pear", quantity=3),
        ]

        response = client.get("/orders/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [{"id": 1, "product": "Pear", "quantity": 3}]
        mock_order_service.list_orders.assert_called_once_with(UserId(value=1))

    def test_no_orders(self, client, mock_order_service):
        mock_order_service.list_orders.return_value = []

        assert client.get("/orders/").json() == []
