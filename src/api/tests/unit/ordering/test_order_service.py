"""Unit tests for OrderService."""

from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest

from catalogue.domain.aggregates import Product
from catalogue.domain.value_objects import ProductId
from catalogue.ports.exceptions import ProductNotFoundError
from catalogue.ports.repositories import IProductRepository
from iam.domain.value_objects import UserId
from ordering.application.observability import OrderServiceProbe
from ordering.application.services import OrderService
from ordering.domain.aggregates import Order
from ordering.domain.value_objects import OrderId, OrderSummary
from ordering.ports.exceptions import InsufficientStockError
from ordering.ports.repositories import IOrderRepository
from shared_kernel.exceptions import ValidationError

ALICE = UserId(value=1)
PEAR = Product(id=ProductId(6), name="Pear", price=40, quantity=10)


@pytest.fixture
def mock_order_repository():
    return create_autospec(IOrderRepository, instance=True)


@pytest.fixture
def mock_product_repository():
    return create_autospec(IProductRepository, instance=True)


@pytest.fixture
def mock_probe():
    return create_autospec(OrderServiceProbe, instance=True)


@pytest.fixture
def service(mock_order_repository, mock_product_repository, mock_session, mock_probe):
    return OrderService(
        order_repository=mock_order_repository,
        product_repository=mock_product_repository,
        session=mock_session,
        probe=mock_probe,
    )


class TestPlaceOrder:
    @pytest.mark.asyncio
    async def test_decrements_then_appends(
        self,
        service,
        mock_order_repository,
        mock_product_repository,
        mock_probe,
    ):
        calls = MagicMock()
        mock_product_repository.get_by_id = AsyncMock(return_value=PEAR)
        mock_product_repository.decrement_if_sufficient = AsyncMock(
            return_value=True
        )
        mock_order_repository.append = AsyncMock(
            return_value=Order(
                id=OrderId(value=1), user_id=ALICE, product_id=PEAR.id, quantity=3
            )
        )
        calls.attach_mock(mock_product_repository.decrement_if_sufficient, "decrement")
        calls.attach_mock(mock_order_repository.append, "append")

        order = await service.place_order(user_id=ALICE, product_id=6, quantity=3)

        assert order.id == OrderId(value=1)
        assert [c[0] for c in calls.mock_calls] == ["decrement", "append"]
        mock_product_repository.decrement_if_sufficient.assert_called_once_with(
            ProductId(6), 3
        )
        mock_order_repository.append.assert_called_once_with(
            user_id=ALICE, product_id=ProductId(6), quantity=3
        )
        mock_probe.order_placed.assert_called_once_with(
            order_id=1, user_id=1, product_id=6, quantity=3
        )

    @pytest.mark.asyncio
    async def test_unknown_product(
        self, service, mock_product_repository, mock_order_repository, mock_probe
    ):
        mock_product_repository.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(ProductNotFoundError, match="Product not found"):
            await service.place_order(user_id=ALICE, product_id=999, quantity=1)

        mock_product_repository.decrement_if_sufficient.assert_not_called()
        mock_order_repository.append.assert_not_called()
        mock_probe.order_rejected.assert_called_once()

    @pytest.mark.asyncio
    async def test_insufficient_stock_records_nothing(
        self, service, mock_product_repository, mock_order_repository, mock_probe
    ):
        mock_product_repository.get_by_id = AsyncMock(return_value=PEAR)
        mock_product_repository.decrement_if_sufficient = AsyncMock(
            return_value=False
        )

        with pytest.raises(InsufficientStockError, match="Insufficient stock"):
            await service.place_order(user_id=ALICE, product_id=6, quantity=11)

        mock_order_repository.append.assert_not_called()
        mock_probe.order_rejected.assert_called_once_with(
            user_id=1, product_id=6, quantity=11, reason="Insufficient stock"
        )
        mock_probe.order_placed.assert_not_called()

    @pytest.mark.asyncio
    async def test_runs_in_one_transaction(
        self, service, mock_session, mock_product_repository, mock_order_repository
    ):
        mock_product_repository.get_by_id = AsyncMock(return_value=PEAR)
        mock_product_repository.decrement_if_sufficient = AsyncMock(
            return_value=True
        )
        mock_order_repository.append = AsyncMock(
            return_value=Order(
                id=OrderId(value=2), user_id=ALICE, product_id=PEAR.id, quantity=1
            )
        )

        await service.place_order(user_id=ALICE, product_id=6, quantity=1)

        mock_session.begin.assert_called_once()

    @pytest.mark.asyncio
    async def test_append_failure_propagates(
        self, service, mock_session, mock_product_repository, mock_order_repository
    ):
        """The failure escapes the transaction block so it rolls back."""
        mock_product_repository.get_by_id = AsyncMock(return_value=PEAR)
        mock_product_repository.decrement_if_sufficient = AsyncMock(
            return_value=True
        )
        mock_order_repository.append = AsyncMock(side_effect=RuntimeError("disk"))

        with pytest.raises(RuntimeError):
            await service.place_order(user_id=ALICE, product_id=6, quantity=1)

        exit_args = mock_session.begin.return_value.__aexit__.call_args[0]
        assert exit_args[0] is RuntimeError

    @pytest.mark.parametrize(
        "product_id,quantity",
        [
            (None, 1),
            (6, None),
            (6, 0),
            (6, -2),
            (6, 1.5),
            (6, True),
            ("6", 1),
            (0, 1),
            (10**20, 1),
            (6, 2**31),
        ],
    )
    @pytest.mark.asyncio
    async def test_rejects_invalid_input(
        self,
        service,
        mock_session,
        mock_product_repository,
        mock_probe,
        product_id,
        quantity,
    ):
        with pytest.raises(ValidationError):
            await service.place_order(
                user_id=ALICE, product_id=product_id, quantity=quantity
            )

        mock_session.begin.assert_not_called()
        mock_product_repository.decrement_if_sufficient.assert_not_called()
        mock_probe.order_rejected.assert_called_once()


class TestListOrders:
    @pytest.mark.asyncio
    async def test_returns_callers_orders(
        self, service, mock_order_repository, mock_probe
    ):
        summaries = [
            OrderSummary(id=OrderId(value=1), product="Pear", quantity=3),
            OrderSummary(id=OrderId(value=4), product="Apple", quantity=1),
        ]
        mock_order_repository.list_by_user = AsyncMock(return_value=summaries)

        result = await service.list_orders(ALICE)

        assert result == summaries
        mock_order_repository.list_by_user.assert_called_once_with(ALICE)
        mock_probe.orders_listed.assert_called_once_with(user_id=1, count=2)
