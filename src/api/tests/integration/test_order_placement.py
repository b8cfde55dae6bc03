"""Integration tests for stock-safe order placement.

Drives ``OrderService`` against a real database to check that stock and
the order ledger always move together, including under concurrent load.
"""

import asyncio

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from catalogue.domain.value_objects import ProductId
from catalogue.infrastructure.product_repository import ProductRepository
from iam.infrastructure.user_repository import UserRepository
from ordering.application.services import OrderService
from ordering.infrastructure.models import OrderModel
from ordering.infrastructure.order_repository import OrderRepository
from ordering.ports.exceptions import InsufficientStockError

pytestmark = pytest.mark.integration


class FailingOrderRepository(OrderRepository):
    """Ledger whose append fails after the row has been written."""

    async def append(self, user_id, product_id, quantity):
        await super().append(user_id, product_id, quantity)
        raise RuntimeError("ledger write failed")


def _service(session, order_repository_class=OrderRepository) -> OrderService:
    return OrderService(
        order_repository=order_repository_class(session),
        product_repository=ProductRepository(session),
        session=session,
    )


@pytest_asyncio.fixture
async def seeded(session_factory):
    """A committed customer account."""
    async with session_factory() as session:
        async with session.begin():
            user = await UserRepository(session).create(
                username="alice",
                display_name="Alice",
                password_hash="$2b$04$notarealhash",
                gender="female",
                location="Pune",
            )
    return user


async def _add_product(session_factory, quantity: int) -> ProductId:
    async with session_factory() as session:
        async with session.begin():
            product = await ProductRepository(session).create(
                name="Pear", price=40, quantity=quantity
            )
    return product.id


async def _stock(session_factory, product_id: ProductId) -> int:
    async with session_factory() as session:
        async with session.begin():
            product = await ProductRepository(session).get_by_id(product_id)
    return product.quantity


async def _order_count(session_factory) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count(OrderModel.id)))
        return result.scalar_one()


class TestSequentialOrders:
    @pytest.mark.asyncio
    async def test_successful_order_lowers_stock_and_records(
        self, session_factory, seeded
    ):
        pear = await _add_product(session_factory, 10)

        async with session_factory() as session:
            order = await _service(session).place_order(seeded.id, pear.value, 3)

        assert order.quantity == 3
        assert await _stock(session_factory, pear) == 7
        assert await _order_count(session_factory) == 1

    @pytest.mark.asyncio
    async def test_rejected_order_changes_nothing(self, session_factory, seeded):
        pear = await _add_product(session_factory, 7)

        async with session_factory() as session:
            with pytest.raises(InsufficientStockError):
                await _service(session).place_order(seeded.id, pear.value, 8)

        assert await _stock(session_factory, pear) == 7
        assert await _order_count(session_factory) == 0

    @pytest.mark.asyncio
    async def test_ledger_failure_rolls_back_decrement(self, session_factory, seeded):
        pear = await _add_product(session_factory, 10)

        async with session_factory() as session:
            with pytest.raises(RuntimeError):
                await _service(session, FailingOrderRepository).place_order(
                    seeded.id, pear.value, 3
                )

        assert await _stock(session_factory, pear) == 10
        assert await _order_count(session_factory) == 0

    @pytest.mark.asyncio
    async def test_stock_accounting_matches_ledger(self, session_factory, seeded):
        pear = await _add_product(session_factory, 10)

        for quantity in (3, 8, 4, 3, 1):
            async with session_factory() as session:
                try:
                    await _service(session).place_order(seeded.id, pear.value, quantity)
                except InsufficientStockError:
                    pass

        async with session_factory() as session:
            summaries = await _service(session).list_orders(seeded.id)

        ordered = sum(s.quantity for s in summaries)
        assert [s.quantity for s in summaries] == [3, 4, 3]
        assert await _stock(session_factory, pear) == 10 - ordered


class TestConcurrentOrders:
    @pytest.mark.parametrize(
        "stock,quantity,attempts",
        [(5, 1, 12), (10, 3, 8), (1, 1, 6)],
    )
    @pytest.mark.asyncio
    async def test_never_oversells(
        self, session_factory, seeded, stock, quantity, attempts
    ):
        """Exactly floor(stock / quantity) racing orders succeed."""
        pear = await _add_product(session_factory, stock)

        async def attempt():
            async with session_factory() as session:
                return await _service(session).place_order(
                    seeded.id, pear.value, quantity
                )

        results = await asyncio.gather(
            *(attempt() for _ in range(attempts)), return_exceptions=True
        )

        placed = [r for r in results if not isinstance(r, Exception)]
        rejected = [r for r in results if isinstance(r, Exception)]
        expected = min(attempts, stock // quantity)

        assert len(placed) == expected
        assert all(isinstance(e, InsufficientStockError) for e in rejected)
        assert await _stock(session_factory, pear) == stock - expected * quantity
        assert await _order_count(session_factory) == expected
