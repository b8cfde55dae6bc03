"""End-to-end HTTP tests against the full application and a real database."""

import asyncio

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from jose import jwt

from iam.infrastructure.user_repository import UserRepository
from main import app

pytestmark = pytest.mark.integration

ALICE = {
    "username": "alice",
    "name": "Alice",
    "password": "correct horse battery staple",
    "gender": "female",
    "location": "Pune",
}


@pytest_asyncio.fixture
async def async_client(app_environment):
    """Create async HTTP client for testing with lifespan support."""
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


async def _token(client, user=ALICE) -> str:
    await client.post("/users/", json=user)
    response = await client.post(
        "/login/", json={"username": user["username"], "password": user["password"]}
    )
    assert response.status_code == 200
    return response.json()["jwtToken"]


async def _pear_stock(client) -> int:
    products = (await client.get("/products/")).json()
    return next(p["quantity"] for p in products if p["name"] == "Pear")


class TestRegistrationAndLogin:
    @pytest.mark.asyncio
    async def test_register_then_login(
        self, async_client, session_factory, jwt_secret
    ):
        response = await async_client.post("/users/", json=ALICE)

        assert response.status_code == 201
        assert response.json() == {"message": "User registered successfully"}

        token = await _token(async_client)
        claims = jwt.decode(token, jwt_secret, algorithms=["HS256"])
        async with session_factory() as session:
            alice = await UserRepository(session).get_by_username("alice")

        assert claims["userId"] == alice.id.value
        assert claims["username"] == "alice"

    @pytest.mark.asyncio
    async def test_duplicate_username(self, async_client):
        await async_client.post("/users/", json=ALICE)

        response = await async_client.post("/users/", json=ALICE)

        assert response.status_code == 400
        assert response.json() == {"detail": "User already exists"}

    @pytest.mark.asyncio
    async def test_missing_field(self, async_client):
        body = {k: v for k, v in ALICE.items() if k != "gender"}

        response = await async_client.post("/users/", json=body)

        assert response.status_code == 400
        assert "gender" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_user_look_alike(self, async_client):
        await async_client.post("/users/", json=ALICE)

        wrong_password = await async_client.post(
            "/login/", json={"username": "alice", "password": "nope"}
        )
        unknown_user = await async_client.post(
            "/login/", json={"username": "mallory", "password": "nope"}
        )

        assert wrong_password.status_code == unknown_user.status_code == 400
        assert wrong_password.json() == unknown_user.json()


class TestAuthEnforcement:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path",
        [("post", "/products/"), ("post", "/orders/"), ("get", "/orders/")],
    )
    async def test_protected_routes_require_token(self, async_client, method, path):
        response = await getattr(async_client, method)(path)

        assert response.status_code == 401
        assert response.headers.get("WWW-Authenticate") == "Bearer"

    @pytest.mark.asyncio
    async def test_garbage_token_is_forbidden(self, async_client):
        response = await async_client.get(
            "/orders/", headers={"Authorization": "Bearer garbage"}
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_public_routes(self, async_client):
        assert (await async_client.get("/products/")).status_code == 200
        assert (await async_client.get("/health/db")).json()["connected"] is True


class TestPearScenario:
    @pytest.mark.asyncio
    async def test_order_flow(self, async_client):
        token = await _token(async_client)
        headers = {"Authorization": f"Bearer {token}"}

        added = await async_client.post(
            "/products/",
            json={"name": "Pear", "price": 40, "quantity": 10},
            headers=headers,
        )
        assert added.status_code == 201
        assert added.text == "Product added successfully"

        products = (await async_client.get("/products/")).json()
        pear_id = next(p["id"] for p in products if p["name"] == "Pear")

        placed = await async_client.post(
            "/orders/", json={"product_id": pear_id, "quantity": 3}, headers=headers
        )
        assert placed.status_code == 201
        assert placed.text == "Order placed successfully"
        assert await _pear_stock(async_client) == 7

        rejected = await async_client.post(
            "/orders/", json={"product_id": pear_id, "quantity": 8}, headers=headers
        )
        assert rejected.status_code == 400
        assert rejected.json() == {"detail": "Insufficient stock"}
        assert await _pear_stock(async_client) == 7

        orders = (await async_client.get("/orders/", headers=headers)).json()
        assert [(o["product"], o["quantity"]) for o in orders] == [("Pear", 3)]

    @pytest.mark.asyncio
    async def test_unknown_product(self, async_client):
        headers = {"Authorization": f"Bearer {await _token(async_client)}"}

        response = await async_client.post(
            "/orders/", json={"product_id": 9999, "quantity": 1}, headers=headers
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Product not found"}

    @pytest.mark.asyncio
    async def test_orders_are_private(self, async_client):
        alice = {"Authorization": f"Bearer {await _token(async_client)}"}
        bob_token = await _token(async_client, {**ALICE, "username": "bob"})
        bob = {"Authorization": f"Bearer {bob_token}"}

        await async_client.post(
            "/products/", json={"name": "Pear", "price": 40, "quantity": 10}, headers=alice
        )
        products = (await async_client.get("/products/")).json()
        pear_id = next(p["id"] for p in products if p["name"] == "Pear")
        await async_client.post(
            "/orders/", json={"product_id": pear_id, "quantity": 2}, headers=alice
        )

        assert (await async_client.get("/orders/", headers=bob)).json() == []

    @pytest.mark.asyncio
    async def test_concurrent_requests_never_oversell(self, async_client):
        headers = {"Authorization": f"Bearer {await _token(async_client)}"}
        await async_client.post(
            "/products/", json={"name": "Pear", "price": 40, "quantity": 5}, headers=headers
        )
        products = (await async_client.get("/products/")).json()
        pear_id = next(p["id"] for p in products if p["name"] == "Pear")

        responses = await asyncio.gather(
            *(
                async_client.post(
                    "/orders/",
                    json={"product_id": pear_id, "quantity": 2},
                    headers=headers,
                )
                for _ in range(6)
            )
        )

        assert sorted(r.status_code for r in responses) == [201, 201, 400, 400, 400, 400]
        assert await _pear_stock(async_client) == 1


class TestOversizedIntegers:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path,body",
        [
            ("/products/", {"name": "Pear", "price": 10**20, "quantity": 10}),
            ("/products/", {"name": "Pear", "price": 40, "quantity": 2**31}),
            ("/orders/", {"product_id": 10**20, "quantity": 1}),
            ("/orders/", {"product_id": 1, "quantity": 10**20}),
        ],
    )
    async def test_out_of_range_numbers_are_bad_requests(
        self, async_client, path, body
    ):
        headers = {"Authorization": f"Bearer {await _token(async_client)}"}

        response = await async_client.post(path, json=body, headers=headers)

        assert response.status_code == 400
        assert "at most 2147483647" in response.json()["detail"]
