"""Route test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db overridden to a session from a patched DatabaseSessionManager,
      so error mapping and rollback behave as in production
    - db_manager patched so the readiness check hits the test engine
"""

import pytest
from httpx import ASGITransport, AsyncClient

from storefront.infrastructure.database import get_db, DatabaseSessionManager
import storefront.infrastructure.database as db_module
from storefront.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def product_payload():
    return {
        "name": "Test Product",
        "description": "A product used in route tests",
        "image": "https://example.com/p.png",
        "price": 10.0,
        "quantity": 5,
        "category": "electronics",
    }


@pytest.fixture
async def created_product(client, product_payload):
    res = await client.post("/api/v1/products", json=product_payload)
    assert res.status_code == 201
    return res.json()


@pytest.fixture
async def registered_user(client):
    res = await client.post(
        "/api/v1/users/register",
        json={"username": "alice", "password": "secret", "name": "Alice"},
    )
    assert res.status_code == 201
    return res.json()
