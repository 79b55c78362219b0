"""Fixtures for API tests."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from fashion_inventory.api.deps import get_current_user
from fashion_inventory.core.database import Base, get_db
from fashion_inventory.main import app
from fashion_inventory.models.enums import Role
from fashion_inventory.models.user import User


async def _create_tables(engine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def api_engine(tmp_path):
    """File-backed SQLite engine; connections are opened on the client's loop."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        connect_args={"check_same_thread": False},
        poolclass=NullPool,
    )
    asyncio.run(_create_tables(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def db_client(api_engine):
    """Test client with the database overridden; authentication is real."""
    async_session = async_sessionmaker(
        api_engine, class_=AsyncSession, expire_on_commit=False
    )

    async def get_test_db():
        async with async_session() as session:
            yield session

    app.dependency_overrides[get_db] = get_test_db

    yield TestClient(app)

    # Clean up
    app.dependency_overrides = {}


@pytest.fixture
def client(db_client):
    """Test client authenticated as an admin user."""

    def mock_get_current_user():
        return User(id="test-user", email="test@example.com", password_hash="hash", role=Role.ADMIN)

    app.dependency_overrides[get_current_user] = mock_get_current_user
    return db_client


@pytest.fixture
def material_payload():
    return {
        "type": "Merino Yarn",
        "color": "Navy",
        "colorCode": 101,
        "brand": "Drops",
        "defaultUnit": "GRAM",
        "defaultCostPerUnit": 0.03,
        "currency": "eur",
        "properties": {"thread": {"label": "Thread", "value": "double"}},
    }


@pytest.fixture
def create_material(client, material_payload):
    def _create(**overrides):
        payload = {**material_payload, **overrides}
        response = client.post("/api/materials", json=payload)
        assert response.status_code == 200, response.text
        return response.json()

    return _create


@pytest.fixture
def create_product(client):
    def _create(sku, materials=(), **overrides):
        payload = {
            "sku": sku,
            "piece": "accessory",
            "name": "Beanie",
            "season": "FW25",
            "phase": "PRODUCTION",
            "materials": list(materials),
        }
        payload.update(overrides)
        response = client.post("/api/products", json=payload)
        assert response.status_code == 200, response.text
        return response.json()

    return _create
