"""Tests for the auth endpoints and route protection."""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fashion_inventory.models.enums import Role
from fashion_inventory.repositories.user_repository import UserRepository


def login(client, email, password):
    return client.post("/auth/login", json={"email": email, "password": password})


@pytest.fixture
def admin_headers(db_client, api_engine):
    """Bearer headers for an admin created directly in the database."""

    async def create_admin():
        async with async_sessionmaker(api_engine, class_=AsyncSession)() as session:
            await UserRepository(session).create(
                email="admin@example.com", password="admin123", role=Role.ADMIN
            )

    asyncio.run(create_admin())
    token = login(db_client, "admin@example.com", "admin123").json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


def test_register_login_me(db_client):
    response = db_client.post("/auth/register", json={
        "email": "Maker@Example.com", "password": "secret1", "name": "Maker",
    })
    assert response.status_code == 200
    user = response.json()
    assert user["email"] == "maker@example.com"
    assert user["role"] == "USER"
    assert "passwordHash" not in user

    response = login(db_client, "maker@example.com", "secret1")
    assert response.status_code == 200
    token = response.json()
    assert token["token_type"] == "bearer"

    response = db_client.get("/auth/me", headers={"Authorization": f"Bearer {token['access_token']}"})
    assert response.status_code == 200
    assert response.json()["isActive"] is True


def test_register_duplicate_and_short_password(db_client):
    payload = {"email": "maker@example.com", "password": "secret1"}
    assert db_client.post("/auth/register", json=payload).status_code == 200
    assert db_client.post("/auth/register", json=payload).status_code == 400
    assert db_client.post("/auth/register", json={"email": "x@example.com", "password": "123"}).status_code == 422


def test_login_wrong_password(db_client):
    db_client.post("/auth/register", json={"email": "maker@example.com", "password": "secret1"})

    assert login(db_client, "maker@example.com", "nope").status_code == 401
    assert login(db_client, "nobody@example.com", "secret1").status_code == 401


def test_protected_routes_reject_bad_tokens(db_client):
    assert db_client.get("/api/materials").status_code == 401
    response = db_client.get("/api/materials", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_admin_creates_users(db_client, admin_headers):
    response = db_client.post("/auth/users", headers=admin_headers, json={
        "email": "manager@example.com", "password": "secret1", "role": "INVENTORY_MANAGER",
    })
    assert response.status_code == 201
    assert response.json()["role"] == "INVENTORY_MANAGER"

    token = login(db_client, "manager@example.com", "secret1").json()["access_token"]
    response = db_client.post(
        "/auth/users",
        headers={"Authorization": f"Bearer {token}"},
        json={"email": "other@example.com", "password": "secret1"},
    )
    assert response.status_code == 403


def test_authenticated_user_reaches_api(db_client, admin_headers):
    response = db_client.get("/api/materials", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == []
