import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fashion_inventory.core import init_db as init_db_module
from fashion_inventory.core.config import settings
from fashion_inventory.models.enums import Role
from fashion_inventory.repositories.user_repository import UserRepository


@pytest.fixture
def patched_db(test_engine, monkeypatch):
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(init_db_module, "engine", test_engine)
    monkeypatch.setattr(init_db_module, "async_session", session_factory)
    return session_factory


@pytest.mark.asyncio
async def test_creates_default_admin_once(patched_db):
    await init_db_module.init_db()
    await init_db_module.init_db()

    async with patched_db() as session:
        admin = await UserRepository(session).get_by_email(settings.DEFAULT_ADMIN_EMAIL)
        assert admin.role == Role.ADMIN


@pytest.mark.asyncio
async def test_existing_non_admin_is_left_alone(patched_db):
    async with patched_db() as session:
        await UserRepository(session).create(email=settings.DEFAULT_ADMIN_EMAIL, password="secret1")

    await init_db_module.init_db()

    async with patched_db() as session:
        users = UserRepository(session)
        assert (await users.get_by_email(settings.DEFAULT_ADMIN_EMAIL)).role == Role.USER
        assert await users.has_admin() is False
