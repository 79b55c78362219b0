# backend/fashion_inventory/core/init_db.py
import asyncio
import logging
from fashion_inventory.core.config import settings
from fashion_inventory.core.database import async_session, engine, Base
from fashion_inventory.models import Role
from fashion_inventory.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


async def init_db():
    """Create tables and the default admin account."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        users = UserRepository(session)
        if await users.has_admin():
            logger.info("Admin user already exists")
            return

        if await users.get_by_email(settings.DEFAULT_ADMIN_EMAIL):
            logger.warning(
                f"{settings.DEFAULT_ADMIN_EMAIL} exists without the ADMIN role; "
                "no default admin created"
            )
            return

        await users.create(
            email=settings.DEFAULT_ADMIN_EMAIL,
            password=settings.DEFAULT_ADMIN_PASSWORD,
            name="Admin User",
            role=Role.ADMIN,
        )
        logger.info(f"Created default admin user: {settings.DEFAULT_ADMIN_EMAIL}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(init_db())
