"""Create a user from the command line.

Usage:
    python -m fashion_inventory.create_user admin@example.com secret --name "Admin User" --role ADMIN
"""

import argparse
import asyncio
import logging

from fashion_inventory.core.database import Base, async_session, engine
from fashion_inventory.core.exceptions import DuplicateRecordError
from fashion_inventory.models import Role
from fashion_inventory.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


async def create_user(email: str, password: str, name: str | None, role: Role) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        user = await UserRepository(session).create(
            email=email, password=password, name=name, role=role
        )
        logger.info(f"User created: id={user.id} email={user.email} role={user.role.value}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a user")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("--name", default=None)
    parser.add_argument("--role", choices=[r.value for r in Role], default=Role.USER.value)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    try:
        asyncio.run(create_user(args.email, args.password, args.name, Role(args.role)))
    except DuplicateRecordError as e:
        parser.exit(1, f"Error creating user: {e}\n")


if __name__ == "__main__":
    main()
