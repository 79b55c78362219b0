"""Repository for application users."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.core.exceptions import DuplicateRecordError
from fashion_inventory.core.security import hash_password
from fashion_inventory.models.enums import Role
from fashion_inventory.models.user import User


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        email: str,
        password: str,
        name: str | None = None,
        role: Role = Role.USER,
    ) -> User:
        """Create a user with a bcrypt-hashed password.

        Raises:
            DuplicateRecordError: If the email is already registered
        """
        email = email.strip().lower()
        if await self.get_by_email(email):
            raise DuplicateRecordError("User already exists")

        user = User(
            email=email,
            name=name,
            password_hash=hash_password(password),
            role=role,
        )
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(
            select(User).where(User.email == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def has_admin(self) -> bool:
        result = await self.session.execute(
            select(User.id).where(User.role == Role.ADMIN).limit(1)
        )
        return result.scalar_one_or_none() is not None
