"""Repository for supplier/customer contacts."""

from typing import Any, List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.core.exceptions import DuplicateRecordError
from fashion_inventory.models.contact import Contact
from fashion_inventory.models.enums import ContactType


class ContactRepository:
    """Repository for Contact database operations. Emails are unique."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **fields: Any) -> Contact:
        """Create a contact.

        Raises:
            DuplicateRecordError: If a contact with the same email exists
        """
        if await self.get_by_email(fields["email"]):
            raise DuplicateRecordError("A contact with this email already exists")

        contact = Contact(**fields)
        self.session.add(contact)
        await self.session.commit()
        await self.session.refresh(contact)
        return contact

    async def get_by_id(self, contact_id: str) -> Optional[Contact]:
        result = await self.session.execute(select(Contact).where(Contact.id == contact_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Contact]:
        result = await self.session.execute(select(Contact).where(Contact.email == email))
        return result.scalar_one_or_none()

    async def list_all(self, contact_type: ContactType | None = None) -> List[Contact]:
        query = select(Contact).order_by(Contact.created_at.desc())
        if contact_type:
            query = query.where(Contact.type == contact_type)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update(self, contact_id: str, **fields: Any) -> Optional[Contact]:
        contact = await self.get_by_id(contact_id)
        if not contact:
            return None

        email = fields.get("email")
        if email and email != contact.email:
            other = await self.get_by_email(email)
            if other and other.id != contact_id:
                raise DuplicateRecordError("A contact with this email already exists")

        for key, value in fields.items():
            setattr(contact, key, value)

        await self.session.commit()
        await self.session.refresh(contact)
        return contact

    async def delete(self, contact_id: str) -> bool:
        contact = await self.get_by_id(contact_id)
        if not contact:
            return False
        await self.session.delete(contact)
        await self.session.commit()
        return True
