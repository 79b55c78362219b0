# backend/fashion_inventory/models/contact.py
from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column
from fashion_inventory.core.database import Base
from fashion_inventory.models.base import EntityMixin
from fashion_inventory.models.enums import ContactType


class Contact(EntityMixin, Base):
    """A supplier, manufacturer or customer."""
    __tablename__ = "contacts"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str | None] = mapped_column(String(100), nullable=True)
    type: Mapped[ContactType] = mapped_column(Enum(ContactType, native_enum=False, length=20), nullable=False)
