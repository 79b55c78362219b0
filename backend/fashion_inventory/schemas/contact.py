# backend/fashion_inventory/schemas/contact.py
import re
from pydantic import Field, field_validator
from fashion_inventory.models.enums import ContactType
from fashion_inventory.schemas.common import CamelModel, EntityResponse

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def check_email(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not EMAIL_RE.match(v):
        raise ValueError("Invalid email format")
    return v


class ContactCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: str
    phone: str | None = None
    company: str | None = None
    role: str | None = None
    type: ContactType
    notes: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return check_email(v)


class ContactUpdate(CamelModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    role: str | None = None
    type: ContactType | None = None
    notes: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        return check_email(v)


class ContactResponse(EntityResponse):
    name: str
    email: str
    phone: str | None = None
    company: str | None = None
    role: str | None = None
    type: ContactType
