# backend/fashion_inventory/schemas/auth.py
from pydantic import BaseModel, Field, field_validator
from fashion_inventory.models.enums import Role
from fashion_inventory.schemas.common import CamelModel, EntityResponse
from fashion_inventory.schemas.contact import check_email


class RegisterRequest(BaseModel):
    email: str
    password: str = Field(..., min_length=6)
    name: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return check_email(v).lower()


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserResponse(EntityResponse):
    email: str
    name: str | None = None
    role: Role
    is_active: bool


class UserCreate(CamelModel):
    email: str
    password: str
    name: str | None = None
    role: Role = Role.USER
