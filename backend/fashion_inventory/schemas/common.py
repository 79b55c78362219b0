# backend/fashion_inventory/schemas/common.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; snake_case is accepted on input too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EntityResponse(CamelModel):
    id: str
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class DeleteResponse(CamelModel):
    message: str
    id: str
