# backend/fashion_inventory/schemas/material.py
from typing import Any
from pydantic import Field, field_validator
from fashion_inventory.models.enums import MeasurementUnit
from fashion_inventory.schemas.common import CamelModel, EntityResponse


class MaterialProperty(CamelModel):
    """One entry of a material's property bag, e.g. thread weight."""

    label: str
    value: Any
    type: str = "text"


def _normalize_currency(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip().upper()
    if len(v) != 3 or not v.isalpha():
        raise ValueError("currency must be a three-letter code")
    return v


class MaterialCreate(CamelModel):
    type: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)
    color_code: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    default_unit: MeasurementUnit
    default_cost_per_unit: float = Field(default=0.0, ge=0)
    currency: str = "USD"
    properties: dict[str, MaterialProperty] | None = None
    notes: str | None = None

    @field_validator("color_code", mode="before")
    @classmethod
    def stringify_color_code(cls, v: Any) -> Any:
        # Color codes are often numeric in supplier sheets
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("currency")
    @classmethod
    def check_currency(cls, v: str) -> str:
        return _normalize_currency(v)


class MaterialUpdate(CamelModel):
    type: str | None = None
    color: str | None = None
    color_code: str | None = None
    brand: str | None = None
    default_unit: MeasurementUnit | None = None
    default_cost_per_unit: float | None = Field(default=None, ge=0)
    currency: str | None = None
    properties: dict[str, MaterialProperty] | None = None
    notes: str | None = None

    @field_validator("currency")
    @classmethod
    def check_currency(cls, v: str | None) -> str | None:
        return _normalize_currency(v)


class MaterialResponse(EntityResponse):
    type: str
    color: str
    color_code: str
    brand: str
    default_unit: MeasurementUnit
    default_cost_per_unit: float
    currency: str
    properties: dict[str, MaterialProperty] | None = None
