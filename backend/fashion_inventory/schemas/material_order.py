# backend/fashion_inventory/schemas/material_order.py
from datetime import datetime
from pydantic import Field, field_validator
from fashion_inventory.models.enums import MeasurementUnit, OrderStatus
from fashion_inventory.schemas.common import CamelModel, EntityResponse
from fashion_inventory.schemas.material import MaterialResponse


class MaterialOrderItemCreate(CamelModel):
    material_id: str
    quantity: float = Field(..., gt=0)
    unit: MeasurementUnit
    unit_price: float = Field(default=0.0, ge=0)
    total_price: float | None = Field(default=None, ge=0)
    notes: str | None = None


class MaterialOrderCreate(CamelModel):
    order_number: str = Field(..., min_length=1)
    supplier: str = Field(..., min_length=1)
    total_price: float | None = Field(default=None, ge=0)
    currency: str
    order_date: datetime
    expected_delivery: datetime
    actual_delivery: datetime | None = None
    status: OrderStatus = OrderStatus.PENDING
    notes: str | None = None
    items: list[MaterialOrderItemCreate] = Field(default_factory=list)

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.strip().upper()


class MaterialOrderUpdate(CamelModel):
    order_number: str | None = None
    supplier: str | None = None
    total_price: float | None = Field(default=None, ge=0)
    currency: str | None = None
    order_date: datetime | None = None
    expected_delivery: datetime | None = None
    actual_delivery: datetime | None = None
    status: OrderStatus | None = None
    notes: str | None = None


class MaterialOrderItemResponse(EntityResponse):
    order_id: str
    material_id: str
    material: MaterialResponse
    quantity: float
    unit: MeasurementUnit
    unit_price: float
    total_price: float


class MaterialOrderResponse(EntityResponse):
    order_number: str
    supplier: str
    total_price: float
    currency: str
    order_date: datetime
    expected_delivery: datetime
    actual_delivery: datetime | None = None
    status: OrderStatus
    items: list[MaterialOrderItemResponse] = Field(default_factory=list)
