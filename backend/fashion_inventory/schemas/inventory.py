# backend/fashion_inventory/schemas/inventory.py
from pydantic import Field, model_validator
from fashion_inventory.models.enums import InventoryType, MeasurementUnit, MovementType
from fashion_inventory.schemas.common import CamelModel, EntityResponse
from fashion_inventory.schemas.material import MaterialResponse
from fashion_inventory.schemas.product import ProductSummary


class InventoryCreate(CamelModel):
    type: InventoryType
    quantity: float = Field(..., ge=0)
    unit: MeasurementUnit
    location: str = Field(..., min_length=1)
    material_id: str | None = None
    product_id: str | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def check_target(self) -> "InventoryCreate":
        if self.type == InventoryType.MATERIAL:
            if not self.material_id:
                raise ValueError("For type MATERIAL, 'materialId' is required")
            self.product_id = None
        else:
            if not self.product_id:
                raise ValueError("For type PRODUCT, 'productId' is required")
            self.material_id = None
        return self


class InventoryUpdate(CamelModel):
    quantity: float | None = Field(default=None, ge=0)
    unit: MeasurementUnit | None = None
    location: str | None = None
    notes: str | None = None


class MovementCreate(CamelModel):
    type: MovementType
    quantity: float = Field(..., gt=0)
    unit: MeasurementUnit
    reference: str | None = None
    notes: str | None = None


class MovementResponse(EntityResponse):
    inventory_id: str
    type: MovementType
    quantity: float
    unit: MeasurementUnit
    reference: str | None = None


class InventoryResponse(EntityResponse):
    type: InventoryType
    quantity: float
    unit: MeasurementUnit
    location: str
    material_id: str | None = None
    product_id: str | None = None
    material: MaterialResponse | None = None
    product: ProductSummary | None = None
    movements: list[MovementResponse] = Field(default_factory=list)
