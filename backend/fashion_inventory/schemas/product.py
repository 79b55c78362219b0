# backend/fashion_inventory/schemas/product.py
from pydantic import Field
from fashion_inventory.models.enums import MeasurementUnit, Phase
from fashion_inventory.schemas.common import CamelModel, EntityResponse
from fashion_inventory.schemas.material import MaterialResponse


class ProductMaterialLine(CamelModel):
    """A BOM line as submitted by the material selector."""

    material_id: str
    quantity: float = Field(..., gt=0, description="Amount of material per product unit")
    unit: MeasurementUnit
    notes: str | None = None


class ProductInventorySeed(CamelModel):
    quantity: float = Field(default=0.0, ge=0)
    unit: MeasurementUnit = MeasurementUnit.UNIT
    location: str = "WAREHOUSE"


class ProductCreate(CamelModel):
    sku: str = Field(..., min_length=1)
    piece: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    season: str = Field(..., min_length=1)
    phase: Phase
    photos: list[str] = Field(default_factory=list)
    notes: str | None = None
    materials: list[ProductMaterialLine] = Field(default_factory=list)
    inventory: list[ProductInventorySeed] = Field(default_factory=list)


class ProductUpdate(CamelModel):
    sku: str | None = None
    piece: str | None = None
    name: str | None = None
    season: str | None = None
    phase: Phase | None = None
    photos: list[str] | None = None
    notes: str | None = None


class ProductMaterialsReplace(CamelModel):
    materials: list[ProductMaterialLine]


class ProductMaterialResponse(EntityResponse):
    product_id: str
    material_id: str
    material: MaterialResponse
    quantity: float
    unit: MeasurementUnit


class ProductInventoryResponse(CamelModel):
    id: str
    quantity: float
    unit: MeasurementUnit
    location: str


class ProductSummary(EntityResponse):
    sku: str
    piece: str
    name: str
    season: str
    phase: Phase
    photos: list[str] = Field(default_factory=list)


class ProductResponse(ProductSummary):
    materials: list[ProductMaterialResponse] = Field(default_factory=list)
    inventory: list[ProductInventoryResponse] = Field(default_factory=list)
