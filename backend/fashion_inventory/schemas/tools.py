# backend/fashion_inventory/schemas/tools.py
from typing import Any
from pydantic import Field
from fashion_inventory.models.enums import MeasurementUnit
from fashion_inventory.schemas.common import CamelModel
from fashion_inventory.schemas.material import MaterialResponse


class RequirementLine(CamelModel):
    # Checked by the aggregator, which names the offending entry
    product_id: str | None = None
    quantity: Any = None


class CalculateMaterialsRequest(CamelModel):
    products: list[RequirementLine] = Field(default_factory=list)


class MaterialRequirementResponse(CamelModel):
    material: MaterialResponse
    total_quantity: float
    unit: MeasurementUnit
    mixed_units: bool = False
