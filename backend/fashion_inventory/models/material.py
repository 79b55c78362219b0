# backend/fashion_inventory/models/material.py
from typing import Any
from sqlalchemy import Enum, Float, JSON, String
from sqlalchemy.orm import Mapped, mapped_column
from fashion_inventory.core.database import Base
from fashion_inventory.models.base import EntityMixin
from fashion_inventory.models.enums import MeasurementUnit


class Material(EntityMixin, Base):
    """A purchasable raw input (fabric, yarn, trim...).

    Product BOM lines, inventory rows and order items reference a material by
    id; none of them back-populate onto it, so deleting a material never
    touches its dependents. Repositories check usage before deleting.
    """
    __tablename__ = "materials"

    type: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[str] = mapped_column(String(255), nullable=False)
    color_code: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    brand: Mapped[str] = mapped_column(String(255), nullable=False)
    default_unit: Mapped[MeasurementUnit] = mapped_column(
        Enum(MeasurementUnit, native_enum=False, length=20), nullable=False
    )
    default_cost_per_unit: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default="USD", nullable=False)
    # key -> {"label": ..., "value": ..., "type": ...}
    properties: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    def __init__(self, **kwargs):
        if 'default_cost_per_unit' not in kwargs:
            kwargs['default_cost_per_unit'] = 0.0
        if 'currency' not in kwargs:
            kwargs['currency'] = "USD"
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Material {self.id} {self.color} {self.type}>"
