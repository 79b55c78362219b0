# backend/fashion_inventory/models/material_order.py
from datetime import datetime
from sqlalchemy import Enum, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from fashion_inventory.core.database import Base
from fashion_inventory.models.base import EntityMixin
from fashion_inventory.models.enums import MeasurementUnit, OrderStatus
from fashion_inventory.models.material import Material


class MaterialOrder(EntityMixin, Base):
    """A purchase order for materials placed with a supplier."""
    __tablename__ = "material_orders"

    order_number: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    supplier: Mapped[str] = mapped_column(String(255), nullable=False)
    total_price: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    order_date: Mapped[datetime] = mapped_column(nullable=False)
    expected_delivery: Mapped[datetime] = mapped_column(nullable=False)
    actual_delivery: Mapped[datetime | None] = mapped_column(nullable=True)
    status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, native_enum=False, length=20), default=OrderStatus.PENDING, nullable=False
    )

    items: Mapped[list["MaterialOrderItem"]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class MaterialOrderItem(EntityMixin, Base):
    __tablename__ = "material_order_items"

    order_id: Mapped[str] = mapped_column(ForeignKey("material_orders.id"), nullable=False, index=True)
    material_id: Mapped[str] = mapped_column(ForeignKey("materials.id"), nullable=False, index=True)
    quantity: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[MeasurementUnit] = mapped_column(
        Enum(MeasurementUnit, native_enum=False, length=20), nullable=False
    )
    unit_price: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    total_price: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)

    order: Mapped[MaterialOrder] = relationship(back_populates="items")
    material: Mapped[Material] = relationship(lazy="selectin")
