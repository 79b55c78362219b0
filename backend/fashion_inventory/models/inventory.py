# backend/fashion_inventory/models/inventory.py
from sqlalchemy import Enum, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from fashion_inventory.core.database import Base
from fashion_inventory.models.base import EntityMixin
from fashion_inventory.models.enums import InventoryType, MeasurementUnit, MovementType
from fashion_inventory.models.material import Material
from fashion_inventory.models.product import Product


class Inventory(EntityMixin, Base):
    """Stock of one material or one product at a location.

    Exactly one of material_id / product_id is set, matching `type`.
    """
    __tablename__ = "inventory"

    type: Mapped[InventoryType] = mapped_column(
        Enum(InventoryType, native_enum=False, length=20), nullable=False
    )
    quantity: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    unit: Mapped[MeasurementUnit] = mapped_column(
        Enum(MeasurementUnit, native_enum=False, length=20), nullable=False
    )
    location: Mapped[str] = mapped_column(String(255), nullable=False)

    material_id: Mapped[str | None] = mapped_column(ForeignKey("materials.id"), nullable=True, index=True)
    product_id: Mapped[str | None] = mapped_column(ForeignKey("products.id"), nullable=True, index=True)

    material: Mapped[Material | None] = relationship(lazy="selectin")
    product: Mapped[Product | None] = relationship(back_populates="inventory", lazy="selectin")
    movements: Mapped[list["InventoryMovement"]] = relationship(
        back_populates="inventory",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="InventoryMovement.created_at",
    )


class InventoryMovement(EntityMixin, Base):
    """Ledger entry for stock moving in or out of an inventory row.

    Recording a movement does not change Inventory.quantity.
    """
    __tablename__ = "inventory_movements"

    inventory_id: Mapped[str] = mapped_column(ForeignKey("inventory.id"), nullable=False, index=True)
    type: Mapped[MovementType] = mapped_column(
        Enum(MovementType, native_enum=False, length=20), nullable=False
    )
    quantity: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[MeasurementUnit] = mapped_column(
        Enum(MeasurementUnit, native_enum=False, length=20), nullable=False
    )
    reference: Mapped[str | None] = mapped_column(String(255), nullable=True)  # order number, batch...

    inventory: Mapped[Inventory] = relationship(back_populates="movements")
