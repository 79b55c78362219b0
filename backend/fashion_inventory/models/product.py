# backend/fashion_inventory/models/product.py
from sqlalchemy import Enum, Float, ForeignKey, Index, JSON, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from fashion_inventory.core.database import Base
from fashion_inventory.models.base import EntityMixin
from fashion_inventory.models.enums import MeasurementUnit, Phase
from fashion_inventory.models.material import Material


class Product(EntityMixin, Base):
    """A sellable finished item (a style)."""
    __tablename__ = "products"

    sku: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    piece: Mapped[str] = mapped_column(String(100), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    season: Mapped[str] = mapped_column(String(100), nullable=False)
    phase: Mapped[Phase] = mapped_column(Enum(Phase, native_enum=False, length=30), nullable=False)
    photos: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    materials: Mapped[list["ProductMaterial"]] = relationship(
        back_populates="product",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    inventory: Mapped[list["Inventory"]] = relationship(  # noqa: F821
        back_populates="product",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __init__(self, **kwargs):
        if 'photos' not in kwargs:
            kwargs['photos'] = []
        super().__init__(**kwargs)


class ProductMaterial(EntityMixin, Base):
    """Bill-of-materials line: `quantity` of a material, in `unit`, per product unit.

    Several lines may link the same product and material; each one is its
    own requirement.
    """
    __tablename__ = "product_materials"

    product_id: Mapped[str] = mapped_column(ForeignKey("products.id"), nullable=False)
    material_id: Mapped[str] = mapped_column(ForeignKey("materials.id"), nullable=False)
    quantity: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[MeasurementUnit] = mapped_column(
        Enum(MeasurementUnit, native_enum=False, length=20), nullable=False
    )

    product: Mapped[Product] = relationship(back_populates="materials")
    material: Mapped[Material] = relationship(lazy="selectin")

    __table_args__ = (
        Index("idx_product_materials_product", "product_id"),
        Index("idx_product_materials_material", "material_id"),
    )
