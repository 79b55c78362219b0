"""Repository for products and their bills of materials."""

import logging
from typing import Any, Iterable, List, Optional
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.core.exceptions import (
    DuplicateRecordError,
    ProductInUseError,
    UnknownReferenceError,
)
from fashion_inventory.models.enums import InventoryType
from fashion_inventory.models.inventory import Inventory
from fashion_inventory.models.material import Material
from fashion_inventory.models.product import Product, ProductMaterial

logger = logging.getLogger(__name__)


class ProductRepository:
    """Repository for Product database operations.

    BOM lines (ProductMaterial) and product inventory rows are owned by
    their product: they are created with it and removed with it.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _load(self, product_id: str) -> Optional[Product]:
        # populate_existing reloads the selectin relationships of an object
        # already in the identity map
        result = await self.session.execute(
            select(Product)
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _check_materials_exist(self, lines: Iterable[dict[str, Any]]) -> None:
        material_ids = {line["material_id"] for line in lines}
        if not material_ids:
            return
        result = await self.session.execute(
            select(Material.id).where(Material.id.in_(material_ids))
        )
        missing = material_ids - set(result.scalars().all())
        if missing:
            raise UnknownReferenceError(f"Unknown material(s): {', '.join(sorted(missing))}")

    @staticmethod
    def _build_lines(lines: Iterable[dict[str, Any]]) -> list[ProductMaterial]:
        return [
            ProductMaterial(
                material_id=line["material_id"],
                quantity=line["quantity"],
                unit=line["unit"],
                notes=line.get("notes"),
            )
            for line in lines
        ]

    async def create(
        self,
        sku: str,
        piece: str,
        name: str,
        season: str,
        phase: Any,
        photos: list[str] | None = None,
        notes: str | None = None,
        materials: list[dict[str, Any]] | None = None,
        inventory: list[dict[str, Any]] | None = None,
    ) -> Product:
        """Create a product with its BOM lines and inventory rows in one commit.

        Args:
            sku: Unique business key
            piece: Kind of piece (e.g. "accessory")
            name: Display name
            season: Collection season
            phase: Lifecycle Phase
            photos: Photo URLs
            notes: Free text
            materials: BOM lines as dicts with material_id, quantity, unit
            inventory: Inventory rows as dicts with quantity, unit, location

        Returns:
            Created Product with relationships loaded

        Raises:
            DuplicateRecordError: If the SKU is taken
            UnknownReferenceError: If a BOM line names an unknown material
        """
        materials = materials or []
        inventory = inventory or []

        if await self.get_by_sku(sku):
            raise DuplicateRecordError(f"A product with SKU {sku} already exists")
        await self._check_materials_exist(materials)

        product = Product(
            sku=sku,
            piece=piece,
            name=name,
            season=season,
            phase=phase,
            photos=photos or [],
            notes=notes,
        )
        product.materials = self._build_lines(materials)
        product.inventory = [
            Inventory(
                type=InventoryType.PRODUCT,
                quantity=row["quantity"],
                unit=row["unit"],
                location=row["location"],
            )
            for row in inventory
        ]
        self.session.add(product)
        await self.session.commit()
        logger.info(f"Created product {product.sku} with {len(materials)} material line(s)")
        return await self._load(product.id)

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        result = await self.session.execute(select(Product).where(Product.id == product_id))
        return result.scalar_one_or_none()

    async def get_by_sku(self, sku: str) -> Optional[Product]:
        result = await self.session.execute(select(Product).where(Product.sku == sku))
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Product]:
        """List all products, newest first."""
        result = await self.session.execute(
            select(Product).order_by(Product.created_at.desc())
        )
        return list(result.scalars().all())

    async def list_recent(self, limit: int = 5) -> List[Product]:
        result = await self.session.execute(
            select(Product).order_by(Product.created_at.desc()).limit(limit)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Product))
        return result.scalar_one()

    async def update(self, product_id: str, **fields: Any) -> Optional[Product]:
        """Update scalar fields of a product.

        Relationship fields are not accepted here; use replace_materials for
        the BOM.

        Raises:
            DuplicateRecordError: If the SKU is changed to one already taken
        """
        product = await self.get_by_id(product_id)
        if not product:
            return None

        new_sku = fields.get("sku")
        if new_sku and new_sku != product.sku:
            other = await self.get_by_sku(new_sku)
            if other and other.id != product_id:
                raise DuplicateRecordError(f"A product with SKU {new_sku} already exists")

        for key, value in fields.items():
            if key in ("materials", "inventory"):
                continue
            setattr(product, key, value)

        await self.session.commit()
        return await self._load(product_id)

    async def replace_materials(
        self, product_id: str, lines: list[dict[str, Any]]
    ) -> Optional[Product]:
        """Replace the whole bill of materials of a product.

        Args:
            product_id: Product ID
            lines: New BOM lines as dicts with material_id, quantity, unit

        Returns:
            Updated Product or None if not found

        Raises:
            UnknownReferenceError: If a line names an unknown material
        """
        product = await self.get_by_id(product_id)
        if not product:
            return None

        await self._check_materials_exist(lines)
        product.materials = self._build_lines(lines)
        await self.session.commit()
        return await self._load(product_id)

    async def delete(self, product_id: str) -> bool:
        """Delete a product with its BOM lines and inventory rows.

        Returns:
            True if deleted, False if not found

        Raises:
            ProductInUseError: If any of its inventory rows has movements
        """
        product = await self.get_by_id(product_id)
        if not product:
            return False

        if any(inv.movements for inv in product.inventory):
            raise ProductInUseError("Cannot delete product with existing inventory movements")
        if product.inventory:
            logger.warning(
                f"Deleting product {product_id} with existing inventory but no movements"
            )

        await self.session.delete(product)
        await self.session.commit()
        return True
