"""Repository for material database operations."""

from typing import Any, List, Optional
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.core.exceptions import MaterialInUseError
from fashion_inventory.models.inventory import Inventory
from fashion_inventory.models.material import Material
from fashion_inventory.models.material_order import MaterialOrderItem
from fashion_inventory.models.product import ProductMaterial


class MaterialRepository:
    """Repository for Material database operations.

    Provides CRUD operations plus the usage checks that guard deletion.
    """

    def __init__(self, session: AsyncSession):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, **fields: Any) -> Material:
        """Create a new material.

        Args:
            **fields: Material column values (type, color, color_code, brand,
                default_unit, default_cost_per_unit, currency, properties,
                notes)

        Returns:
            Created Material instance
        """
        material = Material(**fields)
        self.session.add(material)
        await self.session.commit()
        await self.session.refresh(material)
        return material

    async def get_by_id(self, material_id: str) -> Optional[Material]:
        result = await self.session.execute(
            select(Material).where(Material.id == material_id)
        )
        return result.scalar_one_or_none()

    async def get_many(self, material_ids: set[str]) -> dict[str, Material]:
        """Fetch several materials at once, keyed by id. Unknown ids are absent."""
        if not material_ids:
            return {}
        result = await self.session.execute(
            select(Material).where(Material.id.in_(material_ids))
        )
        return {m.id: m for m in result.scalars().all()}

    async def find_by_color_code(
        self, color_code: str, thread: str | None = None
    ) -> Optional[Material]:
        """Find a material by color code, optionally matching its `thread` property.

        Args:
            color_code: Supplier color code
            thread: Value of the `thread` property to match, if any

        Returns:
            First matching Material or None
        """
        result = await self.session.execute(
            select(Material)
            .where(Material.color_code == color_code)
            .order_by(Material.created_at)
        )
        for material in result.scalars().all():
            if thread is None:
                return material
            prop = (material.properties or {}).get("thread")
            value = prop.get("value") if isinstance(prop, dict) else prop
            if value == thread:
                return material
        return None

    async def list_all(self) -> List[Material]:
        result = await self.session.execute(
            select(Material).order_by(Material.created_at.desc())
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Material))
        return result.scalar_one()

    async def update(self, material_id: str, **fields: Any) -> Optional[Material]:
        """Update the given fields of a material.

        Args:
            material_id: Material ID
            **fields: Columns to change

        Returns:
            Updated Material instance or None if not found
        """
        material = await self.get_by_id(material_id)
        if not material:
            return None

        for key, value in fields.items():
            setattr(material, key, value)

        await self.session.commit()
        await self.session.refresh(material)
        return material

    async def usage_counts(self, material_id: str) -> dict[str, int]:
        """Count the records referencing a material.

        Returns:
            Mapping with `products`, `inventory` and `order_items` counts
        """
        counts = {}
        for key, model in (
            ("products", ProductMaterial),
            ("inventory", Inventory),
            ("order_items", MaterialOrderItem),
        ):
            result = await self.session.execute(
                select(func.count()).select_from(model).where(model.material_id == material_id)
            )
            counts[key] = result.scalar_one()
        return counts

    async def delete(self, material_id: str) -> bool:
        """Delete a material that nothing references.

        Args:
            material_id: Material ID

        Returns:
            True if deleted, False if not found

        Raises:
            MaterialInUseError: If products, inventory or orders reference it
        """
        material = await self.get_by_id(material_id)
        if not material:
            return False

        counts = await self.usage_counts(material_id)
        if counts["inventory"] or counts["products"] or counts["order_items"]:
            raise MaterialInUseError(
                "Cannot delete material that is in use by products, orders "
                "or has existing inventory"
            )

        await self.session.delete(material)
        await self.session.commit()
        return True
