"""Repository for inventory rows and their movement ledger."""

from typing import Any, List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.core.exceptions import InventoryInUseError, UnknownReferenceError
from fashion_inventory.models.enums import InventoryType
from fashion_inventory.models.inventory import Inventory, InventoryMovement
from fashion_inventory.models.material import Material
from fashion_inventory.models.product import Product


class InventoryRepository:
    """Repository for Inventory database operations.

    Movements are a ledger only: recording one leaves Inventory.quantity
    unchanged.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _load(self, inventory_id: str) -> Optional[Inventory]:
        result = await self.session.execute(
            select(Inventory)
            .where(Inventory.id == inventory_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        type: InventoryType,
        quantity: float,
        unit: Any,
        location: str,
        material_id: str | None = None,
        product_id: str | None = None,
        notes: str | None = None,
    ) -> Inventory:
        """Create an inventory row for a material or a product.

        Raises:
            UnknownReferenceError: If the referenced material/product is missing
        """
        if type == InventoryType.MATERIAL:
            if not material_id or not await self.session.get(Material, material_id):
                raise UnknownReferenceError(f"Unknown material: {material_id}")
            product_id = None
        else:
            if not product_id or not await self.session.get(Product, product_id):
                raise UnknownReferenceError(f"Unknown product: {product_id}")
            material_id = None

        inventory = Inventory(
            type=type,
            quantity=quantity,
            unit=unit,
            location=location,
            material_id=material_id,
            product_id=product_id,
            notes=notes,
        )
        self.session.add(inventory)
        await self.session.commit()
        return await self._load(inventory.id)

    async def get_by_id(self, inventory_id: str) -> Optional[Inventory]:
        result = await self.session.execute(select(Inventory).where(Inventory.id == inventory_id))
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Inventory]:
        result = await self.session.execute(
            select(Inventory).order_by(Inventory.created_at.desc())
        )
        return list(result.scalars().all())

    async def update(self, inventory_id: str, **fields: Any) -> Optional[Inventory]:
        """Update quantity, unit, location or notes of an inventory row."""
        inventory = await self.get_by_id(inventory_id)
        if not inventory:
            return None

        for key in ("quantity", "unit", "location", "notes"):
            if key in fields:
                setattr(inventory, key, fields[key])

        await self.session.commit()
        return await self._load(inventory_id)

    async def record_movement(self, inventory_id: str, **fields: Any) -> Optional[InventoryMovement]:
        """Append a movement to an inventory row's ledger.

        Returns:
            Created InventoryMovement or None if the row does not exist
        """
        inventory = await self.get_by_id(inventory_id)
        if not inventory:
            return None

        movement = InventoryMovement(**fields)
        inventory.movements.append(movement)
        await self.session.commit()
        await self.session.refresh(movement)
        return movement

    async def delete(self, inventory_id: str) -> bool:
        """Delete an inventory row.

        Raises:
            InventoryInUseError: If the row has movements
        """
        inventory = await self.get_by_id(inventory_id)
        if not inventory:
            return False

        if inventory.movements:
            raise InventoryInUseError("Cannot delete inventory with existing movements")

        await self.session.delete(inventory)
        await self.session.commit()
        return True
