"""Repository for material purchase orders."""

import logging
from typing import Any, List, Optional
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.core.exceptions import DuplicateRecordError, UnknownReferenceError
from fashion_inventory.models.enums import OrderStatus
from fashion_inventory.models.material import Material
from fashion_inventory.models.material_order import MaterialOrder, MaterialOrderItem

logger = logging.getLogger(__name__)


class MaterialOrderRepository:
    """Repository for MaterialOrder database operations.

    Items belong to their order and are deleted with it. Prices are taken as
    given; no currency conversion is attempted.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _load(self, order_id: str) -> Optional[MaterialOrder]:
        result = await self.session.execute(
            select(MaterialOrder)
            .where(MaterialOrder.id == order_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_order_number(self, order_number: str) -> Optional[MaterialOrder]:
        result = await self.session.execute(
            select(MaterialOrder).where(MaterialOrder.order_number == order_number)
        )
        return result.scalar_one_or_none()

    async def create(self, items: list[dict[str, Any]] | None = None, **fields: Any) -> MaterialOrder:
        """Create an order with its line items.

        An item without total_price gets quantity * unit_price. An order
        without total_price gets the sum of its item totals.

        Args:
            items: Line items as dicts with material_id, quantity, unit,
                unit_price and optional total_price / notes
            **fields: Order columns (order_number, supplier, currency,
                order_date, expected_delivery, status...)

        Returns:
            Created MaterialOrder with items loaded

        Raises:
            DuplicateRecordError: If the order number is taken
            UnknownReferenceError: If an item names an unknown material
        """
        items = items or []

        if await self.get_by_order_number(fields["order_number"]):
            raise DuplicateRecordError(
                f"An order with number {fields['order_number']} already exists"
            )

        material_ids = {item["material_id"] for item in items}
        if material_ids:
            result = await self.session.execute(
                select(Material.id).where(Material.id.in_(material_ids))
            )
            missing = material_ids - set(result.scalars().all())
            if missing:
                raise UnknownReferenceError(f"Unknown material(s): {', '.join(sorted(missing))}")

        order_items = []
        for item in items:
            total = item.get("total_price")
            if total is None:
                total = item["quantity"] * item.get("unit_price", 0.0)
            order_items.append(
                MaterialOrderItem(
                    material_id=item["material_id"],
                    quantity=item["quantity"],
                    unit=item["unit"],
                    unit_price=item.get("unit_price", 0.0),
                    total_price=total,
                    notes=item.get("notes"),
                )
            )

        if fields.get("total_price") is None:
            fields["total_price"] = sum(i.total_price for i in order_items)

        order = MaterialOrder(**fields)
        order.items = order_items
        self.session.add(order)
        await self.session.commit()
        logger.info(f"Created material order {order.order_number} with {len(order_items)} item(s)")
        return await self._load(order.id)

    async def get_by_id(self, order_id: str) -> Optional[MaterialOrder]:
        result = await self.session.execute(
            select(MaterialOrder).where(MaterialOrder.id == order_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self, status: OrderStatus | None = None) -> List[MaterialOrder]:
        query = select(MaterialOrder).order_by(MaterialOrder.order_date.desc())
        if status:
            query = query.where(MaterialOrder.status == status)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_open(self) -> int:
        result = await self.session.execute(
            select(func.count())
            .select_from(MaterialOrder)
            .where(MaterialOrder.status.in_(OrderStatus.open_statuses()))
        )
        return result.scalar_one()

    async def update(self, order_id: str, **fields: Any) -> Optional[MaterialOrder]:
        order = await self.get_by_id(order_id)
        if not order:
            return None

        number = fields.get("order_number")
        if number and number != order.order_number:
            if await self.get_by_order_number(number):
                raise DuplicateRecordError(f"An order with number {number} already exists")

        for key, value in fields.items():
            if key == "items":
                continue
            setattr(order, key, value)

        await self.session.commit()
        return await self._load(order_id)

    async def delete(self, order_id: str) -> bool:
        order = await self.get_by_id(order_id)
        if not order:
            return False
        await self.session.delete(order)
        await self.session.commit()
        return True
