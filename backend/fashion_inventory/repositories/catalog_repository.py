"""Bill-of-materials lookups used by material planning."""

from typing import Sequence
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fashion_inventory.models.product import ProductMaterial


class CatalogRepository:
    """Catalog backed by the product_materials table.

    Satisfies the Catalog protocol of services.requirements.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_associations_for_products(self, product_ids: set[str]) -> Sequence[ProductMaterial]:
        """Fetch every BOM line of the given products in one query.

        Args:
            product_ids: Product IDs; unknown ids simply match nothing

        Returns:
            ProductMaterial rows with their material loaded
        """
        if not product_ids:
            return []
        result = await self.session.execute(
            select(ProductMaterial)
            .where(ProductMaterial.product_id.in_(product_ids))
            .options(selectinload(ProductMaterial.material))
            .order_by(ProductMaterial.created_at, ProductMaterial.id)
        )
        return list(result.scalars().all())
