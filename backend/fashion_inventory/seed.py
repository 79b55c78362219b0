"""Load materials and products from JSON seed files.

Usage:
    python -m fashion_inventory.seed materials.json products.json [--reset]

materials.json holds records with type, color, colorCode, brand,
defaultUnit, defaultCostPerUnit, currency and properties. products.json holds
records with name, SKU, season, phase and a materials list of
{code, quantity, thread?}; each code is resolved to a material by color code
(and `thread` property when given).
"""

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.core.database import Base, async_session, engine
from fashion_inventory.models import (
    Inventory,
    InventoryMovement,
    InventoryType,
    Material,
    MeasurementUnit,
    Phase,
    Product,
    ProductMaterial,
)
from fashion_inventory.repositories.material_repository import MaterialRepository
from fashion_inventory.schemas.material import MaterialProperty

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "WAREHOUSE"


class SeedError(Exception):
    pass


async def reset_catalog(session: AsyncSession) -> None:
    """Remove BOM lines, inventory, products and materials."""
    await session.execute(delete(InventoryMovement))
    await session.execute(delete(ProductMaterial))
    await session.execute(delete(Inventory))
    await session.execute(delete(Product))
    await session.execute(delete(Material))
    await session.commit()


def normalize_properties(raw: dict[str, Any] | None) -> dict[str, Any] | None:
    """Bring a seed property bag into the {label, value, type} shape.

    Seed files may give plain values, e.g. {"thread": "double"}.
    """
    if not raw:
        return None
    properties = {}
    for key, value in raw.items():
        if isinstance(value, dict):
            prop = MaterialProperty.model_validate(value)
        else:
            prop = MaterialProperty(label=key, value=value)
        properties[key] = prop.model_dump()
    return properties


async def seed_materials(session: AsyncSession, records: list[dict[str, Any]]) -> list[Material]:
    """Create materials, each with an empty warehouse inventory row."""
    created = []
    for record in records:
        unit = MeasurementUnit(record["defaultUnit"])
        material = Material(
            type=record["type"],
            color=record["color"],
            color_code=str(record["colorCode"]),
            brand=record["brand"],
            default_unit=unit,
            default_cost_per_unit=float(record.get("defaultCostPerUnit") or 0),
            currency=record.get("currency", "USD"),
            properties=normalize_properties(record.get("properties")),
        )
        session.add(material)
        await session.flush()
        session.add(
            Inventory(
                type=InventoryType.MATERIAL,
                quantity=0.0,
                unit=unit,
                location=DEFAULT_LOCATION,
                material_id=material.id,
            )
        )
        created.append(material)
        logger.info(f"Created material: {material.color} {material.type}")

    await session.commit()
    return created


async def seed_products(session: AsyncSession, records: list[dict[str, Any]]) -> list[Product]:
    """Create products with BOM lines in grams and an empty inventory row.

    Raises:
        SeedError: If a material code cannot be resolved
    """
    materials = MaterialRepository(session)
    created = []
    for record in records:
        lines = []
        for entry in record.get("materials", []):
            thread = entry.get("thread")
            material = await materials.find_by_color_code(str(entry["code"]), thread)
            if not material:
                raise SeedError(f"Material with colorCode {entry['code']} not found")
            lines.append(
                ProductMaterial(
                    material_id=material.id,
                    quantity=float(entry["quantity"]),
                    unit=MeasurementUnit.GRAM,
                    notes=f"Thread: {thread}" if thread else None,
                )
            )

        product = Product(
            name=record["name"],
            sku=record["SKU"],
            piece=record.get("piece", "accessory"),
            season=record["season"],
            phase=Phase(record["phase"]),
            photos=[],
        )
        product.materials = lines
        product.inventory = [
            Inventory(
                type=InventoryType.PRODUCT,
                quantity=0.0,
                unit=MeasurementUnit.UNIT,
                location=DEFAULT_LOCATION,
            )
        ]
        session.add(product)
        await session.flush()
        created.append(product)
        logger.info(f"Created product: {product.name}")

    await session.commit()
    return created


def _read_json(path: str) -> list[dict[str, Any]]:
    with open(Path(path), "r", encoding="utf-8") as fh:
        return json.load(fh)


async def run(materials_path: str, products_path: str | None, reset: bool) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        if reset:
            await reset_catalog(session)
        materials = await seed_materials(session, _read_json(materials_path))
        logger.info(f"Seeded {len(materials)} materials")
        if products_path:
            products = await seed_products(session, _read_json(products_path))
            logger.info(f"Seeded {len(products)} products")


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed materials and products")
    parser.add_argument("materials", help="Path to materials.json")
    parser.add_argument("products", nargs="?", help="Path to products.json")
    parser.add_argument("--reset", action="store_true", help="Delete existing catalog data first")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    asyncio.run(run(args.materials, args.products, args.reset))


if __name__ == "__main__":
    main()
