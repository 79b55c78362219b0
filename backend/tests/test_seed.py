"""Tests for the JSON seed loader."""

import pytest

from fashion_inventory.models.enums import InventoryType, MeasurementUnit
from fashion_inventory.repositories import InventoryRepository, ProductRepository
from fashion_inventory.schemas.material import MaterialResponse
from fashion_inventory.seed import (
    SeedError,
    normalize_properties,
    reset_catalog,
    seed_materials,
    seed_products,
)

MATERIALS = [
    {
        "type": "Merino Yarn",
        "color": "Navy",
        "colorCode": 101,
        "brand": "Drops",
        "defaultUnit": "GRAM",
        "defaultCostPerUnit": 0.03,
        "currency": "EUR",
        "properties": {"thread": {"label": "Thread", "value": "double", "type": "text"}},
    },
    {
        "type": "Mohair",
        "color": "Cream",
        "colorCode": "202",
        "brand": "Drops",
        "defaultUnit": "GRAM",
    },
]

PRODUCTS = [
    {
        "name": "Beanie",
        "SKU": "BEANIE-01",
        "season": "FW25",
        "phase": "PRODUCTION",
        "materials": [
            {"code": "101", "quantity": 80, "thread": "double"},
            {"code": 202, "quantity": 20},
        ],
    },
]


@pytest.mark.asyncio
async def test_seed_materials_creates_inventory(test_session):
    materials = await seed_materials(test_session, MATERIALS)

    assert [m.color_code for m in materials] == ["101", "202"]
    assert materials[1].currency == "USD"
    rows = await InventoryRepository(test_session).list_all()
    assert len(rows) == 2
    assert all(r.type == InventoryType.MATERIAL and r.quantity == 0 for r in rows)


@pytest.mark.asyncio
async def test_seed_products_resolves_codes(test_session):
    await seed_materials(test_session, MATERIALS)
    products = await seed_products(test_session, PRODUCTS)

    product = await ProductRepository(test_session).get_by_sku("BEANIE-01")
    assert product.id == products[0].id
    assert product.piece == "accessory"
    assert sorted(line.quantity for line in product.materials) == [20, 80]
    assert all(line.unit == MeasurementUnit.GRAM for line in product.materials)
    assert product.inventory[0].unit == MeasurementUnit.UNIT


@pytest.mark.asyncio
async def test_seed_products_unknown_code(test_session):
    await seed_materials(test_session, MATERIALS)

    with pytest.raises(SeedError):
        await seed_products(test_session, [
            {"name": "Scarf", "SKU": "SCARF", "season": "FW25", "phase": "PRODUCTION",
             "materials": [{"code": "999", "quantity": 10}]},
        ])


@pytest.mark.asyncio
async def test_reset_catalog(test_session):
    await seed_materials(test_session, MATERIALS)
    await seed_products(test_session, PRODUCTS)

    await reset_catalog(test_session)

    assert await ProductRepository(test_session).count() == 0
    assert await InventoryRepository(test_session).list_all() == []


@pytest.mark.asyncio
async def test_seed_plain_properties_are_normalized(test_session):
    [material] = await seed_materials(test_session, [{
        "type": "Cotton Yarn",
        "color": "White",
        "colorCode": "303",
        "brand": "Drops",
        "defaultUnit": "GRAM",
        "properties": {"thread": "double", "weight": 50},
    }])

    assert material.properties["thread"] == {"label": "thread", "value": "double", "type": "text"}
    response = MaterialResponse.model_validate(material)
    assert response.properties["weight"].value == 50

    await seed_products(test_session, [{
        "name": "Scarf", "SKU": "SCARF", "season": "FW25", "phase": "PRODUCTION",
        "materials": [{"code": "303", "quantity": 150, "thread": "double"}],
    }])
    [line] = (await ProductRepository(test_session).get_by_sku("SCARF")).materials
    assert line.material_id == material.id


def test_normalize_properties_keeps_structured_values():
    structured = {"thread": {"label": "Thread", "value": "single", "type": "text"}}

    assert normalize_properties(structured) == structured
    assert normalize_properties(None) is None
    assert normalize_properties({}) is None
