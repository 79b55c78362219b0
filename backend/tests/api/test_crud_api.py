"""Tests for the catalog, contact, order, inventory and dashboard endpoints."""


def test_material_crud(client, create_material):
    material = create_material()

    assert material["colorCode"] == "101"
    assert material["currency"] == "EUR"
    assert material["properties"]["thread"]["type"] == "text"

    response = client.patch(f"/api/materials/{material['id']}", json={"color": "Red"})
    assert response.status_code == 200
    assert response.json()["color"] == "Red"

    assert [m["id"] for m in client.get("/api/materials").json()] == [material["id"]]

    response = client.delete(f"/api/materials/{material['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Material deleted successfully", "id": material["id"]}
    assert client.get(f"/api/materials/{material['id']}").status_code == 404


def test_material_validation(client, material_payload):
    response = client.post("/api/materials", json={**material_payload, "currency": "euro"})
    assert response.status_code == 422

    response = client.post("/api/materials", json={**material_payload, "defaultUnit": "BUSHEL"})
    assert response.status_code == 422


def test_material_in_use_cannot_be_deleted(client, create_material, create_product):
    material = create_material()
    create_product("BEANIE", materials=[{"materialId": material["id"], "quantity": 80, "unit": "GRAM"}])

    response = client.delete(f"/api/materials/{material['id']}")

    assert response.status_code == 400
    assert "in use" in response.json()["detail"]


def test_product_crud(client, create_material, create_product):
    yarn = create_material()
    pompom = create_material(type="Pompom", colorCode="P1", defaultUnit="UNIT")
    product = create_product(
        "BEANIE",
        materials=[{"materialId": yarn["id"], "quantity": 80, "unit": "GRAM"}],
        inventory=[{"quantity": 0}],
    )

    assert product["materials"][0]["material"]["id"] == yarn["id"]
    assert product["inventory"][0]["unit"] == "UNIT"
    assert product["inventory"][0]["location"] == "WAREHOUSE"

    response = client.put(f"/api/products/{product['id']}/materials", json={"materials": [
        {"materialId": pompom["id"], "quantity": 1, "unit": "UNIT"},
    ]})
    assert response.status_code == 200
    assert [m["materialId"] for m in response.json()["materials"]] == [pompom["id"]]

    response = client.patch(f"/api/products/{product['id']}", json={"phase": "FIT_SAMPLE"})
    assert response.json()["phase"] == "FIT_SAMPLE"

    assert client.delete(f"/api/products/{product['id']}").status_code == 200
    assert client.get(f"/api/products/{product['id']}").status_code == 404


def test_product_errors(client, create_product):
    create_product("BEANIE")

    response = client.post("/api/products", json={
        "sku": "BEANIE", "piece": "accessory", "name": "Again", "season": "FW25", "phase": "PRODUCTION",
    })
    assert response.status_code == 400

    response = client.post("/api/products", json={
        "sku": "NEW", "piece": "accessory", "name": "Ghost", "season": "FW25", "phase": "PRODUCTION",
        "materials": [{"materialId": "missing", "quantity": 1, "unit": "GRAM"}],
    })
    assert response.status_code == 400
    assert "Unknown material" in response.json()["detail"]

    response = client.post("/api/products", json={
        "sku": "ZERO", "piece": "accessory", "name": "Zero", "season": "FW25", "phase": "PRODUCTION",
        "materials": [{"materialId": "missing", "quantity": 0, "unit": "GRAM"}],
    })
    assert response.status_code == 422


def test_contacts(client):
    payload = {"name": "Yarn Co", "email": "sales@yarn.example", "type": "SUPPLIER"}
    created = client.post("/api/contacts", json=payload)
    assert created.status_code == 200
    client.post("/api/contacts", json={"name": "Shop", "email": "shop@example.com", "type": "CUSTOMER"})

    assert client.post("/api/contacts", json=payload).status_code == 400
    assert client.post("/api/contacts", json={**payload, "email": "not-an-email"}).status_code == 422

    suppliers = client.get("/api/contacts", params={"type": "SUPPLIER"}).json()
    assert [c["name"] for c in suppliers] == ["Yarn Co"]

    contact_id = created.json()["id"]
    assert client.patch(f"/api/contacts/{contact_id}", json={"company": "Yarn Co Ltd"}).json()["company"] == "Yarn Co Ltd"
    assert client.delete(f"/api/contacts/{contact_id}").status_code == 200
    assert client.get(f"/api/contacts/{contact_id}").status_code == 404


def test_material_orders(client, create_material):
    material = create_material()
    payload = {
        "orderNumber": "PO-1",
        "supplier": "Yarn Co",
        "currency": "eur",
        "orderDate": "2025-03-01T00:00:00",
        "expectedDelivery": "2025-03-15T00:00:00",
        "items": [
            {"materialId": material["id"], "quantity": 1000, "unit": "GRAM", "unitPrice": 0.02},
        ],
    }

    response = client.post("/api/material-orders", json=payload)
    assert response.status_code == 200
    order = response.json()
    assert order["status"] == "PENDING"
    assert order["currency"] == "EUR"
    assert order["totalPrice"] == 20.0
    assert order["items"][0]["totalPrice"] == 20.0

    assert client.post("/api/material-orders", json=payload).status_code == 400

    response = client.patch(f"/api/material-orders/{order['id']}", json={"status": "DELIVERED"})
    assert response.json()["status"] == "DELIVERED"
    assert client.get("/api/material-orders", params={"status": "PENDING"}).json() == []

    # ordered material cannot be deleted while the order exists
    assert client.delete(f"/api/materials/{material['id']}").status_code == 400

    assert client.delete(f"/api/material-orders/{order['id']}").status_code == 204
    assert client.get(f"/api/material-orders/{order['id']}").status_code == 404


def test_inventory_and_movements(client, create_material):
    material = create_material()

    response = client.post("/api/inventory", json={
        "type": "MATERIAL", "quantity": 500, "unit": "GRAM", "location": "WAREHOUSE",
    })
    assert response.status_code == 422

    response = client.post("/api/inventory", json={
        "type": "MATERIAL", "quantity": 500, "unit": "GRAM", "location": "WAREHOUSE",
        "materialId": material["id"],
    })
    assert response.status_code == 200
    inventory = response.json()
    assert inventory["material"]["id"] == material["id"]

    response = client.post(f"/api/inventory/{inventory['id']}/movements", json={
        "type": "CONSUMED", "quantity": 120, "unit": "GRAM", "reference": "BATCH-7",
    })
    assert response.status_code == 200
    assert response.json()["inventoryId"] == inventory["id"]

    reloaded = client.get(f"/api/inventory/{inventory['id']}").json()
    assert reloaded["quantity"] == 500
    assert len(reloaded["movements"]) == 1

    assert client.delete(f"/api/inventory/{inventory['id']}").status_code == 400
    assert client.post("/api/inventory/missing/movements", json={
        "type": "ADJUSTED", "quantity": 1, "unit": "GRAM",
    }).status_code == 404


def test_dashboard(client, create_material, create_product):
    create_material()
    for i in range(6):
        create_product(f"SKU-{i}")

    data = client.get("/api/dashboard").json()

    assert data["totalMaterials"] == 1
    assert data["totalProducts"] == 6
    assert data["openOrders"] == 0
    assert len(data["recentProducts"]) == 5


def test_health(db_client):
    assert db_client.get("/health").json() == {"status": "ok"}
