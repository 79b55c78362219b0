# Database models
from fashion_inventory.models.enums import (
    ContactType,
    InventoryType,
    MeasurementUnit,
    MovementType,
    OrderStatus,
    Phase,
    Role,
)
from fashion_inventory.models.user import User
from fashion_inventory.models.material import Material
from fashion_inventory.models.product import Product, ProductMaterial
from fashion_inventory.models.inventory import Inventory, InventoryMovement
from fashion_inventory.models.material_order import MaterialOrder, MaterialOrderItem
from fashion_inventory.models.contact import Contact

__all__ = [
    "ContactType",
    "InventoryType",
    "MeasurementUnit",
    "MovementType",
    "OrderStatus",
    "Phase",
    "Role",
    "User",
    "Material",
    "Product",
    "ProductMaterial",
    "Inventory",
    "InventoryMovement",
    "MaterialOrder",
    "MaterialOrderItem",
    "Contact",
]
