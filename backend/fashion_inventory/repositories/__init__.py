"""Repository layer for database operations.

One repository per aggregate; each wraps an AsyncSession and commits its
own writes.
"""

from fashion_inventory.repositories.catalog_repository import CatalogRepository
from fashion_inventory.repositories.contact_repository import ContactRepository
from fashion_inventory.repositories.inventory_repository import InventoryRepository
from fashion_inventory.repositories.material_order_repository import MaterialOrderRepository
from fashion_inventory.repositories.material_repository import MaterialRepository
from fashion_inventory.repositories.product_repository import ProductRepository
from fashion_inventory.repositories.user_repository import UserRepository

__all__ = [
    "CatalogRepository",
    "ContactRepository",
    "InventoryRepository",
    "MaterialOrderRepository",
    "MaterialRepository",
    "ProductRepository",
    "UserRepository",
]
