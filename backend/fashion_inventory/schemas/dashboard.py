# backend/fashion_inventory/schemas/dashboard.py
from fashion_inventory.schemas.common import CamelModel
from fashion_inventory.schemas.product import ProductSummary


class DashboardResponse(CamelModel):
    total_materials: int
    total_products: int
    open_orders: int
    recent_products: list[ProductSummary]
