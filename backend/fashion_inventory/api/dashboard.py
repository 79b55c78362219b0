"""Dashboard summary endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.api.deps import get_current_user
from fashion_inventory.core.database import get_db
from fashion_inventory.repositories.material_order_repository import MaterialOrderRepository
from fashion_inventory.repositories.material_repository import MaterialRepository
from fashion_inventory.repositories.product_repository import ProductRepository
from fashion_inventory.schemas.dashboard import DashboardResponse
from fashion_inventory.schemas.product import ProductSummary

router = APIRouter(
    prefix="/api/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(get_current_user)],
)

RECENT_PRODUCTS = 5


@router.get("", response_model=DashboardResponse)
async def get_dashboard(db: AsyncSession = Depends(get_db)):
    products = ProductRepository(db)
    recent = await products.list_recent(RECENT_PRODUCTS)
    return DashboardResponse(
        total_materials=await MaterialRepository(db).count(),
        total_products=await products.count(),
        open_orders=await MaterialOrderRepository(db).count_open(),
        recent_products=[ProductSummary.model_validate(p) for p in recent],
    )
