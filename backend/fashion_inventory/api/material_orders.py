"""REST API endpoints for material purchase orders."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.api.deps import get_current_user
from fashion_inventory.core.database import get_db
from fashion_inventory.core.exceptions import DuplicateRecordError, UnknownReferenceError
from fashion_inventory.models.enums import OrderStatus
from fashion_inventory.repositories.material_order_repository import MaterialOrderRepository
from fashion_inventory.schemas.material_order import (
    MaterialOrderCreate,
    MaterialOrderResponse,
    MaterialOrderUpdate,
)

router = APIRouter(
    prefix="/api/material-orders",
    tags=["material-orders"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[MaterialOrderResponse])
async def list_orders(
    order_status: OrderStatus | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
):
    return await MaterialOrderRepository(db).list_all(status=order_status)


@router.post("", response_model=MaterialOrderResponse)
async def create_order(req: MaterialOrderCreate, db: AsyncSession = Depends(get_db)):
    """Create an order; totals default to the sum of the item totals."""
    data = req.model_dump()
    items = data.pop("items")
    try:
        return await MaterialOrderRepository(db).create(items=items, **data)
    except (DuplicateRecordError, UnknownReferenceError) as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{order_id}", response_model=MaterialOrderResponse)
async def get_order(order_id: str, db: AsyncSession = Depends(get_db)):
    order = await MaterialOrderRepository(db).get_by_id(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.patch("/{order_id}", response_model=MaterialOrderResponse)
async def update_order(
    order_id: str,
    req: MaterialOrderUpdate,
    db: AsyncSession = Depends(get_db),
):
    try:
        order = await MaterialOrderRepository(db).update(
            order_id, **req.model_dump(exclude_unset=True)
        )
    except DuplicateRecordError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: str, db: AsyncSession = Depends(get_db)):
    if not await MaterialOrderRepository(db).delete(order_id):
        raise HTTPException(status_code=404, detail="Order not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
