"""REST API endpoints for inventory rows and movements."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.api.deps import get_current_user
from fashion_inventory.core.database import get_db
from fashion_inventory.core.exceptions import InventoryInUseError, UnknownReferenceError
from fashion_inventory.repositories.inventory_repository import InventoryRepository
from fashion_inventory.schemas.common import DeleteResponse
from fashion_inventory.schemas.inventory import (
    InventoryCreate,
    InventoryResponse,
    InventoryUpdate,
    MovementCreate,
    MovementResponse,
)

router = APIRouter(
    prefix="/api/inventory",
    tags=["inventory"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[InventoryResponse])
async def list_inventory(db: AsyncSession = Depends(get_db)):
    return await InventoryRepository(db).list_all()


@router.post("", response_model=InventoryResponse)
async def create_inventory(req: InventoryCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await InventoryRepository(db).create(**req.model_dump())
    except UnknownReferenceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{inventory_id}", response_model=InventoryResponse)
async def get_inventory(inventory_id: str, db: AsyncSession = Depends(get_db)):
    inventory = await InventoryRepository(db).get_by_id(inventory_id)
    if not inventory:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return inventory


@router.patch("/{inventory_id}", response_model=InventoryResponse)
async def update_inventory(
    inventory_id: str,
    req: InventoryUpdate,
    db: AsyncSession = Depends(get_db),
):
    inventory = await InventoryRepository(db).update(
        inventory_id, **req.model_dump(exclude_unset=True)
    )
    if not inventory:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return inventory


@router.post("/{inventory_id}/movements", response_model=MovementResponse)
async def record_movement(
    inventory_id: str,
    req: MovementCreate,
    db: AsyncSession = Depends(get_db),
):
    """Record a stock movement. The inventory quantity is left as is."""
    movement = await InventoryRepository(db).record_movement(inventory_id, **req.model_dump())
    if not movement:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return movement


@router.delete("/{inventory_id}", response_model=DeleteResponse)
async def delete_inventory(inventory_id: str, db: AsyncSession = Depends(get_db)):
    try:
        deleted = await InventoryRepository(db).delete(inventory_id)
    except InventoryInUseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return DeleteResponse(message="Inventory item deleted successfully", id=inventory_id)
