"""REST API endpoints for materials."""

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.api.deps import get_current_user
from fashion_inventory.core.database import get_db
from fashion_inventory.core.exceptions import MaterialInUseError
from fashion_inventory.repositories.material_repository import MaterialRepository
from fashion_inventory.schemas.common import DeleteResponse
from fashion_inventory.schemas.material import MaterialCreate, MaterialResponse, MaterialUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/materials",
    tags=["materials"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[MaterialResponse])
async def list_materials(db: AsyncSession = Depends(get_db)):
    return await MaterialRepository(db).list_all()


@router.post("", response_model=MaterialResponse)
async def create_material(req: MaterialCreate, db: AsyncSession = Depends(get_db)):
    material = await MaterialRepository(db).create(**req.model_dump())
    logger.info(f"Created material {material.id} ({material.color} {material.type})")
    return material


@router.get("/{material_id}", response_model=MaterialResponse)
async def get_material(material_id: str, db: AsyncSession = Depends(get_db)):
    material = await MaterialRepository(db).get_by_id(material_id)
    if not material:
        raise HTTPException(status_code=404, detail="Material not found")
    return material


@router.patch("/{material_id}", response_model=MaterialResponse)
async def update_material(
    material_id: str,
    req: MaterialUpdate,
    db: AsyncSession = Depends(get_db),
):
    material = await MaterialRepository(db).update(
        material_id, **req.model_dump(exclude_unset=True)
    )
    if not material:
        raise HTTPException(status_code=404, detail="Material not found")
    return material


@router.delete("/{material_id}", response_model=DeleteResponse)
async def delete_material(material_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a material that no product, inventory row or order uses."""
    try:
        deleted = await MaterialRepository(db).delete(material_id)
    except MaterialInUseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail="Material not found")
    logger.info(f"Deleted material {material_id}")
    return DeleteResponse(message="Material deleted successfully", id=material_id)
