"""REST API endpoints for products and their bills of materials."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.api.deps import get_current_user
from fashion_inventory.core.database import get_db
from fashion_inventory.core.exceptions import (
    DuplicateRecordError,
    ProductInUseError,
    UnknownReferenceError,
)
from fashion_inventory.repositories.product_repository import ProductRepository
from fashion_inventory.schemas.common import DeleteResponse
from fashion_inventory.schemas.product import (
    ProductCreate,
    ProductMaterialsReplace,
    ProductResponse,
    ProductUpdate,
)

router = APIRouter(
    prefix="/api/products",
    tags=["products"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[ProductResponse])
async def list_products(db: AsyncSession = Depends(get_db)):
    """List all products with their materials, newest first."""
    return await ProductRepository(db).list_all()


@router.post("", response_model=ProductResponse)
async def create_product(req: ProductCreate, db: AsyncSession = Depends(get_db)):
    """Create a product, optionally with BOM lines and inventory rows."""
    try:
        return await ProductRepository(db).create(**req.model_dump())
    except (DuplicateRecordError, UnknownReferenceError) as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, db: AsyncSession = Depends(get_db)):
    product = await ProductRepository(db).get_by_id(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    req: ProductUpdate,
    db: AsyncSession = Depends(get_db),
):
    try:
        product = await ProductRepository(db).update(
            product_id, **req.model_dump(exclude_unset=True)
        )
    except DuplicateRecordError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.put("/{product_id}/materials", response_model=ProductResponse)
async def replace_product_materials(
    product_id: str,
    req: ProductMaterialsReplace,
    db: AsyncSession = Depends(get_db),
):
    """Replace the bill of materials of a product."""
    try:
        product = await ProductRepository(db).replace_materials(
            product_id, [line.model_dump() for line in req.materials]
        )
    except UnknownReferenceError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.delete("/{product_id}", response_model=DeleteResponse)
async def delete_product(product_id: str, db: AsyncSession = Depends(get_db)):
    try:
        deleted = await ProductRepository(db).delete(product_id)
    except ProductInUseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail="Product not found")
    return DeleteResponse(message="Product deleted successfully", id=product_id)
