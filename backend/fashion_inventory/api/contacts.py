"""REST API endpoints for contacts."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fashion_inventory.api.deps import get_current_user
from fashion_inventory.core.database import get_db
from fashion_inventory.core.exceptions import DuplicateRecordError
from fashion_inventory.models.enums import ContactType
from fashion_inventory.repositories.contact_repository import ContactRepository
from fashion_inventory.schemas.common import DeleteResponse
from fashion_inventory.schemas.contact import ContactCreate, ContactResponse, ContactUpdate

router = APIRouter(
    prefix="/api/contacts",
    tags=["contacts"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[ContactResponse])
async def list_contacts(
    type: ContactType | None = None,
    db: AsyncSession = Depends(get_db),
):
    return await ContactRepository(db).list_all(contact_type=type)


@router.post("", response_model=ContactResponse)
async def create_contact(req: ContactCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await ContactRepository(db).create(**req.model_dump())
    except DuplicateRecordError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(contact_id: str, db: AsyncSession = Depends(get_db)):
    contact = await ContactRepository(db).get_by_id(contact_id)
    if not contact:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


@router.patch("/{contact_id}", response_model=ContactResponse)
async def update_contact(
    contact_id: str,
    req: ContactUpdate,
    db: AsyncSession = Depends(get_db),
):
    try:
        contact = await ContactRepository(db).update(
            contact_id, **req.model_dump(exclude_unset=True)
        )
    except DuplicateRecordError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not contact:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


@router.delete("/{contact_id}", response_model=DeleteResponse)
async def delete_contact(contact_id: str, db: AsyncSession = Depends(get_db)):
    if not await ContactRepository(db).delete(contact_id):
        raise HTTPException(status_code=404, detail="Contact not found")
    return DeleteResponse(message="Contact deleted successfully", id=contact_id)
