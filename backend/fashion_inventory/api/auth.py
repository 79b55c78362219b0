# backend/fashion_inventory/api/auth.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from fashion_inventory.api.deps import get_current_user, require_admin
from fashion_inventory.core.database import get_db
from fashion_inventory.core.exceptions import DuplicateRecordError
from fashion_inventory.core.security import verify_password, create_access_token
from fashion_inventory.models.user import User
from fashion_inventory.repositories.user_repository import UserRepository
from fashion_inventory.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserCreate,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse)
async def register(req: RegisterRequest, db: AsyncSession = Depends(get_db)):
    try:
        user = await UserRepository(db).create(
            email=req.email, password=req.password, name=req.name
        )
    except DuplicateRecordError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
async def login(req: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await UserRepository(db).get_by_email(req.email)

    if not user or not user.is_active or not verify_password(req.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token(data={"sub": user.email})
    return TokenResponse(access_token=token)


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)):
    return UserResponse.model_validate(current_user)


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Create a user with any role (admin only)."""
    try:
        user = await UserRepository(db).create(
            email=user_data.email,
            password=user_data.password,
            name=user_data.name,
            role=user_data.role,
        )
    except DuplicateRecordError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return UserResponse.model_validate(user)
