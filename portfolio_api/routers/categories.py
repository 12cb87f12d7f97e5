from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from uuid import UUID

from portfolio_api.core.database import get_db
from portfolio_api.core.auth import get_current_admin
from portfolio_api.core.exceptions import handle_database_errors
from portfolio_api.crud.category import category_crud
from portfolio_api.schemas.auth import TokenData, MessageResponse
from portfolio_api.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse

router = APIRouter()

@router.get("", response_model=List[CategoryResponse])
@handle_database_errors
async def get_categories(db: AsyncSession = Depends(get_db)):
    """Get all categories"""
    return await category_crud.get_all(db)

@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
@handle_database_errors
async def create_category(
    category_in: CategoryCreate,
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Create a new category"""
    return await category_crud.create(db, obj_in=category_in)

@router.put("/{category_id}", response_model=CategoryResponse)
@handle_database_errors
async def update_category(
    category_id: UUID,
    category_in: CategoryUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Update a category"""
    category = await category_crud.get(db, id=category_id)
    return await category_crud.update(db, db_obj=category, obj_in=category_in)

@router.delete("/{category_id}", response_model=MessageResponse)
@handle_database_errors
async def delete_category(
    category_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Delete a category"""
    await category_crud.remove(db, id=category_id)
    return MessageResponse(message="Category deleted")
