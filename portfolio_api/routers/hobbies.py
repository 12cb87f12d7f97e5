from fastapi import APIRouter, Depends, Form, UploadFile, File as FastAPIFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from uuid import UUID

from portfolio_api.core.database import get_db
from portfolio_api.core.auth import get_current_admin
from portfolio_api.core.exceptions import handle_database_errors
from portfolio_api.crud.hobby import hobby_crud
from portfolio_api.schemas.auth import TokenData, MessageResponse
from portfolio_api.schemas.hobby import HobbyCreate, HobbyUpdate, HobbyResponse
from portfolio_api.services.upload_storage_service import upload_storage_service, HOBBY_IMAGES

router = APIRouter()


@router.get("", response_model=List[HobbyResponse])
@handle_database_errors
async def get_hobbies(db: AsyncSession = Depends(get_db)):
    """All hobbies in display order"""
    return await hobby_crud.get_all(db)


@router.post("", response_model=HobbyResponse, status_code=status.HTTP_201_CREATED)
@handle_database_errors
async def create_hobby(
    category: str = Form(...),
    headline: str = Form(...),
    order: int = Form(0),
    image: UploadFile = FastAPIFile(...),
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Create a hobby card; the image is required"""
    image_path = await upload_storage_service.save(image, HOBBY_IMAGES)
    async with upload_storage_service.discard_on_error(image_path):
        hobby_in = HobbyCreate(category=category, headline=headline, order=order, image=image_path)
        return await hobby_crud.create(db, obj_in=hobby_in)


@router.put("/{hobby_id}", response_model=HobbyResponse)
@handle_database_errors
async def update_hobby(
    hobby_id: UUID,
    category: Optional[str] = Form(None),
    headline: Optional[str] = Form(None),
    order: Optional[int] = Form(None),
    image: Optional[UploadFile] = FastAPIFile(None),
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Update a hobby; the image is replaced only when a new file is sent"""
    hobby = await hobby_crud.get(db, id=hobby_id)

    fields = {"category": category, "headline": headline, "order": order}
    update_data = {k: v for k, v in fields.items() if v is not None}
    if image is not None and image.filename:
        update_data["image"] = await upload_storage_service.save(image, HOBBY_IMAGES)

    async with upload_storage_service.discard_on_error(update_data.get("image")):
        return await hobby_crud.update(db, db_obj=hobby, obj_in=HobbyUpdate(**update_data))


@router.delete("/{hobby_id}", response_model=MessageResponse)
@handle_database_errors
async def delete_hobby(
    hobby_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Delete a hobby"""
    await hobby_crud.remove(db, id=hobby_id)
    return MessageResponse(message="Hobby deleted")
