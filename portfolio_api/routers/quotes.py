from fastapi import APIRouter, Depends, Form, UploadFile, File as FastAPIFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from uuid import UUID

from portfolio_api.core.database import get_db
from portfolio_api.core.auth import get_current_admin
from portfolio_api.core.exceptions import handle_database_errors
from portfolio_api.crud.quote import quote_crud
from portfolio_api.schemas.auth import TokenData, MessageResponse
from portfolio_api.schemas.quote import QuoteCreate, QuoteUpdate, QuoteResponse, QuoteCounter
from portfolio_api.services.upload_storage_service import upload_storage_service, QUOTE_IMAGES

router = APIRouter()


@router.get("", response_model=List[QuoteResponse])
@handle_database_errors
async def get_quotes(db: AsyncSession = Depends(get_db)):
    """Active quotes in display order"""
    return await quote_crud.get_public(db)


@router.get("/all", response_model=List[QuoteResponse])
@handle_database_errors
async def get_all_quotes(
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Every quote, newest first"""
    return await quote_crud.get_all(db)


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
@handle_database_errors
async def create_quote(
    text: str = Form(...),
    active: bool = Form(True),
    order: int = Form(0),
    profile_image: Optional[UploadFile] = FastAPIFile(None, alias="profileImage"),
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Create a quote with an optional profile image"""
    quote_data = {"text": text, "active": active, "order": order}
    if profile_image is not None and profile_image.filename:
        quote_data["profile_image"] = await upload_storage_service.save(profile_image, QUOTE_IMAGES)

    async with upload_storage_service.discard_on_error(quote_data.get("profile_image")):
        return await quote_crud.create(db, obj_in=QuoteCreate(**quote_data))


@router.put("/{quote_id}", response_model=QuoteResponse)
@handle_database_errors
async def update_quote(
    quote_id: UUID,
    text: Optional[str] = Form(None),
    active: Optional[bool] = Form(None),
    order: Optional[int] = Form(None),
    profile_image: Optional[UploadFile] = FastAPIFile(None, alias="profileImage"),
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Update a quote; the profile image is replaced only when a new file is sent"""
    quote = await quote_crud.get(db, id=quote_id)

    fields = {"text": text, "active": active, "order": order}
    update_data = {k: v for k, v in fields.items() if v is not None}
    if profile_image is not None and profile_image.filename:
        update_data["profile_image"] = await upload_storage_service.save(profile_image, QUOTE_IMAGES)

    async with upload_storage_service.discard_on_error(update_data.get("profile_image")):
        return await quote_crud.update(db, db_obj=quote, obj_in=QuoteUpdate(**update_data))


@router.delete("/{quote_id}", response_model=MessageResponse)
@handle_database_errors
async def delete_quote(
    quote_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Delete a quote"""
    await quote_crud.remove(db, id=quote_id)
    return MessageResponse(message="Quote deleted")


# Public counters: no auth, no rate limit, every call counts

@router.post("/{quote_id}/like", response_model=QuoteResponse)
@handle_database_errors
async def like_quote(quote_id: UUID, db: AsyncSession = Depends(get_db)):
    """Add one like"""
    return await quote_crud.increment(db, id=quote_id, counter=QuoteCounter.LIKES)


@router.post("/{quote_id}/share", response_model=QuoteResponse)
@handle_database_errors
async def share_quote(quote_id: UUID, db: AsyncSession = Depends(get_db)):
    """Add one share"""
    return await quote_crud.increment(db, id=quote_id, counter=QuoteCounter.SHARES)
