from fastapi import APIRouter, Depends, Form, UploadFile, File as FastAPIFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from uuid import UUID

from portfolio_api.core.database import get_db
from portfolio_api.core.auth import get_current_admin
from portfolio_api.core.exceptions import handle_database_errors
from portfolio_api.crud.cv import cv_crud
from portfolio_api.schemas.auth import TokenData, MessageResponse
from portfolio_api.schemas.cv import CVCreate, CVResponse
from portfolio_api.services.upload_storage_service import upload_storage_service, CV_DOCUMENTS

router = APIRouter()

CV_MIME_TYPES = ("application/pdf",)


@router.get("/active", response_model=CVResponse)
@handle_database_errors
async def get_active_cv(db: AsyncSession = Depends(get_db)):
    """The currently published CV"""
    return await cv_crud.get_active(db)


@router.get("/all", response_model=List[CVResponse])
@handle_database_errors
async def get_all_cvs(
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Every uploaded CV, newest first"""
    return await cv_crud.list_all(db)


@router.post("/upload", response_model=CVResponse, status_code=status.HTTP_201_CREATED)
@handle_database_errors
async def upload_cv(
    cv: UploadFile = FastAPIFile(...),
    version: Optional[str] = Form(None),
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """
    Upload a PDF CV

    The new CV becomes the only active one.
    """
    filepath = await upload_storage_service.save(cv, CV_DOCUMENTS, allowed_mime_types=CV_MIME_TYPES)

    async with upload_storage_service.discard_on_error(filepath):
        cv_data = CVCreate(
            filename=cv.filename or "cv.pdf",
            filepath=filepath,
            version=version or "1.0",
        )
        return await cv_crud.upload(db, obj_in=cv_data)


@router.patch("/{cv_id}/activate", response_model=CVResponse)
@handle_database_errors
async def activate_cv(
    cv_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Make a previously uploaded CV the active one"""
    return await cv_crud.activate(db, id=cv_id)


@router.delete("/{cv_id}", response_model=MessageResponse)
@handle_database_errors
async def delete_cv(
    cv_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Delete a CV; deleting the active one leaves no CV published"""
    await cv_crud.remove(db, id=cv_id)
    return MessageResponse(message="CV deleted")
