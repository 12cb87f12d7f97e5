from fastapi import APIRouter, Depends, Form, UploadFile, File as FastAPIFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from uuid import UUID
import json

from portfolio_api.core.database import get_db
from portfolio_api.core.auth import get_current_admin
from portfolio_api.core.exceptions import handle_database_errors, NotFoundError, ValidationError
from portfolio_api.crud.blog import blog_crud
from portfolio_api.models.base import utcnow
from portfolio_api.schemas.auth import TokenData, MessageResponse
from portfolio_api.schemas.blog import BlogCreate, BlogUpdate, BlogResponse
from portfolio_api.services.upload_storage_service import upload_storage_service, BLOG_IMAGES

router = APIRouter()


def parse_tags(raw: Optional[str]) -> Optional[List[str]]:
    """Tags arrive as a JSON array string inside the multipart form"""
    if raw is None or raw == "":
        return None
    try:
        tags = json.loads(raw)
    except json.JSONDecodeError:
        raise ValidationError("tags must be a JSON array of strings")
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ValidationError("tags must be a JSON array of strings")
    return tags


@router.get("", response_model=List[BlogResponse])
@handle_database_errors
async def get_blogs(db: AsyncSession = Depends(get_db)):
    """Published blog posts, newest first"""
    return await blog_crud.get_published(db)


@router.get("/admin/all", response_model=List[BlogResponse])
@handle_database_errors
async def get_all_blogs(
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """All blog posts including drafts"""
    return await blog_crud.get_all(db)


@router.get("/{blog_id}", response_model=BlogResponse)
@handle_database_errors
async def get_blog(blog_id: UUID, db: AsyncSession = Depends(get_db)):
    """Get a single blog post"""
    blog = await blog_crud.get(db, id=blog_id, raise_if_not_found=False)
    if not blog:
        raise NotFoundError("Blog")
    return blog


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
@handle_database_errors
async def create_blog(
    title: str = Form(...),
    content: str = Form(...),
    excerpt: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    published: bool = Form(False),
    image: Optional[UploadFile] = FastAPIFile(None),
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Create a blog post with an optional cover image"""
    blog_data = {
        "title": title,
        "content": content,
        "excerpt": excerpt,
        "published": published,
        "tags": parse_tags(tags) or [],
    }
    if category:
        blog_data["category"] = category
    if image is not None and image.filename:
        blog_data["image"] = await upload_storage_service.save(image, BLOG_IMAGES)

    async with upload_storage_service.discard_on_error(blog_data.get("image")):
        return await blog_crud.create(db, obj_in=BlogCreate(**blog_data))


@router.put("/{blog_id}", response_model=BlogResponse)
@handle_database_errors
async def update_blog(
    blog_id: UUID,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    excerpt: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    published: Optional[bool] = Form(None),
    image: Optional[UploadFile] = FastAPIFile(None),
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Update a blog post; the image is replaced only when a new file is sent"""
    blog = await blog_crud.get(db, id=blog_id)

    fields = {
        "title": title,
        "content": content,
        "excerpt": excerpt,
        "category": category,
        "tags": parse_tags(tags),
        "published": published,
    }
    update_data = {k: v for k, v in fields.items() if v is not None}
    if image is not None and image.filename:
        update_data["image"] = await upload_storage_service.save(image, BLOG_IMAGES)

    async with upload_storage_service.discard_on_error(update_data.get("image")):
        blog_update = BlogUpdate(**update_data)
        changes = blog_update.model_dump(exclude_unset=True)
        changes["updated_at"] = utcnow()
        return await blog_crud.update(db, db_obj=blog, obj_in=changes)


@router.delete("/{blog_id}", response_model=MessageResponse)
@handle_database_errors
async def delete_blog(
    blog_id: UUID,
    db: AsyncSession = Depends(get_db),
    current_admin: TokenData = Depends(get_current_admin)
):
    """Delete a blog post"""
    await blog_crud.remove(db, id=blog_id)
    return MessageResponse(message="Blog deleted")
