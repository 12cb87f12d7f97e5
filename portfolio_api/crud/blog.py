from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from .base import CRUDBase
from portfolio_api.models.blog import Blog
from portfolio_api.schemas.blog import BlogCreate, BlogUpdate

class CRUDBlog(CRUDBase[Blog, BlogCreate, BlogUpdate]):
    async def get_published(self, db: AsyncSession) -> List[Blog]:
        """Published posts, newest first"""
        return await self.get_all(db, filters={"published": True})

blog_crud = CRUDBlog(Blog)
