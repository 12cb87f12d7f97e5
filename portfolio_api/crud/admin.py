from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from pydantic import BaseModel
from .base import CRUDBase
from portfolio_api.models.admin import Admin


def normalize_email(email: str) -> str:
    """Emails are stored and compared trimmed and lowercased"""
    return email.strip().lower()


class AdminCreate(BaseModel):
    email: str
    password_hash: str

class CRUDAdmin(CRUDBase[Admin, AdminCreate, AdminCreate]):
    async def get_by_email(self, db: AsyncSession, *, email: str) -> Optional[Admin]:
        """Look up the admin account by email, ignoring case"""
        result = await db.execute(
            select(self.model).where(func.lower(self.model.email) == normalize_email(email))
        )
        return result.scalars().first()

admin_crud = CRUDAdmin(Admin)
