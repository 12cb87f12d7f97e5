from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from portfolio_api.core.auth import hash_password, verify_password
from portfolio_api.core.config import settings
from portfolio_api.crud.admin import admin_crud, AdminCreate, normalize_email
from portfolio_api.models.admin import Admin
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class AdminService:
    """Provisioning and credential checks for the single admin account"""

    async def ensure_admin(
        self,
        db: AsyncSession,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Optional[Admin]:
        """
        Create the admin account from configured credentials if none exists yet

        Idempotent: returns the existing admin untouched when one is present,
        including when a concurrent worker created it between check and insert.
        Returns None when no admin exists and no credentials are configured.
        """
        email = email if email is not None else settings.admin_email
        password = password if password is not None else settings.admin_password

        existing = await admin_crud.get_all(db, limit=1)
        if existing:
            return existing[0]

        if not email or not password:
            logger.warning("⚠️ No admin account and ADMIN_EMAIL/ADMIN_PASSWORD not set; login is disabled")
            return None

        email = normalize_email(email)
        try:
            admin = await admin_crud.create(
                db, obj_in=AdminCreate(email=email, password_hash=hash_password(password))
            )
        except IntegrityError:
            await db.rollback()
            existing = await admin_crud.get_all(db, limit=1)
            if not existing:
                raise
            logger.info(f"ℹ️ Admin account for {email} was provisioned concurrently")
            return existing[0]

        logger.info(f"✅ Admin account provisioned for {email}")
        return admin

    async def authenticate(self, db: AsyncSession, email: str, password: str) -> Optional[Admin]:
        """Return the admin if the credentials match, otherwise None"""
        admin = await admin_crud.get_by_email(db, email=email)
        if admin is None or not verify_password(password, admin.password_hash):
            logger.warning(f"⚠️ Failed login attempt for {email}")
            return None
        return admin


admin_service = AdminService()
