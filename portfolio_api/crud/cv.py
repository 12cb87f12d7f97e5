from typing import Dict, List, Optional
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, text
from .base import CRUDBase
from portfolio_api.models.cv import CV
from portfolio_api.schemas.cv import CVCreate, CVUpdate
from portfolio_api.core.exceptions import NotFoundError
from uuid import UUID
import asyncio
import logging
import weakref

logger = logging.getLogger(__name__)

# asyncio.Lock binds to the loop it first waits on, so locks are kept per loop
_handoff_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, Dict[str, asyncio.Lock]]" = weakref.WeakKeyDictionary()

def _collection_lock(table_name: str) -> asyncio.Lock:
    loop = asyncio.get_running_loop()
    locks = _handoff_locks.setdefault(loop, {})
    return locks.setdefault(table_name, asyncio.Lock())


class CRUDCV(CRUDBase[CV, CVCreate, CVUpdate]):
    """
    Versioned CV register holding at most one active record.

    Every handoff of the active flag (upload or activate) clears all flags and
    sets the new one inside a single transaction, serialized per collection.
    """
    default_order = (("uploaded_at", True),)

    @asynccontextmanager
    async def _handoff(self, db: AsyncSession):
        table_name = self.model.__tablename__
        async with _collection_lock(table_name):
            try:
                if db.get_bind().dialect.name == "postgresql":
                    # Serializes writers across worker processes until commit/rollback
                    await db.execute(text(f"LOCK TABLE {table_name} IN SHARE ROW EXCLUSIVE MODE"))
                yield
            except Exception:
                await db.rollback()
                raise

    async def _deactivate_all(self, db: AsyncSession) -> None:
        await db.execute(
            update(self.model).where(self.model.active.is_(True)).values(active=False)
        )

    async def upload(self, db: AsyncSession, *, obj_in: CVCreate) -> CV:
        """Insert a new CV as the only active one"""
        async with self._handoff(db):
            await self._deactivate_all(db)
            db_obj = self.model(**obj_in.model_dump(), active=True)
            db.add(db_obj)
            await db.commit()
        await db.refresh(db_obj)
        logger.info(f"📄 CV {db_obj.id} (v{db_obj.version}) uploaded and activated")
        return db_obj

    async def activate(self, db: AsyncSession, *, id: UUID) -> CV:
        """
        Make the CV with `id` the only active one.

        An unknown id still commits the deactivation, leaving no active CV,
        and then raises NotFoundError.
        """
        async with self._handoff(db):
            await self._deactivate_all(db)
            result = await db.execute(
                update(self.model).where(self.model.id == id).values(active=True)
            )
            activated = result.rowcount
            await db.commit()

        if activated == 0:
            logger.warning(f"⚠️ CV {id} not found on activate; no CV is active now")
            raise NotFoundError("CV")

        db_obj = await self.get(db, id=id)
        await db.refresh(db_obj)
        logger.info(f"📄 CV {id} activated")
        return db_obj

    async def get_active(self, db: AsyncSession, *, raise_if_not_found: bool = True) -> Optional[CV]:
        """Get the most recently uploaded active CV"""
        result = await db.execute(
            select(self.model)
            .where(self.model.active.is_(True))
            .order_by(self.model.uploaded_at.desc())
            .limit(1)
        )
        obj = result.scalars().first()

        if raise_if_not_found and obj is None:
            raise NotFoundError(detail="No CV available")

        return obj

    async def list_all(self, db: AsyncSession) -> List[CV]:
        """All CVs, newest upload first"""
        return await self.get_all(db)

cv_crud = CRUDCV(CV)
