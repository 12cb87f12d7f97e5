from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import update
from .base import CRUDBase
from portfolio_api.models.quote import Quote
from portfolio_api.schemas.quote import QuoteCreate, QuoteUpdate, QuoteCounter
from portfolio_api.core.exceptions import NotFoundError
from uuid import UUID
import logging

logger = logging.getLogger(__name__)

class CRUDQuote(CRUDBase[Quote, QuoteCreate, QuoteUpdate]):
    async def get_public(self, db: AsyncSession) -> List[Quote]:
        """Active quotes ordered for display"""
        return await self.get_all(
            db, filters={"active": True}, order_by=(("order", False), ("created_at", True))
        )

    async def increment(self, db: AsyncSession, *, id: UUID, counter: QuoteCounter) -> Quote:
        """Add exactly one to a quote's likes or shares counter"""
        column = getattr(self.model, counter.value)
        result = await db.execute(
            update(self.model).where(self.model.id == id).values({column: column + 1})
        )
        rows_affected = result.rowcount
        await db.commit()

        if rows_affected == 0:
            raise NotFoundError("Quote")

        db_obj = await self.get(db, id=id)
        await db.refresh(db_obj)
        logger.info(f"💬 Quote {id} {counter.value} -> {getattr(db_obj, counter.value)}")
        return db_obj

quote_crud = CRUDQuote(Quote)
