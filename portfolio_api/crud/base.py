from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar, Union, Tuple
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_
from portfolio_api.models.base import Base
from portfolio_api.core.exceptions import NotFoundError

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

# (field, descending) pairs applied in sequence
OrderSpec = Sequence[Tuple[str, bool]]

class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    default_order: OrderSpec = (("created_at", True),)

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any, *, raise_if_not_found: bool = True) -> Optional[ModelType]:
        """Get a single record by ID"""
        result = await db.execute(
            select(self.model).where(self.model.id == id)
        )
        obj = result.scalar_one_or_none()

        if raise_if_not_found and obj is None:
            raise NotFoundError(f"{self.model.__name__}")

        return obj

    def _filter_conditions(self, filters: Optional[Dict[str, Any]]) -> list:
        conditions = []
        for field, value in (filters or {}).items():
            if not hasattr(self.model, field):
                raise ValueError(f"Field '{field}' does not exist on model {self.model.__name__}")
            column = getattr(self.model, field)
            if isinstance(value, (list, tuple)):
                conditions.append(column.in_(value))
            else:
                conditions.append(column == value)
        return conditions

    def _order_clauses(self, order_by: Optional[OrderSpec]) -> list:
        clauses = []
        for field, desc in (order_by or self.default_order):
            column = getattr(self.model, field)
            clauses.append(column.desc() if desc else column.asc())
        return clauses

    async def get_all(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[OrderSpec] = None,
        limit: Optional[int] = None
    ) -> List[ModelType]:
        """Get every matching record in display order"""
        query = select(self.model)

        conditions = self._filter_conditions(filters)
        if conditions:
            query = query.where(and_(*conditions))

        query = query.order_by(*self._order_clauses(order_by))
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """Create a new record"""
        # model_dump() keeps Python types (datetime, list) intact
        obj_in_data = obj_in.model_dump(exclude_unset=True)

        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """Update a record"""
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def remove(self, db: AsyncSession, *, id: Any, raise_if_not_found: bool = True) -> bool:
        """Hard delete a record by ID"""
        result = await db.execute(
            delete(self.model).where(self.model.id == id)
        )
        rows_affected = result.rowcount

        await db.commit()

        if raise_if_not_found and rows_affected == 0:
            raise NotFoundError(f"{self.model.__name__}")

        return rows_affected > 0
