"""
Base repository with generic CRUD operations.
"""
from typing import TypeVar, Generic, Type, Optional, List, Any

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.core.dates import utcnow

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository with CRUD operations.
    Inherit and specify the model class.
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    async def create(self, obj_in: dict) -> ModelType:
        """Create a new record."""
        db_obj = self.model(**obj_in)
        self.session.add(db_obj)
        await self.session.commit()
        await self.session.refresh(db_obj)
        return db_obj

    async def get(self, id: Any) -> Optional[ModelType]:
        """Get a record by primary key."""
        return await self.session.get(self.model, id)

    async def list(
        self,
        filters: Optional[dict] = None,
        order_by: str = "created_at",
        order_desc: bool = True,
        limit: Optional[int] = None
    ) -> List[ModelType]:
        """List records with optional equality filters."""
        query = select(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field) and value is not None:
                    query = query.where(getattr(self.model, field) == value)

        if hasattr(self.model, order_by):
            order_column = getattr(self.model, order_by)
            query = query.order_by(order_column.desc() if order_desc else order_column)

        if limit is not None:
            query = query.limit(limit)

        result = await self.session.exec(query)
        return result.all()

    async def upsert(self, id: Any, obj_in: dict) -> ModelType:
        """
        Merge fields into an existing record, or create it.
        None values are written, so callers can clear fields.
        """
        db_obj = await self.get(id)
        if db_obj is None:
            pk = self.model.__table__.primary_key.columns.keys()[0]
            db_obj = self.model(**{pk: id, **obj_in})
        else:
            for field, value in obj_in.items():
                if hasattr(db_obj, field):
                    setattr(db_obj, field, value)
            if hasattr(db_obj, "updated_at"):
                db_obj.updated_at = utcnow()

        self.session.add(db_obj)
        await self.session.commit()
        await self.session.refresh(db_obj)
        return db_obj

    async def delete(self, id: Any) -> bool:
        """Delete a record. False if it does not exist."""
        db_obj = await self.get(id)
        if not db_obj:
            return False

        await self.session.delete(db_obj)
        await self.session.commit()
        return True
