"""Shared async repository utilities for SQLAlchemy models."""

from typing import Generic, TypeVar, Type, Optional, List, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from database import Base

T = TypeVar("T", bound=Base)  # Generic model type constrained to SQLAlchemy Base.

class BaseRepository(Generic[T]):
    """Generic async repository over one whole collection of a model."""

    def __init__(self, session: AsyncSession, model: Type[T]):
        """Store the async DB session and the model class this repository serves."""
        # Session used for all database interactions in this repository instance.
        self.session = session
        # SQLAlchemy model class (not instance) for query construction.
        self.model = model

    async def get_all(self) -> List[T]:
        """Return the full collection in insertion order."""
        # Autoincrement ids follow insertion order.
        stmt = select(self.model).order_by(self.model.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, id: Any) -> Optional[T]:
        """Fetch a single model instance by primary key, if it exists."""
        # `session.get` is optimized for primary-key lookup.
        return await self.session.get(self.model, id)

    async def add(self, record: T) -> T:
        """Insert a new row and return it with its generated id."""
        self.session.add(record)
        await self.session.commit()
        await self.session.refresh(record)
        return record

    async def update(self, id: Any, changes: dict) -> Optional[T]:
        """Apply a partial update to an existing row."""
        record = await self.get_by_id(id)
        if record is None:
            return None
        for field, value in changes.items():
            setattr(record, field, value)
        await self.session.commit()
        await self.session.refresh(record)
        return record

    async def delete(self, id: Any) -> bool:
        """Remove a row by primary key; False when it does not exist."""
        record = await self.get_by_id(id)
        if record is None:
            return False
        await self.session.delete(record)
        await self.session.commit()
        return True

    async def replace_all(self, records: List[T]) -> None:
        """Replace the whole collection with `records` (last write wins)."""
        await self.session.execute(delete(self.model))
        self.session.add_all(records)
        await self.session.commit()
