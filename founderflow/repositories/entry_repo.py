"""
Entry repository with batch and sampling operations for admin tooling.
"""
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.models.entry import Entry
from founderflow.repositories.base import BaseRepository


class EntryRepository(BaseRepository[Entry]):
    """Repository for Entry operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Entry, session)

    async def sample_ids(self, limit: int) -> List[str]:
        """Read at most `limit` ids, used for cheap size estimates."""
        result = await self.session.exec(select(Entry.id).limit(limit))
        return result.all()

    async def fetch_batch(self, limit: int) -> List[Entry]:
        """Fetch up to `limit` entries in storage order."""
        result = await self.session.exec(select(Entry).limit(limit))
        return result.all()

    async def delete_many(self, entries: List[Entry]) -> int:
        """Delete entries in a single transaction. All or nothing."""
        try:
            for entry in entries:
                await self.session.delete(entry)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return len(entries)

    async def has_any(self) -> bool:
        """One-row check: is the collection non-empty right now?"""
        result = await self.session.exec(select(Entry.id).limit(1))
        return result.first() is not None

    async def list_recent(self, limit: int) -> List[Entry]:
        """Most recently published first, undated rows last."""
        query = (
            select(Entry)
            .order_by(Entry.published.desc().nulls_last(), Entry.created_at.desc())
            .limit(limit)
        )
        result = await self.session.exec(query)
        return result.all()
