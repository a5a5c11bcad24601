"""
Outreach record repository.
"""
from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.models.outreach import OutreachRecord
from founderflow.repositories.base import BaseRepository


class OutreachRecordRepository(BaseRepository[OutreachRecord]):
    """Repository for OutreachRecord operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(OutreachRecord, session)

    async def list_for_owner(self, owner_user_id: str, limit: int = 200) -> List[OutreachRecord]:
        """Newest first."""
        return await self.list(
            filters={"owner_user_id": owner_user_id},
            order_by="created_at",
            limit=limit
        )
