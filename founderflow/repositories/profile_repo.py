from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.models.profile import UserProfile
from founderflow.repositories.base import BaseRepository


class UserProfileRepository(BaseRepository[UserProfile]):
    """Repository for UserProfile, keyed by user id."""

    def __init__(self, session: AsyncSession):
        super().__init__(UserProfile, session)
