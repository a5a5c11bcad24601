from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.models.subscription import Subscription
from founderflow.repositories.base import BaseRepository


class SubscriptionRepository(BaseRepository[Subscription]):
    """Repository for Subscription, keyed by user id."""

    def __init__(self, session: AsyncSession):
        super().__init__(Subscription, session)
