"""
Subscription service - paid status and manual plan changes.

Paid status has exactly one definition, Subscription.is_paid(): status
active/trialing and an expiry in the future. Every endpoint goes through it.
"""
import logging
from datetime import timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta
from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.core.dates import utcnow
from founderflow.models.subscription import Subscription
from founderflow.repositories.subscription_repo import SubscriptionRepository

logger = logging.getLogger(__name__)

DEFAULT_PLAN = "pro"
GRANTED_PLAN = "monthly"


def status_payload(subscription: Optional[Subscription]) -> dict:
    if subscription is None:
        return {"is_paid": False, "plan": None, "expires_at": None}
    return {
        "is_paid": subscription.is_paid(utcnow()),
        "plan": subscription.plan,
        "expires_at": subscription.expires_at,
    }


class SubscriptionService:
    """Service for subscription operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.subscription_repo = SubscriptionRepository(session)

    async def get_status(self, user_id: str) -> dict:
        """{"is_paid", "plan", "expires_at"}; no record means not paid."""
        return status_payload(await self.subscription_repo.get(user_id))

    async def activate(self, user_id: str, plan: Optional[str] = None, duration_months: int = 1) -> dict:
        """Start or extend a plan for `duration_months` calendar months from now."""
        expires_at = utcnow() + relativedelta(months=duration_months)
        subscription = await self.subscription_repo.upsert(user_id, {
            "plan": plan or DEFAULT_PLAN,
            "status": "active",
            "expires_at": expires_at,
        })
        logger.info(f"Activated {subscription.plan} for {user_id} until {expires_at}")
        return status_payload(subscription)

    async def cancel(self, user_id: str) -> dict:
        """Expire the subscription immediately."""
        await self.subscription_repo.upsert(user_id, {
            "plan": None,
            "status": "canceled",
            "expires_at": utcnow(),
        })
        logger.info(f"Canceled subscription for {user_id}")
        return {"is_paid": False, "plan": None, "expires_at": None}

    async def grant(self, target_user_id: str, granted_by: str, duration_days: int = 365) -> Subscription:
        """Admin override: paid access for `duration_days`."""
        expires_at = utcnow() + timedelta(days=duration_days)
        subscription = await self.subscription_repo.upsert(target_user_id, {
            "plan": GRANTED_PLAN,
            "status": "active",
            "expires_at": expires_at,
            "granted_by": granted_by,
        })
        logger.info(f"Admin {granted_by} granted Pro access to {target_user_id} until {expires_at}")
        return subscription

    async def debug_view(self, user_id: str) -> dict:
        """Raw record plus each part of the paid-status predicate."""
        subscription = await self.subscription_repo.get(user_id)
        if subscription is None:
            return {"message": "No subscription document found", "userId": user_id}

        now = utcnow()
        return {
            "rawData": subscription.model_dump(mode="json"),
            "processed": {
                "expiresAt": subscription.expires_at.isoformat() if subscription.expires_at else None,
                "isActive": subscription.is_active(),
                "isNotExpired": subscription.is_not_expired(now),
                "isPaid": subscription.is_paid(now),
                "status": subscription.status,
                "plan": subscription.plan,
            },
            "timestamps": {
                "expiresAt": subscription.expires_at.isoformat() if subscription.expires_at else None,
                "currentTime": now.isoformat(),
            },
        }
