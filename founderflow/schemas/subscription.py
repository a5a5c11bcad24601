"""
Subscription schemas.
"""
from datetime import datetime
from typing import Optional

from founderflow.schemas.common import CamelModel


class SubscriptionStatus(CamelModel):
    success: Optional[bool] = None
    is_paid: bool
    plan: Optional[str] = None
    expires_at: Optional[datetime] = None


class SubscriptionUpdate(CamelModel):
    """Create or extend a subscription (test and manual flows)."""
    plan: Optional[str] = None
    duration_months: int = 1
