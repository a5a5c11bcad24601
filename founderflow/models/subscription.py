from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from founderflow.core.dates import utcnow
from founderflow.models.types import UTCDateTime

# Statuses that count as paying, as long as the period has not expired
PAID_STATUSES = ("active", "trialing")


class Subscription(SQLModel, table=True):
    """
    Subscription state per user. Paid status is derived, see is_paid().
    """
    __tablename__ = "user_subscription"

    user_id: str = Field(primary_key=True)
    plan: Optional[str] = None  # pro, monthly, ...
    status: Optional[str] = Field(default=None)  # active, trialing, canceled
    expires_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)

    # Set when an admin grants access by hand
    granted_by: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    def is_active(self) -> bool:
        return self.status in PAID_STATUSES

    def is_not_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or utcnow()
        return self.expires_at is not None and self.expires_at > now

    def is_paid(self, now: Optional[datetime] = None) -> bool:
        return self.is_active() and self.is_not_expired(now)
