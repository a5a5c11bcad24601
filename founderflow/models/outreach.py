"""
Outreach history - one row per generated (or manually saved) message.
"""
import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from founderflow.core.dates import utcnow
from founderflow.models.types import UTCDateTime


class OutreachRecord(SQLModel, table=True):
    """
    Generated outreach message. Created once, never edited by the API.
    """
    __tablename__ = "outreach_record"

    id: str = Field(default_factory=lambda: uuid.uuid4().hex, primary_key=True)
    owner_user_id: str = Field(index=True)
    contact_id: Optional[str] = Field(default=None, index=True)

    # Target
    founder_name: str = ""
    company: str = ""
    linkedin_url: str = ""
    email: str = ""

    # Message
    message_type: str = Field(index=True)  # email, linkedin
    outreach_type: str = Field(index=True)  # job, collaboration, friendship
    generated_message: str

    # Pipeline stage on the history board
    stage: str = Field(default="sent")

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
    last_interaction_date: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
