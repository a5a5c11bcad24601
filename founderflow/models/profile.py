from datetime import datetime
from typing import Optional, List

from sqlmodel import SQLModel, Field

from founderflow.core.dates import utcnow
from founderflow.models.types import UTCDateTime
from sqlalchemy import Column, JSON, Text


class UserProfile(SQLModel, table=True):
    """
    Job seeker profile used as the sender's background in generated messages.
    Keyed by the auth provider's user id.
    """
    __tablename__ = "user_profile"

    user_id: str = Field(primary_key=True)

    # Resume: plain text, or a base64 PDF handed to the model as-is
    resume_text: Optional[str] = Field(default=None, sa_column=Column(Text))
    resume_pdf_base64: Optional[str] = Field(default=None, sa_column=Column(Text))

    name: str = ""
    title: str = ""
    goals: str = ""
    skills: List[str] = Field(default=[], sa_column=Column(JSON))
    experience: str = ""
    projects: str = ""

    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)

    @property
    def has_resume(self) -> bool:
        return bool(self.resume_text) or bool(self.resume_pdf_base64)
