"""
Entry model - a lead scraped from job posts and founder announcements.
Rows are written by the ingestion scraper; this service only reads and deletes them.
"""
import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from founderflow.core.dates import utcnow
from founderflow.models.types import UTCDateTime


class Entry(SQLModel, table=True):
    """
    Lead record. Every text column is optional because the scraper
    leaves fields out whenever the source page lacks them.
    """
    id: str = Field(default_factory=lambda: uuid.uuid4().hex, primary_key=True)

    # Person and company
    name: Optional[str] = Field(default=None, index=True)
    company: Optional[str] = Field(default=None, index=True)
    role: Optional[str] = None
    company_info: Optional[str] = None
    looking_for: Optional[str] = None

    # Contact
    email: Optional[str] = None
    linkedinurl: Optional[str] = None

    # Links
    company_url: Optional[str] = None
    apply_url: Optional[str] = None
    url: Optional[str] = None  # Source post

    # Publish date: parsed timestamp, or the raw label when parsing failed upstream
    published: Optional[datetime] = Field(default=None, index=True, sa_type=UTCDateTime)
    published_label: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
