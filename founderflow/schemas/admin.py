"""
Admin schemas - entry maintenance and review.
"""
from datetime import datetime
from typing import Optional, List, Union
from pydantic import BaseModel

from founderflow.schemas.common import CamelModel


class EntryItem(BaseModel):
    """Entry as shown in admin tables. Missing fields are empty strings."""
    id: str
    name: str = ""
    company: str = ""
    role: str = ""
    company_info: str = ""
    published: str = "Unknown"
    linkedinurl: str = ""
    email: str = ""
    company_url: str = ""
    apply_url: str = ""
    url: str = ""
    looking_for: str = ""


class FilterStats(CamelModel):
    """Data quality counters over a list of entries."""
    total: int = 0
    without_email: int = 0
    without_linked_in: int = 0
    without_company_url: int = 0
    invalid_names: int = 0
    invalid_companies: int = 0
    invalid_roles: int = 0


class CollectionEstimate(CamelModel):
    """Bounded estimate of the entry collection size."""
    success: bool = True
    estimated_count: Union[int, str]  # exact count, or "1000+"
    has_entries: bool
    sample_size: int


class ClearEntriesRequest(CamelModel):
    """Batch delete request."""
    batch_size: Optional[int] = 100

    class Config:
        json_schema_extra = {"example": {"batchSize": 100}}


class BatchDeleteResponse(CamelModel):
    """Result of one atomic batch delete."""
    success: bool = True
    message: str
    deleted_count: int
    has_more_entries: bool
    batch_size: int


class DataManagementResponse(CamelModel):
    success: bool = True
    entries: List[EntryItem]
    stats: FilterStats


class LinkedInPostsResponse(CamelModel):
    success: bool = True
    entries: List[EntryItem]


class DeleteSelectedRequest(CamelModel):
    """Selective delete request. Validated by the service, not here."""
    entry_ids: Optional[List[str]] = None

    class Config:
        json_schema_extra = {"example": {"entryIds": ["a1b2", "c3d4"]}}


class DeleteSelectedResponse(CamelModel):
    """Per-id delete outcome. errors is left out when empty."""
    success: bool = True
    message: str
    deleted_count: int
    requested_count: int
    errors: Optional[List[str]] = None


class GrantProRequest(CamelModel):
    target_user_id: Optional[str] = None
    duration_days: int = 365


class GrantedSubscription(CamelModel):
    user_id: str
    status: str
    expires_at: datetime
    granted_by: str


class GrantProResponse(CamelModel):
    success: bool = True
    message: str
    subscription: GrantedSubscription
