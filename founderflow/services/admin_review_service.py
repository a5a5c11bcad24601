"""
Admin review service - entry listing, data quality stats and selective delete.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from founderflow.core.dates import format_published
from founderflow.core.exceptions import ValidationError
from founderflow.models.entry import Entry
from founderflow.repositories.entry_repo import EntryRepository

logger = logging.getLogger(__name__)

REVIEW_LIMIT = 1000
LINKEDIN_POSTS_LIMIT = 500
MAX_SELECTED_DELETE = 100

INVALID_LABELS = {"n/a", "na", "unknown", ""}

ENTRY_TEXT_FIELDS = (
    "name", "company", "role", "company_info", "linkedinurl", "email",
    "company_url", "apply_url", "url", "looking_for",
)


def serialize_entry(entry: Entry) -> dict:
    """Entry as a flat dict with empty strings for missing text and a display date."""
    data = {"id": entry.id}
    for field in ENTRY_TEXT_FIELDS:
        data[field] = getattr(entry, field) or ""
    raw_published = entry.published if entry.published is not None else entry.published_label
    data["published"] = format_published(raw_published)
    return data


def is_missing_contact(value: Optional[str]) -> bool:
    """Empty, blank, or the scraper's literal "N/A"."""
    return not value or value == "N/A" or value.strip() == ""


def is_invalid_label(value: Optional[str]) -> bool:
    """Name/company/role that carries no information."""
    return not value or value.strip().lower() in INVALID_LABELS


def calculate_stats(entries: List[dict]) -> dict:
    """
    Data quality counters. Each counter only looks at its own field.

    Returns:
        {"total", "without_email", "without_linked_in", "without_company_url",
         "invalid_names", "invalid_companies", "invalid_roles"}
    """
    stats = {
        "total": len(entries),
        "without_email": 0,
        "without_linked_in": 0,
        "without_company_url": 0,
        "invalid_names": 0,
        "invalid_companies": 0,
        "invalid_roles": 0,
    }

    for entry in entries:
        if is_missing_contact(entry.get("email")):
            stats["without_email"] += 1
        if is_missing_contact(entry.get("linkedinurl")):
            stats["without_linked_in"] += 1
        if is_missing_contact(entry.get("company_url")):
            stats["without_company_url"] += 1

        if is_invalid_label(entry.get("name")):
            stats["invalid_names"] += 1
        if is_invalid_label(entry.get("company")):
            stats["invalid_companies"] += 1
        if is_invalid_label(entry.get("role")):
            stats["invalid_roles"] += 1

    return stats


class AdminReviewService:
    """Read side of the admin data tools plus non-atomic selective delete."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.entry_repo = EntryRepository(session)

    async def list_entries(self) -> Tuple[List[dict], dict]:
        """Most recent REVIEW_LIMIT entries with their quality stats."""
        entries = [serialize_entry(e) for e in await self.entry_repo.list_recent(REVIEW_LIMIT)]
        stats = calculate_stats(entries)
        logger.info(f"Retrieved {len(entries)} entries for admin review")
        return entries, stats

    async def list_recent_entries(self, limit: int = LINKEDIN_POSTS_LIMIT) -> List[dict]:
        """Recent entries for LinkedIn post drafting."""
        entries = [serialize_entry(e) for e in await self.entry_repo.list_recent(limit)]
        logger.info(f"Retrieved {len(entries)} entries for LinkedIn post generation")
        return entries

    async def delete_selected(self, entry_ids: Optional[List[str]]) -> dict:
        """
        Delete the given ids one by one, each in its own transaction.
        A failed id is recorded in errors and the loop moves on.
        """
        if not entry_ids:
            raise ValidationError("No entry IDs provided")
        if len(entry_ids) > MAX_SELECTED_DELETE:
            raise ValidationError(f"Cannot delete more than {MAX_SELECTED_DELETE} entries at once")

        logger.info(f"Deleting {len(entry_ids)} selected entries")

        deleted_count = 0
        errors: List[str] = []

        for entry_id in entry_ids:
            try:
                if await self.entry_repo.delete(entry_id):
                    deleted_count += 1
                else:
                    errors.append(f"Failed to delete entry {entry_id}: Entry not found")
            except SQLAlchemyError as e:
                await self.session.rollback()
                logger.error(f"Failed to delete entry {entry_id}: {e}")
                errors.append(f"Failed to delete entry {entry_id}: {e}")

        message = f"Successfully deleted {deleted_count} out of {len(entry_ids)} entries"
        logger.info(message)
        if errors:
            logger.warning(f"Errors encountered: {errors}")

        return {
            "message": message,
            "deleted_count": deleted_count,
            "requested_count": len(entry_ids),
            "errors": errors or None,
        }
