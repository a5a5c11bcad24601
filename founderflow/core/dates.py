"""
Date display helpers.
"""
import logging
from datetime import date, datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)

UNKNOWN_DATE = "Unknown"


def format_published(value: Any) -> str:
    """
    Render an entry's publish date for the admin UI.

    Native timestamps become "Jan 5, 2025", strings pass through untouched,
    missing values and failed conversions become "Unknown".
    """
    if value is None or value == "":
        return UNKNOWN_DATE

    if isinstance(value, (datetime, date)):
        try:
            return f"{value:%b} {value.day}, {value.year}"
        except (ValueError, OverflowError) as e:
            logger.warning(f"Failed to convert timestamp to date: {e}")
            return UNKNOWN_DATE

    if isinstance(value, str):
        return value

    return str(value)


def utcnow() -> datetime:
    """Aware UTC now; every stored timestamp is UTC."""
    return datetime.now(timezone.utc)
