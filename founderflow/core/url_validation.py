"""
URL validation for scraped lead data.
Filters out links that are placeholders, scraping errors or point at
sites that never describe the lead's own company.
"""
import logging
from typing import Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

BLOCKED_PATTERNS = [
    # Email providers
    "gmail.com", "yahoo.com", "outlook.com", "hotmail.com", "aol.com",
    "protonmail.com", "mail.com", "icloud.com",
    # Search engines
    "google.com", "bing.com", "duckduckgo.com", "search.yahoo.com", "ask.com", "baidu.com",
    # Social media
    "facebook.com", "twitter.com", "instagram.com", "tiktok.com", "linkedin.com/feed",
    "youtube.com", "snapchat.com", "discord.com",
    # Placeholders
    "example.com", "localhost", "test.com", "placeholder.com", "127.0.0.1", "0.0.0.0",
    # Job boards that link back to themselves
    "indeed.com/viewjob", "glassdoor.com/job", "monster.com", "careerbuilder.com",
    # News and blogs
    "techcrunch.com", "bloomberg.com", "reuters.com", "cnn.com", "bbc.com",
    "medium.com", "substack.com",
    # File sharing
    "dropbox.com", "drive.google.com", "onedrive.com", "icloud.com/share",
    # Hobby hosting
    "github.io", "netlify.app", "vercel.app", "herokuapp.com", "replit.com",
]

PLACEHOLDER_VALUES = {
    "", "n/a", "na", "null", "undefined", "none", "tbd", "coming soon", "not available",
}


def is_valid_actionable_url(url: Optional[str], context: str = "unknown") -> bool:
    """
    True if the URL is worth showing or fetching.

    Args:
        url: Raw value from a lead record
        context: Field name, only used in debug logs
    """
    if not url:
        return False

    normalized = url.strip().lower()

    if (
        normalized in PLACEHOLDER_VALUES
        or normalized.startswith(("javascript:", "mailto:", "tel:", "data:", "about:"))
        or normalized == "#"
        or "void(0)" in normalized
        or len(normalized) < 4
    ):
        logger.debug(f"[{context}] blocked placeholder url: {url}")
        return False

    # Scraping errors sometimes glue an email address into the URL
    if "@" in normalized.split("?")[0]:
        logger.debug(f"[{context}] blocked url with @ in path: {url}")
        return False

    if not normalized.startswith("http"):
        normalized = "https://" + normalized

    try:
        parsed = urlparse(normalized)
        hostname = (parsed.hostname or "").lower()
    except ValueError:
        logger.debug(f"[{context}] unparseable url: {url}")
        return False

    if not hostname:
        return False

    full_path = hostname + parsed.path
    for pattern in BLOCKED_PATTERNS:
        if pattern in hostname or pattern in full_path:
            logger.debug(f"[{context}] blocked {url} (pattern {pattern})")
            return False

    return True
