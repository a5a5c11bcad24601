"""
Link preview - Open Graph image lookup for LinkedIn URLs.

Only LinkedIn hosts are ever fetched. Every failure resolves to None.
"""
import logging
import re
from typing import Optional
from urllib.parse import urlparse

import httpx

from founderflow.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

SCAN_LIMIT = 1_000_000
MAX_REDIRECTS = 5

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

OG_IMAGE_PATTERNS = [
    re.compile(r"""<meta[^>]*property=["']og:image["'][^>]*content=["']([^"']+)["'][^>]*>""", re.IGNORECASE),
    re.compile(r"""<meta[^>]*content=["']([^"']+)["'][^>]*property=["']og:image["'][^>]*>""", re.IGNORECASE),
    re.compile(r"""<meta[^>]*name=["']og:image["'][^>]*content=["']([^"']+)["'][^>]*>""", re.IGNORECASE),
]


def is_linkedin_host(host: str) -> bool:
    host = host.lower()
    return host == "linkedin.com" or host.endswith(".linkedin.com")


def extract_og_image(html: str) -> Optional[str]:
    """First og:image content in the first SCAN_LIMIT characters."""
    sample = html[:SCAN_LIMIT]
    for pattern in OG_IMAGE_PATTERNS:
        match = pattern.search(sample)
        if match and match.group(1):
            return match.group(1)
    return None


def parse_preview_url(target: Optional[str]) -> str:
    """Validate the query parameter. Raises ValidationError on bad input."""
    if not target:
        raise ValidationError("Missing url param")
    try:
        parsed = urlparse(target)
        hostname = parsed.hostname
    except ValueError:
        raise ValidationError("Invalid url")
    if not parsed.scheme or not parsed.netloc or not hostname:
        raise ValidationError("Invalid url")
    return target


class LinkPreviewService:
    """Fetches LinkedIn pages and pulls their preview image."""

    def __init__(self, http_client: httpx.AsyncClient, timeout: float = 10.0):
        self.http_client = http_client
        self.timeout = timeout

    async def resolve_preview_image(self, url: str) -> Optional[str]:
        """
        Redirects are followed by hand so every hop stays on a LinkedIn host.
        """
        if not is_linkedin_host(urlparse(url).hostname or ""):
            return None

        try:
            next_url = httpx.URL(url)
            for _ in range(MAX_REDIRECTS + 1):
                response = await self.http_client.get(
                    next_url,
                    headers=BROWSER_HEADERS,
                    timeout=self.timeout,
                    follow_redirects=False,
                )
                if not response.has_redirect_location:
                    break
                next_url = response.url.join(response.headers["Location"])
                if not is_linkedin_host(next_url.host):
                    logger.info(f"Link preview for {url} redirected off LinkedIn to {next_url.host}")
                    return None
            else:
                logger.info(f"Link preview for {url} exceeded {MAX_REDIRECTS} redirects")
                return None
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.info(f"Link preview fetch failed for {url}: {e}")
            return None

        if not response.is_success:
            return None

        return extract_og_image(response.text)
