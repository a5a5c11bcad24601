"""
Best-effort context scraping for outreach generation.

Both lookups go through a text-rendering proxy (r.jina.ai) and are optional:
any failure is logged and the message is generated without that context.
"""
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from founderflow.core.url_validation import is_valid_actionable_url

logger = logging.getLogger(__name__)

COMPANY_INFO_LIMIT = 2000
LINKEDIN_INFO_LIMIT = 1500


class EnrichmentService:
    """Scrapes the company site and a LinkedIn-scoped web search."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        proxy_url: str = "https://r.jina.ai/",
        timeout: float = 5.0
    ):
        self.http_client = http_client
        self.proxy_url = proxy_url if proxy_url.endswith("/") else proxy_url + "/"
        self.timeout = timeout

    async def _fetch_text(self, target: str) -> Optional[str]:
        """Fetch a text rendering of `target`. None on any failure."""
        try:
            response = await self.http_client.get(
                f"{self.proxy_url}{target}",
                headers={"Accept": "text/plain"},
                timeout=self.timeout,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Enrichment fetch failed for {target}: {e}")
            return None

        if not response.is_success:
            logger.warning(f"Enrichment fetch for {target} returned {response.status_code}")
            return None
        return response.text

    async def scrape_company_site(self, company_url: str) -> Optional[str]:
        content = await self._fetch_text(company_url)
        if content is None:
            return None
        logger.info(f"Company info scraped, length: {len(content)}")
        return content[:COMPANY_INFO_LIMIT]

    async def search_linkedin(self, name: str, company: str) -> Optional[str]:
        query = quote(f"site:linkedin.com/in {name} {company}", safe="")
        content = await self._fetch_text(f"www.google.com/search?q={query}")
        if content is None:
            return None
        logger.info(f"LinkedIn search info scraped, length: {len(content)}")
        return content[:LINKEDIN_INFO_LIMIT]

    async def enrich(self, job_data: dict) -> dict:
        """
        Run both lookups in sequence.

        Returns:
            {"company_site_info": str | None, "linkedin_search_info": str | None}
        """
        enriched = {"company_site_info": None, "linkedin_search_info": None}

        company_url = (job_data.get("company_url") or "").strip()
        if company_url and is_valid_actionable_url(company_url, context="company_url"):
            logger.info(f"Scraping company website: {company_url}")
            enriched["company_site_info"] = await self.scrape_company_site(company_url)

        if (job_data.get("linkedinurl") or "").strip():
            logger.info(f"Searching for LinkedIn profile: {job_data.get('linkedinurl')}")
            enriched["linkedin_search_info"] = await self.search_linkedin(
                job_data.get("name") or "",
                job_data.get("company") or ""
            )

        return enriched
