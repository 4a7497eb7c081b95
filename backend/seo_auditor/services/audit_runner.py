"""
Audit Runner - Main orchestrator for checklist audits.

Coordinates page fetching, auxiliary fetches and scoring.
"""
import asyncio
from typing import Optional

from seo_auditor.exceptions import FetchFailure
from seo_auditor.logger import logger
from seo_auditor.services.checklist_store import Checklist, get_checklist
from seo_auditor.services.evaluators.base import Artifacts
from seo_auditor.services.page_fetcher import PageFetcher
from seo_auditor.services.scoring.engine import ScoringEngine
from seo_auditor.schemas.audit_result import AuditResult


class AuditRunner:
    """Orchestrates the complete audit process."""

    def __init__(
        self,
        fetcher: Optional[PageFetcher] = None,
        checklist: Optional[Checklist] = None,
        scoring_engine: Optional[ScoringEngine] = None
    ):
        self.page_fetcher = fetcher or PageFetcher()
        self.checklist = checklist
        self.scoring_engine = scoring_engine or ScoringEngine()

    async def run(self, url: str) -> AuditResult:
        """
        Run a complete audit on a URL.

        Args:
            url: The URL or bare host to audit

        Returns:
            AuditResult built from freshly fetched artifacts

        Raises:
            FetchFailure: The page itself could not be fetched
        """
        url = self.page_fetcher.normalize_url(url)
        base_url = self.page_fetcher.base_url(url)
        logger.info(f"Starting audit for {url}")

        # Auxiliary files run alongside the page fetch; optional fetches never raise
        optional = [
            asyncio.create_task(self.page_fetcher.fetch_optional(f"{base_url}/robots.txt")),
            asyncio.create_task(self.page_fetcher.fetch_optional(f"{base_url}/sitemap.xml")),
        ]
        try:
            page = await self.page_fetcher.fetch(url)
        except (FetchFailure, asyncio.CancelledError):
            for task in optional:
                task.cancel()
            await asyncio.gather(*optional, return_exceptions=True)
            raise

        robots_txt, sitemap_xml = await asyncio.gather(*optional)

        if not page.is_success:
            logger.warning(f"{url} answered {page.status_code}, auditing the returned page")

        artifacts = Artifacts(
            url=url,
            html=page.text,
            headers=page.headers,
            robots_txt=robots_txt,
            sitemap_xml=sitemap_xml
        )

        checklist = self.checklist if self.checklist is not None else get_checklist()
        return self.scoring_engine.aggregate(artifacts, checklist)


async def audit(url: str) -> AuditResult:
    """Audit a URL with the default fetcher, checklist and evaluators."""
    return await AuditRunner().run(url)
