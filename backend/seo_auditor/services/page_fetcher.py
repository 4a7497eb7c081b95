"""
Page Fetcher - Retrieve the audited page and optional site files.

Architecture:
1. URL normalization (bare host -> https://)
2. Primary fetch: any HTTP status is a response, transport errors are fatal
3. Optional fetch: robots.txt / sitemap.xml fetches that never raise
"""

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlparse

import httpx

from seo_auditor.config import settings
from seo_auditor.exceptions import FetchFailure
from seo_auditor.logger import logger


@dataclass
class PageData:
    """Fetched page data container."""
    url: str
    final_url: str
    status_code: int
    text: str = ""
    headers: httpx.Headers = field(default_factory=httpx.Headers)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 400


class PageFetcher:
    """HTTP client wrapper for audit inputs."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.http_timeout = settings.HTTP_TIMEOUT
        self.optional_timeout = settings.OPTIONAL_FETCH_TIMEOUT
        self.max_redirects = settings.HTTP_MAX_REDIRECTS
        self.transport = transport

    @staticmethod
    def normalize_url(url: str) -> str:
        """Add https:// to a bare host; leave explicit schemes alone."""
        url = url.strip()
        if not url.startswith(("http://", "https://")):
            url = "https://" + url
        return url

    @staticmethod
    def base_url(url: str) -> str:
        """Scheme + host of a URL."""
        parsed = urlparse(url)
        return f"{parsed.scheme}://{parsed.netloc}"

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            follow_redirects=True,
            max_redirects=self.max_redirects,
            timeout=timeout,
            headers={"User-Agent": settings.USER_AGENT},
            transport=self.transport
        )

    async def fetch(self, url: str) -> PageData:
        """Fetch the primary page.

        Args:
            url: Absolute URL to fetch

        Returns:
            PageData for whatever status the server answered with

        Raises:
            FetchFailure: The server could not be reached
        """
        try:
            async with self._client(self.http_timeout) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Primary fetch failed for {url}: {e}")
            raise FetchFailure(url, str(e) or e.__class__.__name__) from e

        logger.info(f"Fetched {url} -> {response.status_code} ({len(response.text)} chars)")
        return PageData(
            url=url,
            final_url=str(response.url),
            status_code=response.status_code,
            text=response.text,
            headers=response.headers
        )

    async def fetch_optional(self, url: str) -> Optional[str]:
        """Fetch an auxiliary file; None when it is absent or unreachable."""
        try:
            async with self._client(self.optional_timeout) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"Optional resource {url} unavailable: {e}")
            return None

        if response.status_code >= 400:
            logger.debug(f"Optional resource {url} returned {response.status_code}")
            return None

        return response.text
