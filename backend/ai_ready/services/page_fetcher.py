"""
Page Fetcher - Fetch a page's HTML and metadata with HTTP → Firecrawl fallback.

Architecture:
1. SSRF protection check
2. Direct HTTP fetch (metadata read with BeautifulSoup)
3. Firecrawl fallback when the direct fetch fails, is blocked or too thin
"""

import asyncio
from typing import Optional
from dataclasses import dataclass, field

import httpx

from ai_ready.config import settings
from ai_ready.logger import logger
from ai_ready.services.collectors.meta_collector import MetaCollector
from ai_ready.services.firecrawl_adapter import FirecrawlAdapter
from ai_ready.services.ssrf_protection import SSRFProtection

USER_AGENT = "Mozilla/5.0 (compatible; AIReadinessScanner/1.0)"
MIN_HTML_LENGTH = 500
BLOCK_MARKERS = ['captcha', 'recaptcha', 'cloudflare']


@dataclass
class PageData:
    """Fetched page data container."""
    url: str
    final_url: str
    html: str = ""
    metadata: dict = field(default_factory=dict)
    status_code: Optional[int] = None
    fetch_method: str = "unknown"  # 'http' | 'firecrawl'
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.error is None and bool(self.html)


class PageFetcher:
    """Fetches pages with HTTP → Firecrawl fallback."""

    def __init__(self, firecrawl: FirecrawlAdapter = None, transport: httpx.AsyncBaseTransport = None):
        self.http_timeout = settings.HTTP_TIMEOUT
        self.max_redirects = settings.HTTP_MAX_REDIRECTS
        self.firecrawl = firecrawl or FirecrawlAdapter()
        self.meta_collector = MetaCollector()
        self.transport = transport

    async def fetch(self, url: str) -> PageData:
        """Fetch page HTML and title/description.

        Args:
            url: Absolute, already normalized URL

        Returns:
            PageData; `error` is set when no usable HTML was obtained
        """
        is_safe, reason = await asyncio.to_thread(SSRFProtection.validate_url, url)
        if not is_safe:
            logger.warning(f"SSRF protection blocked {url}: {reason}")
            return PageData(url=url, final_url=url, error=f"URL blocked: {reason}")

        page = await self._fetch_http(url)
        if page.is_success and len(page.html) >= MIN_HTML_LENGTH:
            return page

        logger.info(f"HTTP fetch insufficient for {url} ({page.error or 'thin content'}), falling back to Firecrawl")
        firecrawl_page = await self._fetch_firecrawl(url)
        if firecrawl_page.is_success:
            return firecrawl_page

        # Keep whatever the direct fetch got over nothing at all
        if page.html:
            return PageData(
                url=url, final_url=page.final_url, html=page.html,
                metadata=page.metadata, status_code=page.status_code,
                fetch_method="http"
            )
        return firecrawl_page

    async def _fetch_http(self, url: str) -> PageData:
        """Fetch page using direct HTTP."""
        try:
            async with httpx.AsyncClient(
                follow_redirects=True,
                max_redirects=self.max_redirects,
                timeout=self.http_timeout,
                transport=self.transport
            ) as client:
                response = await client.get(
                    url,
                    headers={
                        "User-Agent": USER_AGENT,
                        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                    }
                )
        except httpx.TimeoutException:
            return PageData(url=url, final_url=url, fetch_method="http", error="HTTP timeout")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"HTTP error for {url}: {e}")
            return PageData(url=url, final_url=url, fetch_method="http", error=str(e))

        final_url = str(response.url)
        if response.status_code != 200:
            return PageData(
                url=url, final_url=final_url, status_code=response.status_code,
                fetch_method="http", error=f"HTTP {response.status_code}"
            )

        html = response.text
        lower = html.lower()
        if any(marker in lower for marker in BLOCK_MARKERS) and len(html) < 5000:
            return PageData(
                url=url, final_url=final_url, status_code=200,
                fetch_method="http", error="Blocked by bot protection"
            )

        return PageData(
            url=url,
            final_url=final_url,
            html=html,
            metadata=self.meta_collector.collect(html).to_dict(),
            status_code=200,
            fetch_method="http",
        )

    async def _fetch_firecrawl(self, url: str) -> PageData:
        """Fetch page using Firecrawl (headless browser)."""
        result = await self.firecrawl.scrape(url)
        if not result.get("success"):
            return PageData(url=url, final_url=url, fetch_method="firecrawl", error=result.get("error") or "firecrawl_failed")

        html = result.get("html", "")
        if not html:
            return PageData(url=url, final_url=url, fetch_method="firecrawl", error="Empty content")

        return PageData(
            url=url,
            final_url=url,
            html=html,
            metadata=result.get("metadata") or {},
            status_code=200,
            fetch_method="firecrawl",
        )
