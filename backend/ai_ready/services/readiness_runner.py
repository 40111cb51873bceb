"""
Readiness Runner - Main orchestrator for AI readiness analysis.

Coordinates page fetching, page analyzers, auxiliary file probes and scoring.
"""
import time
from datetime import datetime
from typing import Optional
from urllib.parse import urlparse

import httpx

from ai_ready.config import settings
from ai_ready.errors import InvalidURLError, UpstreamFetchError
from ai_ready.logger import logger
from ai_ready.services.collectors.file_prober import AuxiliaryProber
from ai_ready.services.page_fetcher import PageFetcher
from ai_ready.services.scoring.engine import ScoringEngine
from ai_ready.services.scoring.models import AggregateReport, PageMetadata
from ai_ready.services.scoring.reputation import reputation_bonus


def normalize_url(url: Optional[str]) -> str:
    """Add https:// when the scheme is missing and check the result parses.

    Raises:
        InvalidURLError: URL missing or not a usable http(s) URL
    """
    if not url or not url.strip():
        raise InvalidURLError("URL is required")

    url = url.strip()
    if not url.startswith(('http://', 'https://')):
        url = 'https://' + url

    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
        parsed.port  # raises ValueError on a malformed port
    except ValueError:
        raise InvalidURLError("Invalid URL format")

    if not hostname or ' ' in parsed.netloc:
        raise InvalidURLError("Invalid URL format")

    return url


class ReadinessRunner:
    """Orchestrates the complete analysis of one URL."""

    def __init__(
        self,
        page_fetcher: PageFetcher = None,
        prober: AuxiliaryProber = None,
        scoring_engine: ScoringEngine = None,
        transport: httpx.AsyncBaseTransport = None
    ):
        self.page_fetcher = page_fetcher or PageFetcher()
        self.prober = prober or AuxiliaryProber()
        self.scoring_engine = scoring_engine or ScoringEngine()
        self.transport = transport

    async def run(self, url: str) -> AggregateReport:
        """
        Run the heuristic analysis on a URL.

        Args:
            url: URL as submitted (scheme optional)

        Returns:
            AggregateReport with overall score and ordered signals

        Raises:
            InvalidURLError: URL missing or malformed
            UpstreamFetchError: page could not be fetched or had no HTML
        """
        url = normalize_url(url)
        started = time.perf_counter()
        logger.info(f"Starting analysis for {url}")

        # 1. Fetch the page
        page = await self.page_fetcher.fetch(url)
        if page.error:
            logger.error(f"Scrape error for {url}: {page.error}")
            raise UpstreamFetchError()
        if not page.html:
            raise UpstreamFetchError("Failed to extract content from website")

        html = page.html
        metadata = page.metadata or {}

        # 2. Page analyzers (pure, synchronous)
        page_signals = self.scoring_engine.analyze_page(html, metadata)

        # 3. Auxiliary files (concurrent, failures degrade per probe)
        async with httpx.AsyncClient(
            follow_redirects=True,
            transport=self.transport,
            headers={"User-Agent": "Mozilla/5.0 (compatible; AIReadinessScanner/1.0)"}
        ) as client:
            probes = await self.prober.probe_all(client, url)

        # 4. Score
        signals = self.scoring_engine.order_signals(probes.as_list() + page_signals)
        bonus = reputation_bonus(urlparse(url).hostname or "")
        overall = self.scoring_engine.aggregate(signals, bonus)

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.info(f"Total analysis time for {url}: {elapsed_ms}ms (overall={overall}, bonus={bonus})")

        return AggregateReport(
            source_url=url,
            overall_score=overall,
            signals=tuple(signals),
            metadata=PageMetadata(
                title=metadata.get("title"),
                description=metadata.get("description"),
                analyzed_at=datetime.utcnow(),
            ),
            html_content=html[:settings.HTML_PREVIEW_CHARS],
            reputation_bonus=bonus,
        )
