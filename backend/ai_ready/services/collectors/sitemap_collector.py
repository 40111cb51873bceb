"""
Sitemap Collector - Locate a valid XML sitemap.

Checks:
- Sitemap URLs declared in robots.txt (in order)
- Common sitemap locations
Candidates are tried one at a time and the walk stops at the first valid one.
"""

import httpx
from typing import Optional, Sequence
from urllib.parse import urljoin

from ai_ready.logger import logger
from ai_ready.services.collectors.probe import ProbeMode, first_valid
from ai_ready.services.scoring.models import ProbeFinding


COMMON_PATHS = [
    "/sitemap.xml",
    "/sitemap_index.xml",
    "/sitemap-index.xml",
    "/sitemaps/sitemap.xml",
    "/sitemap/sitemap.xml",
]

SITEMAP_MARKERS = ['<?xml', '<urlset', '<sitemapindex', '<url>', '<sitemap>']

# Upper bound on sequential fetches per analysis
MAX_SITEMAP_CANDIDATES = 6


def is_valid_sitemap(content: str) -> bool:
    """XML/sitemap marker present and not an HTML page."""
    return any(marker in content for marker in SITEMAP_MARKERS) and '<!DOCTYPE html' not in content


def not_found_finding() -> ProbeFinding:
    return ProbeFinding(
        id="sitemap",
        label="Sitemap",
        score=0,
        thresholds=(80, 40),
        details="No sitemap.xml found",
        recommendation="Generate and submit an XML sitemap",
    )


class SitemapCollector:
    """Collector for sitemap.xml."""

    def candidate_urls(self, origin: str, robots_sitemaps: Sequence[str] = ()) -> list[str]:
        """robots.txt sitemaps first, then common paths, without duplicates.

        At most MAX_SITEMAP_CANDIDATES are returned, so a robots.txt listing
        many sitemaps can push the common paths out of the walk.
        """
        candidates: list[str] = []
        for url in list(robots_sitemaps) + [urljoin(origin, path) for path in COMMON_PATHS]:
            if url not in candidates:
                candidates.append(url)
        return candidates[:MAX_SITEMAP_CANDIDATES]

    async def probe(
        self,
        client: httpx.AsyncClient,
        origin: str,
        robots_sitemaps: Sequence[str] = (),
        timeout: Optional[float] = None
    ) -> ProbeFinding:
        """Walk candidates sequentially.

        Args:
            client: Shared HTTP client for this analysis
            origin: scheme://host of the analyzed page
            robots_sitemaps: Sitemap directives from robots.txt

        Returns:
            ProbeFinding noting whether the hit came from robots.txt
        """
        candidates = self.candidate_urls(origin, robots_sitemaps)
        hit = await first_valid(client, candidates, is_valid_sitemap, ProbeMode.SEQUENTIAL, timeout)

        if hit is None:
            logger.debug(f"No sitemap found after {len(candidates)} candidates for {origin}")
            return not_found_finding()

        from_robots = hit.url in robots_sitemaps
        if from_robots:
            details = "Valid XML sitemap found (referenced in robots.txt)"
        else:
            details = f"Valid XML sitemap found at {hit.url.replace(origin, '', 1)}"

        return ProbeFinding(
            id="sitemap",
            label="Sitemap",
            score=100,
            thresholds=(80, 40),
            details=details,
            recommendation="Sitemap is properly configured",
            source_url=hit.url,
            from_robots=from_robots,
        )
