"""
Robots.txt Collector - Fetch robots.txt and read its sitemap directives.
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urljoin

import httpx

from ai_ready.logger import logger
from ai_ready.services.collectors.probe import fetch_text
from ai_ready.services.scoring.models import ProbeFinding

SITEMAP_DIRECTIVE_RE = re.compile(r'^\s*sitemap:\s*(.+)$', re.IGNORECASE | re.MULTILINE)

USER_AGENT_POINTS = 60
SITEMAP_POINTS = 40


@dataclass
class RobotsData:
    """Parsed robots.txt data."""
    exists: bool = False
    content: str = ""
    has_user_agent: bool = False
    sitemaps: List[str] = field(default_factory=list)


def not_found_finding() -> ProbeFinding:
    return ProbeFinding(
        id="robots-txt",
        label="Robots.txt",
        score=0,
        thresholds=(80, 40),
        details="No robots.txt file found",
        recommendation="Create a robots.txt file with AI crawler directives",
    )


class RobotsCollector:
    """Fetches and parses robots.txt."""

    async def fetch(self, client: httpx.AsyncClient, origin: str, timeout: Optional[float] = None) -> RobotsData:
        """Fetch robots.txt from the origin."""
        robots_url = urljoin(origin, '/robots.txt')
        content = await fetch_text(client, robots_url, timeout)
        if content is None:
            logger.debug(f"robots.txt not available at {robots_url}")
            return RobotsData(exists=False)
        return self.parse(content, origin)

    def parse(self, content: str, origin: str = "") -> RobotsData:
        """Detect user-agent groups and collect every Sitemap directive in order."""
        data = RobotsData(exists=True, content=content)
        data.has_user_agent = 'user-agent' in content.lower()

        for match in SITEMAP_DIRECTIVE_RE.finditer(content):
            sitemap_url = match.group(1).strip()
            if not sitemap_url:
                continue
            # Handle relative URLs
            if origin and not sitemap_url.lower().startswith(('http://', 'https://')):
                sitemap_url = urljoin(origin, sitemap_url)
            data.sitemaps.append(sitemap_url)

        return data

    def score(self, data: RobotsData, robots_url: Optional[str] = None) -> ProbeFinding:
        """60 for user-agent rules, 40 for at least one sitemap reference."""
        if not data.exists:
            return not_found_finding()

        has_sitemap = bool(data.sitemaps)
        score = (USER_AGENT_POINTS if data.has_user_agent else 0) + (SITEMAP_POINTS if has_sitemap else 0)
        details = "Robots.txt found"
        if has_sitemap:
            details += f" with {len(data.sitemaps)} sitemap reference(s)"

        return ProbeFinding(
            id="robots-txt",
            label="Robots.txt",
            score=score,
            thresholds=(80, 40),
            details=details,
            recommendation="Add sitemap reference to robots.txt" if score < 80 else "Robots.txt properly configured",
            source_url=robots_url or "/robots.txt",
        )

    async def probe(
        self,
        client: httpx.AsyncClient,
        origin: str,
        timeout: Optional[float] = None
    ) -> tuple[ProbeFinding, RobotsData]:
        """Fetch and score; the parsed data feeds the sitemap walk."""
        data = await self.fetch(client, origin, timeout)
        return self.score(data, urljoin(origin, '/robots.txt')), data
