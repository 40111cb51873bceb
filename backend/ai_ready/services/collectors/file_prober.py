"""
Auxiliary File Prober - robots.txt, llms.txt and sitemap.xml for one origin.

robots.txt and the llms.txt variants start together; the sitemap walk starts
as soon as robots.txt is parsed and runs alongside the llms.txt probes.
"""
import asyncio
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

import httpx

from ai_ready.config import settings
from ai_ready.logger import logger
from ai_ready.services.collectors.llms_txt_collector import LlmsTxtCollector
from ai_ready.services.collectors.robots_collector import RobotsCollector
from ai_ready.services.collectors.sitemap_collector import SitemapCollector
from ai_ready.services.scoring.models import ProbeFinding


@dataclass(frozen=True)
class ProbeResults:
    """Findings for the three auxiliary resources."""
    llms: ProbeFinding
    robots: ProbeFinding
    sitemap: ProbeFinding

    def as_list(self) -> list[ProbeFinding]:
        return [self.llms, self.robots, self.sitemap]


def get_origin(url: str) -> str:
    """Extract base URL (scheme + host)."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


class AuxiliaryProber:
    """Runs the three probe families against an origin."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = settings.PROBE_TIMEOUT if timeout is None else timeout
        self.robots_collector = RobotsCollector()
        self.llms_txt_collector = LlmsTxtCollector()
        self.sitemap_collector = SitemapCollector()

    async def probe_all(self, client: httpx.AsyncClient, url: str) -> ProbeResults:
        """Probe robots, llms and sitemap; individual failures degrade to "not found"."""
        origin = get_origin(url)

        async def robots_then_sitemap() -> tuple[ProbeFinding, ProbeFinding]:
            robots_finding, robots_data = await self.robots_collector.probe(client, origin, self.timeout)
            sitemap_finding = await self.sitemap_collector.probe(
                client, origin, robots_data.sitemaps, self.timeout
            )
            return robots_finding, sitemap_finding

        llms_task = asyncio.create_task(self.llms_txt_collector.probe(client, origin, self.timeout))
        robots_sitemap_task = asyncio.create_task(robots_then_sitemap())

        llms_finding = await llms_task
        robots_finding, sitemap_finding = await robots_sitemap_task

        logger.info(
            f"Probes for {origin}: llms={llms_finding.score}, "
            f"robots={robots_finding.score}, sitemap={sitemap_finding.score}"
        )
        return ProbeResults(llms=llms_finding, robots=robots_finding, sitemap=sitemap_finding)
