"""
LLMs.txt Collector - Probe llms.txt variants for AI usage guidelines.
"""
import httpx
from typing import Optional
from urllib.parse import urljoin

from ai_ready.logger import logger
from ai_ready.services.collectors.probe import ProbeMode, first_valid
from ai_ready.services.scoring.models import ProbeFinding

# Priority order
LLMS_VARIANTS = ['llms.txt', 'LLMs.txt', 'llms-full.txt']

HTML_MARKERS = ['<!DOCTYPE', '<html', '<HTML']
NOT_FOUND_PHRASES = ['404 not found', 'page not found', 'cannot be found']
MIN_LENGTH = 10


def is_valid_llms_txt(content: str) -> bool:
    """Reject tiny bodies, HTML pages and soft-404 text served with 200."""
    if len(content) <= MIN_LENGTH:
        return False
    if any(marker in content for marker in HTML_MARKERS):
        return False
    lower = content.lower()
    return not any(phrase in lower for phrase in NOT_FOUND_PHRASES)


def not_found_finding() -> ProbeFinding:
    return ProbeFinding(
        id="llms-txt",
        label="LLMs.txt",
        score=0,
        thresholds=(80, 40),
        details="No llms.txt file found",
        recommendation="Add an llms.txt file to define AI usage permissions",
    )


class LlmsTxtCollector:
    """Probes llms.txt variants concurrently."""

    def candidate_urls(self, origin: str) -> list[str]:
        return [urljoin(origin, f"/{name}") for name in LLMS_VARIANTS]

    async def probe(self, client: httpx.AsyncClient, origin: str, timeout: Optional[float] = None) -> ProbeFinding:
        """First valid variant in priority order wins; no partial credit."""
        candidates = self.candidate_urls(origin)
        hit = await first_valid(client, candidates, is_valid_llms_txt, ProbeMode.CONCURRENT, timeout)

        if hit is None:
            logger.debug(f"No valid llms.txt variant at {origin}")
            return not_found_finding()

        filename = LLMS_VARIANTS[candidates.index(hit.url)]
        logger.info(f"Found {filename} at {origin}")
        return ProbeFinding(
            id="llms-txt",
            label="LLMs.txt",
            score=100,
            thresholds=(80, 40),
            details=f"{filename} file found with AI usage guidelines",
            recommendation="Great! You have defined AI usage permissions",
            source_url=hit.url,
        )

    async def diagnose(self, client: httpx.AsyncClient, origin: str) -> list[dict]:
        """Raw per-variant diagnostics, fetched one at a time."""
        results = []
        for filename in LLMS_VARIANTS:
            url = urljoin(origin, f"/{filename}")
            try:
                response = await client.get(url)
                text = response.text
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                results.append({"filename": filename, "error": str(e)})
                continue

            lower = text.lower()
            results.append({
                "filename": filename,
                "fetch_status": response.status_code,
                "fetch_ok": response.is_success,
                "content_length": len(text),
                "is_html": '<!DOCTYPE' in text or '<html' in text,
                "has_404": '404' in text or 'Not Found' in text,
                "has_llm_content": (
                    any(word in lower for word in ('llm', 'ai', 'documentation', 'api'))
                    or '#' in text
                    or 'http' in text
                ),
                "is_valid": response.is_success and is_valid_llms_txt(text),
                "first_100_chars": text[:100],
            })
        return results
