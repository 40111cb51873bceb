"""
Firecrawl Adapter - Isolated adapter for the Firecrawl scrape API.

Handles:
- JS-heavy pages the direct fetch cannot render
- Bot walls that block plain HTTP clients
- Normalizing SDK result objects into {html, markdown, metadata}
"""

import asyncio
from typing import Sequence

from firecrawl import Firecrawl

from ai_ready.config import settings
from ai_ready.logger import logger


class FirecrawlAdapter:
    """Adapter for Firecrawl API with error handling."""

    def __init__(self, api_key: str = None, timeout: int = None):
        self.api_key = settings.FIRECRAWL_API_KEY if api_key is None else api_key
        self.timeout = settings.FIRECRAWL_TIMEOUT if timeout is None else timeout

    async def scrape(self, url: str, formats: Sequence[str] = ("html",)) -> dict:
        """Scrape a page through Firecrawl.

        Args:
            url: URL to scrape
            formats: Firecrawl output formats ("html", "markdown")

        Returns:
            Dict with success, html, markdown, metadata (title/description) and error
        """
        if not self.api_key:
            logger.warning("Firecrawl API key not configured")
            return {"success": False, "html": "", "markdown": "", "metadata": {}, "error": "firecrawl_no_api_key"}

        try:
            app = Firecrawl(api_key=self.api_key)
            result = await asyncio.wait_for(
                asyncio.to_thread(app.scrape, url, formats=list(formats)),
                timeout=self.timeout
            )
        except asyncio.TimeoutError:
            logger.warning(f"Firecrawl timeout for {url} after {self.timeout}s")
            return {"success": False, "html": "", "markdown": "", "metadata": {}, "error": "firecrawl_timeout"}
        except Exception as e:
            logger.error(f"Firecrawl API error for {url}: {e}")
            return {"success": False, "html": "", "markdown": "", "metadata": {}, "error": str(e)}

        data = self._normalize(result)
        html = data.get("html") or data.get("rawHtml") or data.get("raw_html") or data.get("content") or ""
        markdown = data.get("markdown") or ""
        metadata = self._normalize_metadata(data.get("metadata") or {})

        logger.info(f"Firecrawl successful for {url} (Length: {len(html or markdown)})")
        return {"success": True, "html": html, "markdown": markdown, "metadata": metadata, "error": None}

    def _normalize(self, result) -> dict:
        """SDK versions return dicts, {data: ...} wrappers or pydantic models."""
        data = {}
        if isinstance(result, dict):
            data = result.get('data', result)
        elif hasattr(result, "model_dump"):
            data = result.model_dump()
        elif hasattr(result, "__dict__"):
            data = result.__dict__

        if not isinstance(data, dict):
            data = {}
        return data

    def _normalize_metadata(self, metadata) -> dict:
        if hasattr(metadata, "model_dump"):
            metadata = metadata.model_dump()
        if not isinstance(metadata, dict):
            return {}
        return {
            "title": metadata.get("title") or metadata.get("og_title") or metadata.get("ogTitle"),
            "description": metadata.get("description") or metadata.get("og_description") or metadata.get("ogDescription"),
            "ogTitle": metadata.get("og_title") or metadata.get("ogTitle"),
            "ogDescription": metadata.get("og_description") or metadata.get("ogDescription"),
            "language": metadata.get("language"),
        }
