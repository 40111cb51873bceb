"""
Meta Collector - Extract page title and description from HTML.

Used when the page was fetched directly (no Firecrawl metadata available).
"""
from dataclasses import dataclass
from typing import Optional
from bs4 import BeautifulSoup

from ai_ready.logger import logger


@dataclass
class MetaData:
    """Title/description captured for a page."""
    title: Optional[str] = None
    description: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    lang: Optional[str] = None

    def to_dict(self) -> dict:
        """Same keys the Firecrawl metadata uses."""
        return {
            "title": self.title or self.og_title,
            "description": self.description or self.og_description,
            "ogTitle": self.og_title,
            "ogDescription": self.og_description,
            "language": self.lang,
        }


class MetaCollector:
    """Collects metadata from HTML content."""

    def collect(self, html: str) -> MetaData:
        """Extract metadata from HTML."""
        try:
            soup = BeautifulSoup(html, 'html.parser')
            data = MetaData()

            # Title
            title_tag = soup.find('title')
            if title_tag:
                data.title = title_tag.get_text(strip=True) or None

            # Meta description
            desc_tag = soup.find('meta', attrs={'name': 'description'})
            if desc_tag:
                data.description = (desc_tag.get('content') or '').strip() or None

            # OpenGraph
            og_title = soup.find('meta', attrs={'property': 'og:title'})
            if og_title:
                data.og_title = (og_title.get('content') or '').strip() or None
            og_desc = soup.find('meta', attrs={'property': 'og:description'})
            if og_desc:
                data.og_description = (og_desc.get('content') or '').strip() or None

            # HTML lang
            html_tag = soup.find('html')
            if html_tag:
                data.lang = html_tag.get('lang') or None

            return data

        except Exception as e:
            logger.error(f"MetaCollector error: {e}")
            return MetaData()
