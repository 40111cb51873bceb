"""Tests for page fetching and the readiness pipeline."""

from unittest.mock import patch

import pytest

from ai_ready.config import settings
from ai_ready.errors import InvalidURLError, UpstreamFetchError
from ai_ready.services.firecrawl_adapter import FirecrawlAdapter
from ai_ready.services.page_fetcher import PageData, PageFetcher
from ai_ready.services.readiness_runner import ReadinessRunner, normalize_url
from ai_ready.services.scoring.weights import SIGNAL_ORDER
from ai_ready.services.ssrf_protection import SSRFProtection

SITEMAP_XML = '<?xml version="1.0"?><urlset><url><loc>https://example.com/</loc></url></urlset>'


class FakePageFetcher:
    """Returns a fixed PageData for any URL."""

    def __init__(self, page: PageData):
        self.page = page
        self.urls: list[str] = []

    async def fetch(self, url: str) -> PageData:
        self.urls.append(url)
        return self.page


class FakeFirecrawl:
    """Canned Firecrawl adapter result."""

    def __init__(self, result: dict):
        self.result = result
        self.calls = 0

    async def scrape(self, url: str) -> dict:
        self.calls += 1
        return self.result


@pytest.fixture
def allow_all_hosts(monkeypatch):
    monkeypatch.setattr(SSRFProtection, "validate_url", staticmethod(lambda url, resolve=True: (True, "")))


class TestNormalizeUrl:
    """Tests for normalize_url."""

    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_required(self, url) -> None:
        with pytest.raises(InvalidURLError) as exc_info:
            normalize_url(url)
        assert exc_info.value.message == "URL is required"
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize("url", ["https://", "http://exa mple.com", "https://example.com:abc"])
    def test_invalid(self, url: str) -> None:
        with pytest.raises(InvalidURLError) as exc_info:
            normalize_url(url)
        assert exc_info.value.message == "Invalid URL format"

    def test_adds_scheme(self) -> None:
        assert normalize_url(" example.com/docs ") == "https://example.com/docs"
        assert normalize_url("http://example.com") == "http://example.com"


class TestSSRFProtection:
    """Tests for SSRFProtection without DNS resolution."""

    @pytest.mark.parametrize(
        "url",
        ["http://localhost/", "http://127.0.0.1/", "http://10.1.2.3/", "http://192.168.0.1/", "ftp://example.com/"],
    )
    def test_blocked(self, url: str) -> None:
        is_safe, reason = SSRFProtection.validate_url(url, resolve=False)
        assert is_safe is False
        assert reason

    def test_public_host(self) -> None:
        assert SSRFProtection.validate_url("https://example.com/", resolve=False) == (True, "")


class TestFirecrawlAdapter:
    """Tests for FirecrawlAdapter against a mocked SDK."""

    @pytest.mark.asyncio
    async def test_no_api_key(self) -> None:
        result = await FirecrawlAdapter(api_key="").scrape("https://example.com/llms.txt", formats=["markdown"])
        assert result["success"] is False
        assert result["error"] == "firecrawl_no_api_key"
        assert result["markdown"] == ""

    @pytest.mark.asyncio
    async def test_requested_formats_passed_through(self) -> None:
        with patch("ai_ready.services.firecrawl_adapter.Firecrawl") as firecrawl_cls:
            firecrawl_cls.return_value.scrape.return_value = {"markdown": "# Docs", "metadata": {"title": "Docs"}}
            result = await FirecrawlAdapter(api_key="key").scrape("https://example.com/llms.txt", formats=["markdown"])

        firecrawl_cls.return_value.scrape.assert_called_once_with("https://example.com/llms.txt", formats=["markdown"])
        assert result["success"] is True
        assert result["markdown"] == "# Docs"
        assert result["metadata"]["title"] == "Docs"

    @pytest.mark.asyncio
    async def test_sdk_error(self) -> None:
        with patch("ai_ready.services.firecrawl_adapter.Firecrawl") as firecrawl_cls:
            firecrawl_cls.return_value.scrape.side_effect = RuntimeError("402 Payment Required")
            result = await FirecrawlAdapter(api_key="key").scrape("https://example.com/")

        assert result["success"] is False
        assert "402" in result["error"]


class TestPageFetcher:
    """Tests for PageFetcher."""

    @pytest.mark.asyncio
    async def test_direct_http(self, transport_factory, sample_html: str, allow_all_hosts) -> None:
        firecrawl = FakeFirecrawl({"success": False, "error": "unused"})
        transport = transport_factory({"https://example.com/": (200, sample_html)})
        page = await PageFetcher(firecrawl=firecrawl, transport=transport).fetch("https://example.com/")
        assert page.is_success
        assert page.fetch_method == "http"
        assert page.metadata["title"] == "Example Docs"
        assert firecrawl.calls == 0

    @pytest.mark.asyncio
    async def test_falls_back_to_firecrawl(self, transport_factory, sample_html: str, allow_all_hosts) -> None:
        firecrawl = FakeFirecrawl({"success": True, "html": sample_html, "metadata": {"title": "Rendered"}})
        transport = transport_factory({"https://example.com/": (403, "Forbidden")})
        page = await PageFetcher(firecrawl=firecrawl, transport=transport).fetch("https://example.com/")
        assert page.fetch_method == "firecrawl"
        assert page.metadata == {"title": "Rendered"}
        assert firecrawl.calls == 1

    @pytest.mark.asyncio
    async def test_thin_html_kept_when_firecrawl_fails(self, transport_factory, allow_all_hosts) -> None:
        firecrawl = FakeFirecrawl({"success": False, "error": "firecrawl_no_api_key"})
        transport = transport_factory({"https://example.com/": (200, "<html><h1>Tiny</h1></html>")})
        page = await PageFetcher(firecrawl=firecrawl, transport=transport).fetch("https://example.com/")
        assert page.is_success
        assert page.html == "<html><h1>Tiny</h1></html>"
        assert firecrawl.calls == 1

    @pytest.mark.asyncio
    async def test_both_fail(self, transport_factory, allow_all_hosts) -> None:
        firecrawl = FakeFirecrawl({"success": False, "error": "firecrawl_no_api_key"})
        transport = transport_factory({})
        page = await PageFetcher(firecrawl=firecrawl, transport=transport).fetch("https://example.com/")
        assert page.is_success is False
        assert page.error == "firecrawl_no_api_key"

    @pytest.mark.asyncio
    async def test_blocked_host(self) -> None:
        firecrawl = FakeFirecrawl({"success": True, "html": "<html></html>"})
        page = await PageFetcher(firecrawl=firecrawl).fetch("http://127.0.0.1/admin")
        assert page.error.startswith("URL blocked")
        assert firecrawl.calls == 0


class TestReadinessRunner:
    """Tests for ReadinessRunner.run."""

    @pytest.mark.asyncio
    async def test_full_report(self, transport_factory, sample_html: str) -> None:
        page = PageData(url="https://example.com", final_url="https://example.com", html=sample_html,
                        metadata={"title": "Example Docs", "description": "Docs"})
        transport = transport_factory({
            "https://example.com/robots.txt": (200, "User-agent: *\nSitemap: https://example.com/sitemap.xml"),
            "https://example.com/sitemap.xml": (200, SITEMAP_XML),
        })
        runner = ReadinessRunner(page_fetcher=FakePageFetcher(page), transport=transport)

        report = await runner.run("example.com")

        assert report.source_url == "https://example.com"
        assert tuple(s.id for s in report.signals) == SIGNAL_ORDER
        assert report.signal("llms-txt").score == 0
        assert report.signal("robots-txt").score == 100
        assert report.signal("sitemap").details == "Valid XML sitemap found (referenced in robots.txt)"
        assert report.reputation_bonus == 0
        assert report.overall_score == runner.scoring_engine.aggregate(list(report.signals), 0)
        assert report.metadata.title == "Example Docs"
        assert report.html_content == sample_html[:settings.HTML_PREVIEW_CHARS]

    @pytest.mark.asyncio
    async def test_reputation_bonus_applied(self, transport_factory, sample_html: str) -> None:
        page = PageData(url="https://docs.example.com", final_url="https://docs.example.com", html=sample_html)
        runner = ReadinessRunner(page_fetcher=FakePageFetcher(page), transport=transport_factory({}))

        report = await runner.run("https://docs.example.com")

        assert report.reputation_bonus == 20
        base = runner.scoring_engine.aggregate(list(report.signals), 0)
        assert report.overall_score == min(100, base + 20)

    @pytest.mark.asyncio
    async def test_html_truncated(self, transport_factory) -> None:
        html = "<html><body>" + "<p>Words here.</p>" * 2000 + "</body></html>"
        page = PageData(url="https://example.com", final_url="https://example.com", html=html)
        runner = ReadinessRunner(page_fetcher=FakePageFetcher(page), transport=transport_factory({}))

        report = await runner.run("https://example.com")

        assert len(report.html_content) == settings.HTML_PREVIEW_CHARS

    @pytest.mark.asyncio
    async def test_fetch_error(self) -> None:
        page = PageData(url="https://example.com", final_url="https://example.com", error="HTTP 500")
        runner = ReadinessRunner(page_fetcher=FakePageFetcher(page))

        with pytest.raises(UpstreamFetchError) as exc_info:
            await runner.run("https://example.com")
        assert exc_info.value.message == "Failed to scrape website. Please check the URL."
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_empty_html(self) -> None:
        page = PageData(url="https://example.com", final_url="https://example.com", html="")
        runner = ReadinessRunner(page_fetcher=FakePageFetcher(page))

        with pytest.raises(UpstreamFetchError, match="Failed to extract content from website"):
            await runner.run("https://example.com")

    @pytest.mark.asyncio
    async def test_invalid_url_never_fetches(self) -> None:
        fetcher = FakePageFetcher(PageData(url="", final_url=""))
        runner = ReadinessRunner(page_fetcher=fetcher)

        with pytest.raises(InvalidURLError):
            await runner.run("")
        assert fetcher.urls == []
