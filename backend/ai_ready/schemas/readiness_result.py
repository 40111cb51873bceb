"""
Pydantic schemas for analysis responses.
"""

from datetime import datetime
from typing import Optional, Literal
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from ai_ready.schemas.insight import Insight
from ai_ready.services.scoring.models import AggregateReport, ProbeFinding


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CheckResult(CamelModel):
    """Individual signal."""
    id: str
    label: str
    status: Literal["pass", "warning", "fail"]
    score: int = Field(..., ge=0, le=100)
    details: str
    recommendation: str
    source_url: Optional[str] = None


class ReportMetadata(CamelModel):
    """Page metadata captured during the fetch."""
    title: Optional[str] = None
    description: Optional[str] = None
    analyzed_at: datetime


class ReadinessResult(CamelModel):
    """Complete heuristic analysis response."""
    success: bool = True
    url: str
    overall_score: int = Field(..., ge=0, le=100)
    checks: list[CheckResult] = []
    html_content: str = ""
    metadata: ReportMetadata
    reputation_bonus: int = 0

    @classmethod
    def from_report(cls, report: AggregateReport) -> "ReadinessResult":
        return cls(
            url=report.source_url,
            overall_score=report.overall_score,
            checks=[
                CheckResult(
                    id=s.id,
                    label=s.label,
                    status=s.status,
                    score=s.score,
                    details=s.details,
                    recommendation=s.recommendation,
                    source_url=s.source_url if isinstance(s, ProbeFinding) else None,
                )
                for s in report.signals
            ],
            html_content=report.html_content,
            reputation_bonus=report.reputation_bonus,
            metadata=ReportMetadata(
                title=report.metadata.title,
                description=report.metadata.description,
                analyzed_at=report.metadata.analyzed_at,
            ),
        )


class InsightResult(CamelModel):
    """Enrichment response; success is always true."""
    success: bool = True
    insights: list[Insight] = []
    overall_ai_readiness: str = Field("", alias="overallAIReadiness")
    top_priorities: list[str] = []


class LlmsVariantCheck(CamelModel):
    """Diagnostics for one llms.txt variant."""
    filename: str
    fetch_status: Optional[int] = None
    fetch_ok: Optional[bool] = None
    content_length: Optional[int] = None
    is_html: Optional[bool] = None
    has_404: Optional[bool] = None
    has_llm_content: Optional[bool] = None
    is_valid: Optional[bool] = None
    first_100_chars: Optional[str] = Field(None, alias="first100Chars")
    error: Optional[str] = None


class FirecrawlCheck(CamelModel):
    """Firecrawl's view of /llms.txt (markdown scrape)."""
    success: bool
    has_content: Optional[bool] = None
    content_length: Optional[int] = None
    first_100_chars: Optional[str] = Field(None, alias="first100Chars")
    error: Optional[str] = None

    @classmethod
    def from_scrape(cls, result: dict) -> "FirecrawlCheck":
        if not result.get("success"):
            return cls(success=False, error=result.get("error") or "firecrawl_failed")
        markdown = result.get("markdown") or ""
        return cls(
            success=True,
            has_content=bool(markdown),
            content_length=len(markdown),
            first_100_chars=markdown[:100],
        )


class LlmsCheckResult(CamelModel):
    """Diagnostics for all variants of an origin."""
    url: str
    checks: list[LlmsVariantCheck] = []
    firecrawl_result: Optional[FirecrawlCheck] = None
