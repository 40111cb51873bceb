"""
Pydantic schemas for analysis requests.
"""

from typing import Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ReadinessRequest(BaseModel):
    """Request to analyze a URL."""
    # Optional so a missing URL gets the pipeline's own 400 message
    url: Optional[str] = Field(None, description="URL to analyze (scheme optional)")

    class Config:
        json_schema_extra = {
            "example": {
                "url": "example.com"
            }
        }


class CheckItem(BaseModel):
    """Signal as sent back by the client for enrichment context."""
    # Lenient: malformed entries are skipped by the prompt builder, never rejected
    id: Optional[str] = None
    label: Optional[str] = None
    score: Optional[float] = None

    class Config:
        extra = "ignore"


class InsightRequest(BaseModel):
    """Request for the qualitative enrichment."""
    url: Optional[str] = None
    html_content: Optional[str] = None
    current_checks: list[CheckItem] = Field(default_factory=list)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "url": "https://example.com",
                "htmlContent": "<html>...</html>",
                "currentChecks": [{"id": "readability", "label": "Content Readability", "score": 80}]
            }
        }


class LlmsCheckRequest(BaseModel):
    """Request to diagnose llms.txt variants."""
    url: Optional[str] = None
