"""
Generative insight API endpoint.
"""
from fastapi import APIRouter, HTTPException

from ai_ready.api.deps import InsightGeneratorDep
from ai_ready.schemas.readiness_request import InsightRequest
from ai_ready.schemas.readiness_result import InsightResult

router = APIRouter(tags=["Insights"])


@router.post("/ai-analysis", response_model=InsightResult)
async def analyze_insights(request: InsightRequest, generator: InsightGeneratorDep):
    """Qualitative enrichment; reports success even when the fallback is used."""
    if not request.url or not request.html_content:
        raise HTTPException(status_code=400, detail="URL and HTML content are required")

    bundle = await generator.generate(request.url, request.html_content, request.current_checks)

    return InsightResult(
        insights=bundle.insights,
        overall_ai_readiness=bundle.overall_ai_readiness,
        top_priorities=bundle.top_priorities,
    )
