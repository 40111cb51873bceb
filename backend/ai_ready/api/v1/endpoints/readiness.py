"""
AI readiness API endpoints.
"""
import httpx
from fastapi import APIRouter, HTTPException

from ai_ready.api.deps import FirecrawlDep, LlmsCollectorDep, RunnerDep
from ai_ready.errors import ReadinessError
from ai_ready.logger import logger
from ai_ready.schemas.readiness_request import LlmsCheckRequest, ReadinessRequest
from ai_ready.schemas.readiness_result import (
    FirecrawlCheck,
    LlmsCheckResult,
    LlmsVariantCheck,
    ReadinessResult,
)
from ai_ready.services.collectors.file_prober import get_origin
from ai_ready.services.readiness_runner import normalize_url

router = APIRouter(tags=["Readiness"])


@router.post("/ai-readiness", response_model=ReadinessResult)
async def analyze(request: ReadinessRequest, runner: RunnerDep):
    """Run the heuristic AI readiness analysis for one URL."""
    try:
        report = await runner.run(request.url)
    except ReadinessError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.exception(f"AI readiness analysis error: {e}")
        raise HTTPException(status_code=500, detail="Failed to analyze website")

    return ReadinessResult.from_report(report)


@router.post("/check-llms", response_model=LlmsCheckResult)
async def check_llms(request: LlmsCheckRequest, collector: LlmsCollectorDep, firecrawl: FirecrawlDep):
    """Diagnose every llms.txt variant of the URL's origin, then ask Firecrawl for /llms.txt."""
    try:
        origin = get_origin(normalize_url(request.url))
    except ReadinessError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    async with httpx.AsyncClient(follow_redirects=True, timeout=10.0) as client:
        checks = await collector.diagnose(client, origin)

    scrape = await firecrawl.scrape(f"{origin}/llms.txt", formats=["markdown"])

    return LlmsCheckResult(
        url=origin,
        checks=[LlmsVariantCheck(**check) for check in checks],
        firecrawl_result=FirecrawlCheck.from_scrape(scrape),
    )
