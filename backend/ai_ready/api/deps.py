"""
FastAPI dependencies for dependency injection.

Each request gets fresh instances; nothing is shared between analyses.
"""

from typing import Annotated

from fastapi import Depends

from ai_ready.services.collectors.llms_txt_collector import LlmsTxtCollector
from ai_ready.services.firecrawl_adapter import FirecrawlAdapter
from ai_ready.services.insights.insight_generator import InsightGenerator
from ai_ready.services.readiness_runner import ReadinessRunner


def get_readiness_runner() -> ReadinessRunner:
    return ReadinessRunner()


def get_insight_generator() -> InsightGenerator:
    return InsightGenerator()


def get_llms_collector() -> LlmsTxtCollector:
    return LlmsTxtCollector()


def get_firecrawl_adapter() -> FirecrawlAdapter:
    return FirecrawlAdapter()


RunnerDep = Annotated[ReadinessRunner, Depends(get_readiness_runner)]
InsightGeneratorDep = Annotated[InsightGenerator, Depends(get_insight_generator)]
LlmsCollectorDep = Annotated[LlmsTxtCollector, Depends(get_llms_collector)]
FirecrawlDep = Annotated[FirecrawlAdapter, Depends(get_firecrawl_adapter)]
