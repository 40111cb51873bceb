"""
Insight Generator - Qualitative AI readiness enrichment from a generative model.

Every failure (missing key, API error, non-JSON reply, schema mismatch) is
captured in a GenerationResult and replaced with the fallback bundle, so
generate() always returns a valid InsightBundle.
"""

import json
import re
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from pydantic import ValidationError

from ai_ready.config import settings
from ai_ready.logger import logger
from ai_ready.schemas.insight import InsightBundle
from ai_ready.services.insights.fallback import fallback_bundle
from ai_ready.services.insights.gemini_client import GeminiClient, GenerationError
from ai_ready.services.scoring.text_extractor import extract_text


CONTEXT_SIGNALS = ("readability", "heading-structure", "meta-tags")

DIMENSIONS = [
    ("content-quality", "Content Quality for AI",
     "Is the content clear, factual, and valuable for AI training?"),
    ("info-architecture", "Information Architecture",
     "How well organized and categorized is the information?"),
    ("semantic-structure", "Semantic Structure",
     "Does the HTML properly describe content meaning?"),
    ("ai-discovery", "AI Discovery Value",
     "Can AI systems easily understand what this page/site offers?"),
    ("knowledge-extraction", "Knowledge Extraction",
     "Can facts, entities, and relationships be extracted?"),
    ("context-completeness", "Context & Completeness",
     "Is there enough context for AI to understand topics?"),
    ("content-uniqueness", "Content Uniqueness",
     "Is this original content vs duplicated/thin content?"),
    ("machine-interpretability", "Machine Interpretability",
     "How easily can AI parse and understand this?"),
]

CODE_FENCE_RE = re.compile(r'```(?:json)?\n?', re.IGNORECASE)


class InsightProvider(Protocol):
    async def complete(self, prompt: str) -> str: ...


@dataclass
class GenerationResult:
    """Outcome of one generation attempt."""
    success: bool
    bundle: Optional[InsightBundle] = None
    error_type: Optional[str] = None  # generation | parse | validation | exception
    error: Optional[str] = None
    raw_content: str = ""


def _check_field(check, name: str):
    if isinstance(check, dict):
        return check.get(name)
    return getattr(check, name, None)


def _format_score(score) -> str:
    if score is None:
        return "n/a"
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


def build_prompt(url: str, html: str, checks: Sequence) -> str:
    """Prompt asking for one JSON object covering the eight dimensions.

    Only the content checks are quoted; entries without an id are skipped.
    """
    page_scores = [
        f"{_check_field(c, 'label') or _check_field(c, 'id')}: {_format_score(_check_field(c, 'score'))}"
        for c in checks
        if _check_field(c, 'id') in CONTEXT_SIGNALS
    ]
    excerpt = extract_text(html or "")[:settings.PROMPT_EXCERPT_CHARS]
    dimensions = "\n".join(
        f"{i}. {label} ({dim_id}) - {question}"
        for i, (dim_id, label, question) in enumerate(DIMENSIONS, start=1)
    )

    return f"""Analyze this webpage for AI readiness. This could be ANY type of site - adapt your analysis accordingly.

URL: {url}
Page-Level Scores: {json.dumps(page_scores, ensure_ascii=False)}

Page text excerpt:
\"\"\"{excerpt}\"\"\"

Analyze these universal AI readiness factors:
{dimensions}

Adapt your analysis to the site type (e-commerce should focus on product data, news on article structure, etc).
Return ONLY one valid JSON object shaped {{"insights": [...], "overallAIReadiness": string, "topPriorities": [string, ...]}}.
Each insight is {{"id", "label", "score" (0-100), "status" ("pass"|"warning"|"fail"), "details", "recommendation", "actionItems"}} where actionItems is an array of exactly 5 specific actions. Use the ids above.
Do not wrap the JSON in markdown code blocks."""


def strip_code_fences(content: str) -> str:
    """Remove ```json / ``` markers the model may add anyway."""
    return CODE_FENCE_RE.sub('', content).strip()


def parse_insights(content: str) -> InsightBundle:
    """Strict JSON parse plus schema validation.

    Raises:
        json.JSONDecodeError: not JSON
        pydantic.ValidationError: JSON of the wrong shape
    """
    data = json.loads(strip_code_fences(content))
    return InsightBundle.model_validate(data)


class InsightGenerator:
    """Builds the prompt, calls the provider and guarantees a valid bundle."""

    def __init__(self, provider: InsightProvider = None):
        self.provider = provider or GeminiClient()

    async def try_generate(self, url: str, html: str, checks: Sequence) -> GenerationResult:
        """One attempt, no retries; failures come back as data."""
        content = ""
        try:
            prompt = build_prompt(url, html, checks)
            content = await self.provider.complete(prompt)
            bundle = parse_insights(content)
            return GenerationResult(success=True, bundle=bundle, raw_content=content)
        except GenerationError as e:
            return GenerationResult(success=False, error_type="generation", error=str(e))
        except json.JSONDecodeError as e:
            return GenerationResult(success=False, error_type="parse", error=str(e), raw_content=content)
        except ValidationError as e:
            return GenerationResult(success=False, error_type="validation", error=str(e), raw_content=content)
        except Exception as e:
            return GenerationResult(success=False, error_type="exception", error=str(e), raw_content=content)

    async def generate(self, url: str, html: str, checks: Sequence) -> InsightBundle:
        """Insights for the page, or the fallback bundle on any failure."""
        result = await self.try_generate(url, html, checks)
        if result.success and result.bundle is not None:
            logger.info(f"Generated {len(result.bundle.insights)} insights for {url}")
            return result.bundle

        logger.warning(f"Insight generation failed for {url} ({result.error_type}): {result.error}")
        if result.raw_content:
            logger.debug(f"Raw model content: {result.raw_content[:500]}")
        return fallback_bundle(url or "https://example.com")
