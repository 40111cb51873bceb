"""
Pydantic schemas for generative insights.
"""

from typing import Literal
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from ai_ready.services.scoring.models import clamp_score

MAX_ACTION_ITEMS = 5


class Insight(BaseModel):
    """Qualitative assessment of one AI readiness dimension."""
    id: str
    label: str
    score: int
    status: Literal["pass", "warning", "fail"]
    details: str
    recommendation: str
    action_items: list[str] = Field(default_factory=list)

    @field_validator("score", mode="before")
    @classmethod
    def normalize_score(cls, value):
        return clamp_score(float(value))

    @field_validator("action_items")
    @classmethod
    def limit_action_items(cls, value: list[str]) -> list[str]:
        # Extra items are dropped; fewer than five are kept as generated
        return value[:MAX_ACTION_ITEMS]

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class InsightBundle(BaseModel):
    """Complete enrichment payload."""
    insights: list[Insight] = Field(default_factory=list)
    overall_ai_readiness: str = Field("", alias="overallAIReadiness")
    top_priorities: list[str] = Field(default_factory=list)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
