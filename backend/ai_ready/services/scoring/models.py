"""
Scoring models - Signals produced by analyzers and probes.
"""
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


PASS = "pass"
WARNING = "warning"
FAIL = "fail"


def clamp_score(value: float) -> int:
    """Round half up and clamp to 0-100."""
    return max(0, min(100, round_half_up(value)))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (76.5 -> 77)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Signal:
    """One labeled 0-100 sub-score.

    Status is never stored: it is derived from the score and this signal's
    own (pass_at, warn_at) thresholds.
    """
    id: str
    label: str
    score: int
    details: str
    recommendation: str
    thresholds: Tuple[int, int] = (80, 50)

    def __post_init__(self):
        object.__setattr__(self, "score", clamp_score(self.score))
        if not self.details:
            raise ValueError(f"Signal {self.id} requires details")

    @property
    def status(self) -> str:
        pass_at, warn_at = self.thresholds
        if self.score >= pass_at:
            return PASS
        if self.score >= warn_at:
            return WARNING
        return FAIL

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "status": self.status,
            "score": self.score,
            "details": self.details,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class ProbeFinding(Signal):
    """Signal for robots-txt, sitemap or llms-txt, with the URL that satisfied it."""
    source_url: Optional[str] = None
    from_robots: bool = False

    @property
    def found(self) -> bool:
        return self.source_url is not None

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["sourceUrl"] = self.source_url
        return data


@dataclass(frozen=True)
class PageMetadata:
    """Metadata captured from the page-fetch step."""
    title: Optional[str] = None
    description: Optional[str] = None
    analyzed_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True)
class AggregateReport:
    """Final heuristic report for one URL."""
    source_url: str
    overall_score: int
    signals: Tuple[Signal, ...]
    metadata: PageMetadata
    html_content: str = ""
    reputation_bonus: int = 0

    def signal(self, signal_id: str) -> Optional[Signal]:
        return next((s for s in self.signals if s.id == signal_id), None)
