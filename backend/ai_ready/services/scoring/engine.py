"""
Scoring Engine - Runs the page analyzers and combines every signal.

Coordinates:
- Content scorers (headings, readability, metadata)
- Markup scorers (semantic HTML, accessibility)
- Weighted overall score with content bonus, floor and reputation bonus
"""

from typing import Callable, Iterable, Optional, Sequence

from ai_ready.services.scoring.content_scorer import (
    score_headings,
    score_metadata,
    score_readability,
)
from ai_ready.services.scoring.markup_scorer import score_accessibility, score_semantic_html
from ai_ready.services.scoring.models import Signal, round_half_up
from ai_ready.services.scoring.text_extractor import extract_text
from ai_ready.services.scoring.weights import (
    ADJUSTMENTS,
    CONTENT_SIGNALS,
    SIGNAL_ORDER,
    SIGNAL_WEIGHTS,
)
from ai_ready.logger import logger


PageAnalyzer = Callable[[str, str, dict], Signal]

# Fixed pipeline of (html, text, metadata) -> Signal
PAGE_ANALYZERS: tuple[PageAnalyzer, ...] = (
    lambda html, text, metadata: score_headings(html),
    lambda html, text, metadata: score_readability(text),
    lambda html, text, metadata: score_metadata(html, metadata),
    lambda html, text, metadata: score_semantic_html(html),
    lambda html, text, metadata: score_accessibility(html),
)


class ScoringEngine:
    """Main scoring orchestrator."""

    def analyze_page(self, html: str, metadata: Optional[dict] = None) -> list[Signal]:
        """Run every page analyzer over the same immutable inputs."""
        text = extract_text(html)
        metadata = metadata or {}
        return [analyzer(html, text, metadata) for analyzer in PAGE_ANALYZERS]

    def order_signals(self, signals: Iterable[Signal]) -> list[Signal]:
        """Return signals in report order; every known signal is required."""
        by_id = {s.id: s for s in signals}
        missing = [sid for sid in SIGNAL_ORDER if sid not in by_id]
        if missing:
            raise ValueError(f"Missing signals for aggregation: {missing}")
        return [by_id[sid] for sid in SIGNAL_ORDER]

    def aggregate(self, signals: Sequence[Signal], reputation_bonus: int = 0) -> int:
        """Overall 0-100 score.

        Steps run in a fixed order: weighted mean, content bonus, floor
        raise, reputation bonus with the 100 cap.
        """
        ordered = self.order_signals(signals)
        rules = ADJUSTMENTS

        # 1. Weighted mean
        weighted_sum = sum(s.score * SIGNAL_WEIGHTS[s.id] for s in ordered)
        total_weight = sum(SIGNAL_WEIGHTS[s.id] for s in ordered)
        base = round_half_up(weighted_sum / total_weight)

        # 2. Content bonus
        strong_content = sum(
            1 for s in ordered
            if s.id in CONTENT_SIGNALS and s.score >= rules.content_signal_threshold
        )
        if strong_content >= 3:
            base += rules.all_content_bonus
        elif strong_content >= 2:
            base += rules.two_content_bonus

        # 3. Floor raise
        if base < rules.floor_score and any(s.score >= rules.floor_trigger for s in ordered):
            base = rules.floor_score

        # 4. Reputation
        overall = min(rules.max_score, base + reputation_bonus)

        logger.debug(
            f"Aggregate: weighted={round_half_up(weighted_sum / total_weight)}, "
            f"content_signals={strong_content}, bonus={reputation_bonus}, overall={overall}"
        )
        return overall
