"""
Scoring Weights Configuration - v1.0

Per-signal weights for the overall AI readiness score.
"""

from dataclasses import dataclass


# Signal id -> weight. Every signal must be present in a report.
SIGNAL_WEIGHTS: dict[str, float] = {
    "readability": 1.5,
    "heading-structure": 1.4,
    "meta-tags": 1.2,
    "semantic-html": 1.0,
    "robots-txt": 0.9,
    "accessibility": 0.9,
    "sitemap": 0.8,
    "llms-txt": 0.3,
}

# Report order: auxiliary files first, then page content
SIGNAL_ORDER = (
    "llms-txt",
    "robots-txt",
    "sitemap",
    "heading-structure",
    "readability",
    "meta-tags",
    "semantic-html",
    "accessibility",
)

CONTENT_SIGNALS = ("readability", "heading-structure", "meta-tags")


@dataclass(frozen=True)
class AdjustmentRules:
    """Post-weighting adjustments, applied in this order."""
    content_signal_threshold: int = 60
    all_content_bonus: int = 15      # all three content signals strong
    two_content_bonus: int = 10      # two of three
    floor_score: int = 35            # raised to this when...
    floor_trigger: int = 80          # ...any signal reaches this
    max_score: int = 100


ADJUSTMENTS = AdjustmentRules()


# --- Validation (Prevent Drift) ---
def _validate_weights():
    """Ensure weights and report order describe the same signals."""
    if set(SIGNAL_WEIGHTS) != set(SIGNAL_ORDER):
        raise ValueError(
            f"CRITICAL: weight table {sorted(SIGNAL_WEIGHTS)} does not match signal order {sorted(SIGNAL_ORDER)}"
        )
    if any(w <= 0 for w in SIGNAL_WEIGHTS.values()):
        raise ValueError("CRITICAL: signal weights must be positive")
    if not set(CONTENT_SIGNALS) <= set(SIGNAL_WEIGHTS):
        raise ValueError("CRITICAL: content signals missing from weight table")

_validate_weights()
