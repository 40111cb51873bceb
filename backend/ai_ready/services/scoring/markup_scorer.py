"""
Markup Scorer - Semantic HTML5 coverage and accessibility markers.
"""

from ai_ready.services.scoring.models import Signal, round_half_up

SEMANTIC_TAGS = ['<article', '<nav', '<main', '<section', '<header', '<footer', '<aside']
FRAMEWORK_MARKERS = ['__next', '_app', 'react', 'vue', 'svelte']


def score_semantic_html(html: str) -> Signal:
    """(tags found / 5) * 60, +20 for ARIA, +20 for a modern framework, max 100."""
    semantic_count = sum(1 for tag in SEMANTIC_TAGS if tag in html)
    has_aria = 'role="' in html or 'aria-' in html
    is_modern_framework = any(marker in html for marker in FRAMEWORK_MARKERS)

    raw = (semantic_count / 5) * 60 + (20 if has_aria else 0) + (20 if is_modern_framework else 0)
    score = min(100, round_half_up(raw))

    return Signal(
        id="semantic-html",
        label="Semantic HTML",
        score=score,
        thresholds=(80, 40),
        details=f"Found {semantic_count} semantic HTML5 elements",
        recommendation=(
            "Use more semantic HTML5 elements (article, nav, main, section, etc.)"
            if score < 80 else "Excellent use of semantic HTML"
        ),
    )


def score_accessibility(html: str) -> Signal:
    """Alt-text coverage plus ARIA, role and lang markers, max 100.

    Pages without images get a flat 40 for the image part instead of a full
    ratio.
    """
    alt_count = html.count('alt="')
    img_count = html.count('<img')
    alt_ratio = (alt_count / img_count) * 100 if img_count else 100

    has_aria_label = 'aria-label' in html
    has_aria_describedby = 'aria-describedby' in html
    has_role = 'role="' in html
    has_lang = 'lang="' in html

    image_score = 40 if img_count == 0 else alt_ratio * 0.4
    raw = (
        image_score
        + (20 if has_aria_label else 0)
        + (10 if has_aria_describedby else 0)
        + (15 if has_role else 0)
        + (15 if has_lang else 0)
    )
    score = min(100, round_half_up(raw))

    return Signal(
        id="accessibility",
        label="Accessibility",
        score=score,
        thresholds=(80, 50),
        details=(
            f"{round_half_up(alt_ratio)}% images have alt text, "
            f"ARIA labels: {'Yes' if has_aria_label else 'No'}"
        ),
        recommendation=(
            "Add alt text to all images and use ARIA labels for interactive elements"
            if score < 80 else "Good accessibility implementation"
        ),
    )
