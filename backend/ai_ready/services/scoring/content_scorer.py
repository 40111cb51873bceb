"""
Content Scorer - Heading hierarchy, readability and metadata quality.

Each scorer is a pure function over immutable inputs and returns one Signal:
- heading-structure: H1 count and skipped levels (HTML)
- readability: Flesch Reading Ease (extracted text)
- meta-tags: title/description/author/date markers (HTML + fetched metadata)
"""

import re
from typing import Optional

from ai_ready.services.scoring.models import Signal, round_half_up


# === HEADINGS ===

HEADING_RE = re.compile(r'<h([1-6])[^>]*>', re.IGNORECASE)
H1_RE = re.compile(r'<h1[^>]*>', re.IGNORECASE)

NO_H1_PENALTY = 40
MULTIPLE_H1_PENALTY = 30
SKIP_PENALTY = 15


def score_headings(html: str) -> Signal:
    """Score heading hierarchy.

    Starts at 100; missing H1 costs 40, several H1s cost 30 (never both), and
    every jump of more than one level between consecutive headings costs 15.
    """
    h1_count = len(H1_RE.findall(html))
    levels = [int(level) for level in HEADING_RE.findall(html)]

    score = 100
    issues = []

    if h1_count == 0:
        score -= NO_H1_PENALTY
        issues.append("No H1 found")
    elif h1_count > 1:
        score -= MULTIPLE_H1_PENALTY
        issues.append(f"Multiple H1s ({h1_count}) create topic ambiguity")

    for previous, current in zip(levels, levels[1:]):
        if current - previous > 1:
            score -= SKIP_PENALTY
            issues.append(f"Skipped heading level (H{previous} → H{current})")

    score = max(0, score)

    return Signal(
        id="heading-structure",
        label="Heading Hierarchy",
        score=score,
        thresholds=(80, 50),
        details=", ".join(issues) if issues else f"Perfect hierarchy with {h1_count} H1 and logical structure",
        recommendation=(
            "Use exactly one H1 and maintain logical heading hierarchy (H1→H2→H3)"
            if score < 80 else "Excellent heading structure for AI comprehension"
        ),
    )


# === READABILITY ===

SENTENCE_SPLIT_RE = re.compile(r'[.!?]+')
VOWEL_GROUP_RE = re.compile(r'[aeiouAEIOU]+')

# (minimum Flesch, normalized score, wording)
READABILITY_BANDS = [
    (70, 100, "Very readable"),
    (50, 80, "Good readability"),
    (30, 50, "Difficult to read"),
]
READABILITY_FLOOR = (20, "Very difficult")


def count_syllables(word: str) -> int:
    """Vowel clusters in the word, at least one."""
    return len(VOWEL_GROUP_RE.findall(word)) or 1


def flesch_reading_ease(text: str) -> float:
    """Raw Flesch Reading Ease; 0 when there are no sentences or no words."""
    sentences = [s for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]
    words = text.split()

    if not sentences or not words:
        return 0.0

    syllables = sum(count_syllables(w) for w in words)
    words_per_sentence = len(words) / len(sentences)
    syllables_per_word = syllables / len(words)

    return 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word


def score_readability(text: str) -> Signal:
    """Map the Flesch value onto four bands (100/80/50/20)."""
    raw = flesch_reading_ease(text)
    display = max(0.0, min(100.0, raw))

    normalized, wording = READABILITY_FLOOR
    for minimum, band_score, band_wording in READABILITY_BANDS:
        if display >= minimum:
            normalized, wording = band_score, band_wording
            break

    return Signal(
        id="readability",
        label="Content Readability",
        score=normalized,
        thresholds=(80, 50),
        details=f"{wording} (Flesch: {round_half_up(display)})",
        recommendation=(
            "Simplify sentences and use clearer language for better AI comprehension"
            if normalized < 80 else "Content is clearly written and AI-friendly"
        ),
    )


# === METADATA ===

TITLE_ELEMENT_RE = re.compile(r'<title[^>]*>\s*([^<]+?)\s*</title>', re.IGNORECASE)
META_DESCRIPTION_RE = re.compile(
    r'<meta[^>]+(?:name="description"|property="og:description")[^>]*content="([^"]*)"'
    r'|<meta[^>]+content="([^"]*)"[^>]*(?:name="description"|property="og:description")',
    re.IGNORECASE,
)

GOOD_DESCRIPTION_LENGTH = (70, 160)


def _description_text(html: str, metadata: dict) -> Optional[str]:
    described = metadata.get("description") or metadata.get("ogDescription")
    if described:
        return described
    match = META_DESCRIPTION_RE.search(html)
    if match:
        return match.group(1) if match.group(1) is not None else match.group(2)
    return None


def score_metadata(html: str, metadata: Optional[dict] = None) -> Signal:
    """Score metadata completeness.

    Base 30, title +30 (bare <title> +20), description +25 (+10 when 70-160
    chars), author +10, publish/modified date +10, capped at 100.
    """
    metadata = metadata or {}

    has_title = bool(
        metadata.get("title")
        or metadata.get("ogTitle")
        or 'og:title' in html
        or TITLE_ELEMENT_RE.search(html)
    )
    has_bare_title = '<title' in html.lower()

    has_description = bool(
        metadata.get("description")
        or metadata.get("ogDescription")
        or 'og:description' in html
        or 'name="description"' in html
    )
    description = _description_text(html, metadata) or ""
    low, high = GOOD_DESCRIPTION_LENGTH
    good_description_length = low <= len(description) <= high

    has_author = 'name="author"' in html or 'property="article:author"' in html
    has_date = (
        'property="article:published_time"' in html
        or 'property="article:modified_time"' in html
    )

    score = 30
    found = []

    if has_title:
        score += 30
        found.append("Title ✓")
    elif has_bare_title:
        score += 20
        found.append("Basic title")

    if has_description:
        score += 25
        if good_description_length:
            score += 10
            found.append("Description ✓")
        else:
            found.append("Description")

    if has_author:
        score += 10
        found.append("Author ✓")

    if has_date:
        score += 10
        found.append("Date ✓")

    score = min(100, score)

    return Signal(
        id="meta-tags",
        label="Metadata Quality",
        score=score,
        thresholds=(70, 40),
        details=", ".join(found) if found else "Missing critical metadata",
        recommendation=(
            "Add title, description (70-160 chars), author, and publish date metadata"
            if score < 70 else "Metadata provides excellent context for AI"
        ),
    )
