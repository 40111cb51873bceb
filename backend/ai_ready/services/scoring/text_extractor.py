"""
Text extraction - plain text from raw HTML for linguistic analysis.
"""
import re

SCRIPT_RE = re.compile(r'<script[^>]*>[\s\S]*?</script>', re.IGNORECASE)
STYLE_RE = re.compile(r'<style[^>]*>[\s\S]*?</style>', re.IGNORECASE)
TAG_RE = re.compile(r'<[^>]+>')
WHITESPACE_RE = re.compile(r'\s+')

ENTITIES = [
    ('&nbsp;', ' '),
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&#39;', "'"),
]


def _strip_markup(text: str) -> str:
    text = SCRIPT_RE.sub(' ', text)
    text = STYLE_RE.sub(' ', text)
    return TAG_RE.sub(' ', text)


def _decode_entities(text: str) -> str:
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def extract_text(html: str) -> str:
    """Strip scripts, styles and tags, decode common entities, collapse whitespace.

    Stripping and decoding repeat until nothing changes (e.g. "&lt;b&gt;"
    decodes into a tag), which keeps extract_text(extract_text(x)) == extract_text(x).
    Every pass shortens the text, so the loop terminates.
    """
    if not html:
        return ""

    text = html
    while True:
        cleaned = _decode_entities(_strip_markup(text))
        if cleaned == text:
            break
        text = cleaned

    return WHITESPACE_RE.sub(' ', text).strip()
