"""Tests for heading, readability and metadata scorers."""

import pytest

from ai_ready.services.scoring.content_scorer import (
    count_syllables,
    flesch_reading_ease,
    score_headings,
    score_metadata,
    score_readability,
)


class TestHeadingStructure:
    """Tests for score_headings."""

    def test_no_h1(self) -> None:
        signal = score_headings("<h2>Section</h2><h3>Sub</h3>")
        assert signal.score == 60
        assert signal.status == "warning"
        assert "No H1 found" in signal.details

    def test_perfect_hierarchy(self) -> None:
        signal = score_headings("<h1>Title</h1><h2>A</h2><h3>B</h3>")
        assert signal.score == 100
        assert signal.status == "pass"
        assert signal.details == "Perfect hierarchy with 1 H1 and logical structure"

    def test_multiple_h1_without_skips(self) -> None:
        signal = score_headings("<h1>One</h1><h2>A</h2><h1>Two</h1>")
        assert signal.score == 70
        assert signal.status == "warning"
        assert "Multiple H1s (2)" in signal.details

    def test_each_skip_costs_fifteen(self) -> None:
        signal = score_headings("<h1>T</h1><h3>A</h3><h2>B</h2><h4>C</h4>")
        assert signal.score == 70
        assert "Skipped heading level (H1 → H3)" in signal.details
        assert "Skipped heading level (H2 → H4)" in signal.details

    def test_heading_attributes_and_case(self) -> None:
        signal = score_headings('<H1 class="x">T</H1><h2 id="a">A</h2>')
        assert signal.score == 100

    def test_score_floored_at_zero(self) -> None:
        html = "<h2>a</h2>" + "<h2>x</h2><h6>y</h6>" * 10
        signal = score_headings(html)
        assert signal.score == 0
        assert signal.status == "fail"

    def test_header_tag_is_not_a_heading(self) -> None:
        signal = score_headings("<header></header><h1>T</h1><hr>")
        assert signal.score == 100


class TestReadability:
    """Tests for score_readability."""

    def test_empty_text(self) -> None:
        assert flesch_reading_ease("") == 0.0
        signal = score_readability("")
        assert signal.score == 20
        assert signal.status == "fail"
        assert "(Flesch: 0)" in signal.details

    def test_syllables_have_floor_of_one(self) -> None:
        assert count_syllables("rhythm") == 1
        assert count_syllables("banana") == 3
        assert count_syllables("queue") == 1

    def test_simple_text_is_very_readable(self) -> None:
        signal = score_readability("The cat sat. The dog ran. We had fun.")
        assert signal.score == 100
        assert signal.status == "pass"
        assert signal.details.startswith("Very readable")

    def test_dense_text_is_very_difficult(self) -> None:
        text = (
            "Institutional interoperability considerations necessitate comprehensive "
            "organizational standardization initiatives encompassing administrative "
            "infrastructure modernization and international regulatory harmonization."
        )
        signal = score_readability(text)
        assert signal.score == 20
        assert signal.status == "fail"
        assert "(Flesch: 0)" in signal.details

    def test_flesch_formula(self) -> None:
        # 2 sentences, 4 words, 6 syllables
        value = flesch_reading_ease("Hello there. Big dog!")
        expected = 206.835 - 1.015 * (4 / 2) - 84.6 * (6 / 4)
        assert value == pytest.approx(expected)

    def test_sentence_runs_and_blank_fragments(self) -> None:
        assert flesch_reading_ease("Go!!! Now...") == flesch_reading_ease("Go. Now.")


class TestMetadata:
    """Tests for score_metadata."""

    def test_no_markers(self) -> None:
        signal = score_metadata("<html><body><p>Hi</p></body></html>", {})
        assert signal.score == 30
        assert signal.status == "fail"
        assert signal.details == "Missing critical metadata"

    def test_title_from_metadata(self) -> None:
        signal = score_metadata("<html></html>", {"title": "Page"})
        assert signal.score == 60
        assert "Title ✓" in signal.details

    def test_empty_title_tag_is_basic_title(self) -> None:
        signal = score_metadata("<html><head><title></title></head></html>", {})
        assert signal.score == 50
        assert signal.details == "Basic title"
        assert signal.status == "warning"

    def test_description_length_bonus(self) -> None:
        description = "x" * 100
        html = f'<title>T</title><meta name="description" content="{description}">'
        signal = score_metadata(html, {})
        assert signal.score == 95
        assert "Description ✓" in signal.details

    def test_description_outside_range(self) -> None:
        html = '<title>T</title><meta name="description" content="Too short">'
        signal = score_metadata(html, {})
        assert signal.score == 85
        assert "Description" in signal.details
        assert "Description ✓" not in signal.details

    def test_full_metadata_clamped(self, sample_html: str) -> None:
        signal = score_metadata(sample_html, {"title": "Example Docs"})
        assert signal.score == 100
        assert signal.status == "pass"
        assert signal.details == "Title ✓, Description ✓, Author ✓, Date ✓"
