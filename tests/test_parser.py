"""Tests for SEO response parsing."""

from __future__ import annotations

from markboost.models import SEOData
from markboost.seo.parser import parse_seo_response


class TestParseSeoResponse:
    """Test parse_seo_response function."""

    def test_both_labels(self) -> None:
        """Should read title and description from labelled lines."""
        result = parse_seo_response("SEO Title: Foo\nMeta Description: Bar", "Original")

        assert result == SEOData(title="Foo", description="Bar", keywords=None)

    def test_no_text(self) -> None:
        """Should fall back to the original title when there is no text."""
        assert parse_seo_response(None, "X") == SEOData(title="X", description=None)
        assert parse_seo_response("", "X") == SEOData(title="X", description=None)

    def test_labels_are_case_insensitive(self) -> None:
        result = parse_seo_response("seo title: Foo\nMETA DESCRIPTION: Bar", "X")

        assert result.title == "Foo"
        assert result.description == "Bar"

    def test_quotes_stripped(self) -> None:
        """Should strip one layer of surrounding double quotes."""
        result = parse_seo_response('SEO Title: "Foo"\nMeta Description: "Bar baz"', "X")

        assert result.title == "Foo"
        assert result.description == "Bar baz"

    def test_multiline_description(self) -> None:
        result = parse_seo_response("SEO Title: Foo\nMeta Description: line one\nline two", "X")

        assert result.description == "line one\nline two"

    def test_title_only(self) -> None:
        result = parse_seo_response("SEO Title: Only a title", "X")

        assert result.title == "Only a title"
        assert result.description is None

    def test_empty_title_keeps_fallback(self) -> None:
        """Should keep the original title when the title label is empty."""
        result = parse_seo_response("SEO Title:   \nMeta Description: Bar", "X")

        assert result.title == "X"
        assert result.description == "Bar"

    def test_description_only(self) -> None:
        """Should not run the unlabelled fallback when the description label exists."""
        result = parse_seo_response("Meta Description: Just the description", "X")

        assert result.title == "X"
        assert result.description == "Just the description"

    def test_unlabelled_fallback(self) -> None:
        """Should use unlabelled text as description."""
        result = parse_seo_response("Just some unlabeled text.", "X")

        assert result == SEOData(title="X", description="Just some unlabeled text.")

    def test_unlabelled_fallback_truncated(self) -> None:
        text = "word " * 100

        result = parse_seo_response(text, "X")

        assert result.title == "X"
        assert result.description == text.strip()[:160]
        assert len(result.description) == 160

    def test_unlabelled_fallback_strips_quotes(self) -> None:
        result = parse_seo_response('  "A quoted summary"  ', "X")

        assert result.description == "A quoted summary"

    def test_whitespace_only(self) -> None:
        result = parse_seo_response("   \n  ", "X")

        assert result == SEOData(title="X", description=None)

    def test_keywords_never_set(self) -> None:
        result = parse_seo_response("SEO Title: A\nMeta Description: B\nKeywords: c, d", "X")

        assert result.keywords is None
        assert result.description == "B\nKeywords: c, d"

    def test_empty_description_label_uses_fallback(self) -> None:
        """Should treat an empty description label like unlabelled text."""
        result = parse_seo_response("Meta Description:   ", "X")

        assert result == SEOData(title="X", description="Meta Description:")

    def test_bare_title_label_never_becomes_description(self) -> None:
        """Should keep the description empty when only a bare title label appears."""
        result = parse_seo_response("SEO Title:   ", "X")

        assert result == SEOData(title="X", description=None)
