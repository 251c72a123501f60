"""Unit tests for frontmatter parsing."""

import pytest

from snippet_builder.parsing.frontmatter import parse_frontmatter


class TestParseFrontmatter:
    """Test cases for parse_frontmatter."""

    def test_splits_header_and_body(self) -> None:
        """Test that attributes and body are separated."""
        attributes, body = parse_frontmatter("---\ntitle: X\ntags: foo,bar\n---\n\nBody text.\n")

        assert attributes == {"title": "X", "tags": "foo,bar"}
        assert body == "Body text."

    def test_handles_crlf_delimiters(self) -> None:
        """Test that CRLF files are parsed."""
        attributes, body = parse_frontmatter("---\r\ntitle: X\r\ntags: a\r\n---\r\nBody\r\n")

        assert attributes["title"] == "X"
        assert body == "Body"

    def test_handles_byte_order_mark(self) -> None:
        """Test that a leading BOM does not hide the opening delimiter."""
        attributes, _ = parse_frontmatter("\ufeff---\ntitle: X\ntags: a\n---\nBody")

        assert attributes["title"] == "X"

    def test_empty_header(self) -> None:
        """Test that an empty header yields no attributes."""
        attributes, body = parse_frontmatter("---\n---\nBody")

        assert attributes == {}
        assert body == "Body"

    def test_missing_opening_delimiter(self) -> None:
        """Test that a file without frontmatter is rejected."""
        with pytest.raises(ValueError, match="Missing frontmatter"):
            parse_frontmatter("title: X\n---\nBody")

    def test_missing_closing_delimiter(self) -> None:
        """Test that an unterminated header is rejected."""
        with pytest.raises(ValueError, match="missing closing"):
            parse_frontmatter("---\ntitle: X\nBody")

    def test_invalid_yaml(self) -> None:
        """Test that malformed YAML is rejected."""
        with pytest.raises(ValueError, match="Invalid frontmatter YAML"):
            parse_frontmatter("---\ntitle: [unclosed\n---\nBody")

    def test_non_mapping_header(self) -> None:
        """Test that a header must be a mapping."""
        with pytest.raises(ValueError, match="mapping"):
            parse_frontmatter("---\n- a\n- b\n---\nBody")
