"""Unit tests for tag and excerpt helpers."""

from snippet_builder.parsing.text import (
    get_short_text,
    get_tags,
    get_textual_content,
    unique_elements,
)


class TestGetTags:
    """Test cases for get_tags."""

    def test_deduplicates_keeping_first_occurrence(self) -> None:
        """Test that repeated tags collapse to their first appearance."""
        assert get_tags("a, a, b") == ["a", "b"]

    def test_keeps_source_order(self) -> None:
        """Test that tags keep the order they were written in."""
        assert get_tags("string,array, beginner ,string") == ["string", "array", "beginner"]

    def test_drops_empty_entries(self) -> None:
        """Test that empty entries between commas are ignored."""
        assert get_tags("a,, ,b,") == ["a", "b"]

    def test_accepts_yaml_list(self) -> None:
        """Test that a YAML list of tags is accepted."""
        assert get_tags(["array", "math", "array"]) == ["array", "math"]


class TestTextualContent:
    """Test cases for excerpt extraction."""

    def test_text_before_first_fence(self) -> None:
        """Test that the excerpt stops at the first code fence."""
        body = "Intro.\n\nMore.\n\n```js\ncode\n```"

        assert get_textual_content(body) == "Intro.\n\nMore.\n\n"

    def test_normalizes_crlf(self) -> None:
        """Test that CRLF line endings become LF."""
        body = "Intro.\r\n\r\nMore.\r\n```js\ncode\n```"

        assert get_textual_content(body) == "Intro.\n\nMore.\n"

    def test_body_without_fence_is_kept_whole(self) -> None:
        """Test that a body with no fence is used whole."""
        assert get_textual_content("Just prose.") == "Just prose."

    def test_short_text_is_first_paragraph(self) -> None:
        """Test that the short excerpt ends at the first blank line."""
        assert get_short_text("First.\n\nSecond.\n\n") == "First."

    def test_short_text_without_break_is_full_text(self) -> None:
        """Test the fallback when no blank-line break exists."""
        assert get_short_text("Only one paragraph.\n") == "Only one paragraph.\n"


def test_unique_elements_preserves_order() -> None:
    """Test order-preserving de-duplication."""
    assert unique_elements(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
