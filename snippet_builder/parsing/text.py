"""Text helpers: tags, excerpts and order-preserving de-duplication."""

from collections.abc import Iterable

from snippet_builder.common.constants import FENCE_MARKER


def unique_elements(values: Iterable[str]) -> list[str]:
    """Remove duplicates, keeping the first occurrence of each value."""
    return list(dict.fromkeys(values))


def get_tags(tags: str | list[str]) -> list[str]:
    """Parse the tags attribute into unique tags in order of first appearance.

    Accepts the comma-separated string form (``"a, a, b"``) and a YAML list.
    Empty entries are dropped.
    """
    raw = tags.split(",") if isinstance(tags, str) else [str(tag) for tag in tags]
    return unique_elements(tag.strip() for tag in raw if tag.strip())


def get_textual_content(body: str) -> str:
    """Text of the body before its first code fence, with LF line endings.

    A body without any fence is returned whole.
    """
    fence_index = body.find(FENCE_MARKER)
    text = body if fence_index == -1 else body[:fence_index]
    return text.replace("\r\n", "\n")


def get_short_text(text: str) -> str:
    """First paragraph of an excerpt.

    An excerpt without a blank-line break is its own short form.
    """
    break_index = text.find("\n\n")
    if break_index == -1:
        return text
    return text[:break_index]
