"""Expertise classification from snippet tags."""

from snippet_builder.common.constants import DEFAULT_EXPERTISE, EXPERTISE_LEVELS


def determine_expertise_from_tags(tags: list[str]) -> str:
    """Return the expertise level encoded in the tags.

    The first tag naming a level wins (case-insensitive). Snippets without an
    expertise tag are classified as intermediate.
    """
    for tag in tags:
        lowered = tag.lower()
        if lowered in EXPERTISE_LEVELS:
            return lowered
    return DEFAULT_EXPERTISE


def strip_expertise_from_tags(tags: list[str]) -> list[str]:
    """Drop expertise-encoding tags, keeping the order of the rest."""
    return [tag for tag in tags if tag.lower() not in EXPERTISE_LEVELS]
