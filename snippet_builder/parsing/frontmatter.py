"""Frontmatter parsing for snippet files."""

from typing import Any

import yaml

from snippet_builder.common.constants import FRONTMATTER_DELIMITER


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split a snippet file into its YAML header and body.

    Args:
        content: Full file content including frontmatter

    Returns:
        Tuple of (attributes, body)

    Raises:
        ValueError: If frontmatter is missing or invalid
    """
    lines = content.split("\n")

    # Opening delimiter (handle optional \r from CRLF, and a UTF-8 BOM)
    if not lines or lines[0].lstrip("\ufeff").rstrip("\r") != FRONTMATTER_DELIMITER:
        raise ValueError(f"Missing frontmatter (file must start with '{FRONTMATTER_DELIMITER}')")

    closing_index = None
    for i in range(1, len(lines)):
        if lines[i].rstrip("\r") == FRONTMATTER_DELIMITER:
            closing_index = i
            break

    if closing_index is None:
        raise ValueError(f"Invalid frontmatter (missing closing '{FRONTMATTER_DELIMITER}')")

    header = "\n".join(line.rstrip("\r") for line in lines[1:closing_index])
    try:
        attributes = yaml.safe_load(header)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid frontmatter YAML: {e}") from e

    if attributes is None:
        attributes = {}
    if not isinstance(attributes, dict):
        raise ValueError("Frontmatter must be a mapping of attributes")

    # Body keeps its own line endings; the excerpt step normalizes them
    body = "\n".join(lines[closing_index + 1 :]).strip()

    return attributes, body
