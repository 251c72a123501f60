"""Snippet file parsing."""

from snippet_builder.parsing.code_blocks import FenceLexer, FenceToken, get_code_blocks
from snippet_builder.parsing.frontmatter import parse_frontmatter
from snippet_builder.parsing.snippet_reader import (
    SnippetReader,
    get_files_in_dir,
    get_id,
    read_snippets,
)
from snippet_builder.parsing.text import (
    get_short_text,
    get_tags,
    get_textual_content,
    unique_elements,
)

__all__ = [
    "FenceLexer",
    "FenceToken",
    "SnippetReader",
    "get_code_blocks",
    "get_files_in_dir",
    "get_id",
    "get_short_text",
    "get_tags",
    "get_textual_content",
    "parse_frontmatter",
    "read_snippets",
    "unique_elements",
]
