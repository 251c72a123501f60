"""Default collaborators used by the snippet reader.

Rendering, html resolution, expertise classification and search tokenization
are narrow interfaces; the reader accepts replacements for each of them.
"""

from snippet_builder.collaborators.expertise import (
    determine_expertise_from_tags,
    strip_expertise_from_tags,
)
from snippet_builder.collaborators.rendering import render_markdown
from snippet_builder.collaborators.resolvers import RESOLVERS, get_resolver, resolve
from snippet_builder.collaborators.tokenizer import tokenize_snippet

__all__ = [
    "RESOLVERS",
    "determine_expertise_from_tags",
    "get_resolver",
    "render_markdown",
    "resolve",
    "strip_expertise_from_tags",
    "tokenize_snippet",
]
