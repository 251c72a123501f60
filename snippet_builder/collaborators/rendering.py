"""Markdown to html rendering for snippet bodies."""

import markdown

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


def render_markdown(body: str) -> str:
    """Render a snippet body to html.

    A fresh ``Markdown`` instance is used per call, so rendering holds no
    state between snippets and is safe to call from concurrent tasks.

    Args:
        body: Raw markdown body (frontmatter already removed)

    Returns:
        Rendered html string
    """
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS)
    return md.convert(body)
