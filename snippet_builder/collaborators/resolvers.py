"""Resolver registry for post-processing rendered snippet markup.

Each resolver receives the rendered html of a snippet body and contributes
extra fields that are merged next to ``html.full`` in the snippet record.
"""

import re
from collections.abc import Callable

from snippet_builder.utils.exceptions import ConfigurationError

Resolver = Callable[[str], dict[str, str]]

_PRE_BLOCK = re.compile(r"<pre[\s\S]*?</pre>")


def _split_markup(html: str) -> tuple[str, list[str]]:
    """Split markup into the description before the first code block and the blocks."""
    blocks = _PRE_BLOCK.findall(html)
    first_block = html.find("<pre")
    description = html if first_block == -1 else html[:first_block]
    return description.strip(), blocks


def _block(blocks: list[str], index: int) -> str:
    return blocks[index] if index < len(blocks) else ""


def std_resolver(html: str) -> dict[str, str]:
    """Description, code and example for a single-language snippet."""
    description, blocks = _split_markup(html)
    return {
        "description": description,
        "code": _block(blocks, 0),
        "example": _block(blocks, 1),
    }


def jsx_resolver(html: str) -> dict[str, str]:
    """Like std_resolver, with a leading style block when one is present."""
    description, blocks = _split_markup(html)
    if len(blocks) > 2:
        style, code, example = blocks[0], blocks[1], blocks[2]
    else:
        style, code, example = "", _block(blocks, 0), _block(blocks, 1)
    return {
        "description": description,
        "style": style,
        "code": code,
        "example": example,
    }


def css_resolver(html: str) -> dict[str, str]:
    """Markup, stylesheet and script blocks for a css snippet."""
    description, blocks = _split_markup(html)
    return {
        "description": description,
        "htmlCode": _block(blocks, 0),
        "cssCode": _block(blocks, 1),
        "jsCode": _block(blocks, 2),
    }


def blog_resolver(html: str) -> dict[str, str]:
    """Blog posts render as a single document with no extra fields."""
    return {}


RESOLVERS: dict[str, Resolver] = {
    "stdResolver": std_resolver,
    "jsxResolver": jsx_resolver,
    "cssResolver": css_resolver,
    "blogResolver": blog_resolver,
}


def get_resolver(name: str) -> Resolver:
    """Look up a resolver by name.

    Args:
        name: Registered resolver name (e.g., "stdResolver")

    Returns:
        Resolver callable

    Raises:
        ConfigurationError: If no resolver is registered under the name
    """
    try:
        return RESOLVERS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown resolver '{name}'. Registered: {', '.join(sorted(RESOLVERS))}"
        ) from None


def resolve(name: str, html: str) -> dict[str, str]:
    """Apply the named resolver to rendered markup."""
    return get_resolver(name)(html)
