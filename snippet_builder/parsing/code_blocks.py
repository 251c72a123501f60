"""Fenced code block extraction.

Fences are scanned with a small two-state lexer (outside / inside a fence)
rather than a shared regular expression, so each scan is independent.
"""

from dataclasses import dataclass
from enum import Enum

from snippet_builder.common.constants import FENCE_MARKER
from snippet_builder.models.collection import CollectionConfig, Language
from snippet_builder.models.snippet import CodeBlocks
from snippet_builder.utils.exceptions import ConfigurationError, ParseError


class FenceState(Enum):
    """Lexer state."""

    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass(frozen=True)
class FenceToken:
    """A fenced region of a body.

    Attributes:
        info: Info string following the opening marker (e.g. "js")
        content: Text between the info line and the closing marker
        raw: The whole region including both markers
    """

    info: str
    content: str
    raw: str

    @property
    def language(self) -> str:
        """First word of the info string."""
        parts = self.info.split()
        return parts[0] if parts else ""

    def strip(self, languages: set[str]) -> str:
        """Code of the block when its language is known, otherwise the raw fence."""
        if self.language in languages:
            return self.content.strip()
        return self.raw.strip()


class FenceLexer:
    """Scan text for triple-backtick fenced regions.

    Markers pair up in order of appearance; an opening marker without a
    closing one is ignored.

    Example:
        >>> FenceLexer("```js\\nfoo()\\n```").tokens()
        [FenceToken(info='js', content='foo()\\n', raw='```js\\nfoo()\\n```')]
    """

    def __init__(self, text: str, marker: str = FENCE_MARKER) -> None:
        self.text = text
        self.marker = marker

    def tokens(self) -> list[FenceToken]:
        """Return every complete fenced region in order."""
        tokens: list[FenceToken] = []
        state = FenceState.OUTSIDE
        position = 0
        opened_at = 0

        while True:
            index = self.text.find(self.marker, position)
            if index == -1:
                break

            if state is FenceState.OUTSIDE:
                opened_at = index
                state = FenceState.INSIDE
            else:
                tokens.append(self._token(opened_at, index))
                state = FenceState.OUTSIDE

            position = index + len(self.marker)

        return tokens

    def _token(self, start: int, end: int) -> FenceToken:
        inner = self.text[start + len(self.marker) : end]
        raw = self.text[start : end + len(self.marker)]
        if "\n" in inner:
            info, content = inner.split("\n", 1)
        else:
            # Single-line fence: the first word is the info string
            parts = inner.split(None, 1)
            info = parts[0] if parts else ""
            content = parts[1] if len(parts) > 1 else ""
        return FenceToken(info=info.strip(), content=content, raw=raw)


def _languages(*languages: Language | None) -> set[str]:
    return {language.short for language in languages if language and language.short}


def get_code_blocks(body: str, config: CollectionConfig) -> CodeBlocks:
    """Extract a snippet's code blocks according to its collection.

    Blocks in the collection's language (or optional language) are reduced to
    their code; other blocks are kept with their fences. The result shape:

    - optional language and three or more blocks: style, src, example
    - optional language and fewer blocks: empty style, src, example
    - no optional language: src, example

    Args:
        body: Snippet body
        config: Collection configuration

    Returns:
        CodeBlocks for the snippet

    Raises:
        ConfigurationError: If the collection declares no language
        ParseError: If the body has no fenced blocks at all
    """
    if config.language is None:
        raise ConfigurationError(
            "Collection declares no language for code blocks", collection=config.slug
        )

    tokens = FenceLexer(body).tokens()
    if not tokens:
        raise ParseError("No fenced code blocks found")

    languages = _languages(config.language, config.optional_language)
    blocks = [token.strip(languages) for token in tokens]

    def block(index: int) -> str:
        return blocks[index] if index < len(blocks) else ""

    if config.optional_language is not None and config.optional_language.short:
        if len(blocks) > 2:
            return CodeBlocks(style=blocks[0], src=blocks[1], example=blocks[2])
        return CodeBlocks(style="", src=block(0), example=block(1))

    return CodeBlocks(src=block(0), example=block(1))
