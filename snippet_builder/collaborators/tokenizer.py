"""Search tokenizer for snippet excerpts."""

import re

from snippet_builder.common.constants import MIN_TOKEN_LENGTH, STOP_WORDS

# Words, keeping inner dots/dashes (e.g. "array.prototype", "kebab-case")
_WORD = re.compile(r"[a-z0-9]+(?:[.\-][a-z0-9]+)*")


def tokenize_snippet(text: str) -> list[str]:
    """Tokenize an excerpt into search terms.

    Lower-cases the text, drops stop words and terms shorter than
    ``MIN_TOKEN_LENGTH``, and removes duplicates keeping first occurrence.

    Args:
        text: Excerpt to tokenize

    Returns:
        List of unique search terms in order of appearance
    """
    if not text:
        return []

    seen: set[str] = set()
    tokens: list[str] = []
    for match in _WORD.finditer(text.lower()):
        token = match.group(0)
        if len(token) < MIN_TOKEN_LENGTH or token in STOP_WORDS or token in seen:
            continue
        seen.add(token)
        tokens.append(token)
    return tokens
