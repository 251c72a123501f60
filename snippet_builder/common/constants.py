"""Constants shared by the registry loader and the snippet reader."""

# Manifest discovery, relative to the content root
MANIFEST_GLOB = "configs/*.json"

# Snippet sources live under <content root>/sources/<dirName>/<snippetPath>
SOURCES_DIR = "sources"

# Resolver used when a manifest does not name one
DEFAULT_RESOLVER = "stdResolver"

# Every snippet record carries this type marker
SNIPPET_TYPE = "snippet"

# Frontmatter delimiter line
FRONTMATTER_DELIMITER = "---"

# Code fence marker
FENCE_MARKER = "```"

# Attributes every snippet header must define
REQUIRED_ATTRIBUTES = ("title", "tags")

# Expertise levels, ordered from least to most experienced
EXPERTISE_LEVELS = ("beginner", "intermediate", "advanced")
DEFAULT_EXPERTISE = "intermediate"

# Version-history enrichment
DEFAULT_HISTORY_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_CONCURRENCY = 8

# Search tokenizer
MIN_TOKEN_LENGTH = 2
STOP_WORDS = frozenset(
    {
        "a",
        "about",
        "after",
        "all",
        "also",
        "an",
        "and",
        "any",
        "are",
        "as",
        "at",
        "be",
        "been",
        "before",
        "but",
        "by",
        "can",
        "each",
        "for",
        "from",
        "has",
        "have",
        "how",
        "if",
        "in",
        "into",
        "is",
        "it",
        "its",
        "may",
        "more",
        "no",
        "not",
        "of",
        "on",
        "one",
        "only",
        "or",
        "other",
        "otherwise",
        "so",
        "such",
        "than",
        "that",
        "the",
        "their",
        "then",
        "there",
        "these",
        "this",
        "to",
        "use",
        "using",
        "was",
        "were",
        "what",
        "when",
        "which",
        "while",
        "will",
        "with",
        "you",
        "your",
    }
)
