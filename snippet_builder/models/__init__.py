"""Domain models for collections and snippet records."""

from snippet_builder.models.collection import (
    CollectionConfig,
    CollectionManifest,
    Language,
    Theme,
)
from snippet_builder.models.snippet import (
    CodeBlocks,
    HistoryMetadata,
    SnippetRecord,
    SnippetText,
    TagSet,
)

__all__ = [
    "CodeBlocks",
    "CollectionConfig",
    "CollectionManifest",
    "HistoryMetadata",
    "Language",
    "SnippetRecord",
    "SnippetText",
    "TagSet",
    "Theme",
]
