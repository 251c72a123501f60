"""Data models for parsed snippet records."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class TagSet:
    """Tags of a snippet.

    Attributes:
        all: Unique tags in order of first appearance
        primary: First tag
    """

    all: list[str]
    primary: str


@dataclass(frozen=True)
class SnippetText:
    """Textual excerpt of a snippet body.

    Attributes:
        full: Body text before the first code fence
        short: First paragraph of ``full``
    """

    full: str
    short: str


@dataclass(frozen=True)
class CodeBlocks:
    """Code extracted from a snippet's fenced blocks.

    ``style`` is None for collections without an optional language.
    """

    src: str
    example: str
    style: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary, omitting style when not configured."""
        data = {"src": self.src, "example": self.example}
        if self.style is not None:
            data = {"style": self.style, **data}
        return data


@dataclass(frozen=True)
class HistoryMetadata:
    """Version-history enrichment for a snippet file.

    Attributes:
        first_seen: Commit time of the file's creation, None without history
        last_updated: Time of the latest commit touching the file
        update_count: Number of commits touching the file
    """

    first_seen: datetime | None = None
    last_updated: datetime | None = None
    update_count: int = 0

    @classmethod
    def empty(cls) -> "HistoryMetadata":
        """Metadata for a file without (reachable) history."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.first_seen is None and self.last_updated is None and self.update_count == 0


@dataclass(frozen=True)
class SnippetRecord:
    """One parsed, render-ready snippet."""

    id: str
    title: str
    tags: TagSet
    expertise: str
    code: CodeBlocks
    text: SnippetText
    search_tokens: str
    html: dict[str, str]
    history: HistoryMetadata = field(default_factory=HistoryMetadata.empty)
    type: str = "snippet"

    @property
    def first_seen(self) -> datetime | None:
        return self.history.first_seen

    @property
    def last_updated(self) -> datetime | None:
        return self.history.last_updated

    @property
    def update_count(self) -> int:
        return self.history.update_count

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase shape consumed by the page generator."""
        return {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "tags": {"all": list(self.tags.all), "primary": self.tags.primary},
            "code": self.code.to_dict(),
            "expertise": self.expertise,
            "text": {"full": self.text.full, "short": self.text.short},
            "searchTokens": self.search_tokens,
            "html": dict(self.html),
            "firstSeen": self.first_seen.isoformat() if self.first_seen else None,
            "lastUpdated": self.last_updated.isoformat() if self.last_updated else None,
            "updateCount": self.update_count,
        }
