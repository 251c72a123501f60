"""History provider capability."""

from datetime import datetime
from pathlib import Path
from typing import Protocol


class HistoryProvider(Protocol):
    """Read-only version-history queries for a single file.

    Implementations raise ``DegradedEnrichmentError`` when the history
    subsystem cannot answer (tool missing, not a repository). A file that was
    never committed is not an error: it yields None timestamps and zero.
    """

    def is_available(self) -> bool:
        """Whether the history tool can be used at all."""
        ...

    async def first_seen(self, directory: Path, filename: str) -> datetime | None:
        """Time of the commit that added the file."""
        ...

    async def last_updated(self, directory: Path, filename: str) -> datetime | None:
        """Time of the latest commit touching the file."""
        ...

    async def update_count(self, directory: Path, filename: str) -> int:
        """Number of commits touching the file."""
        ...
