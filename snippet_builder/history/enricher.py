"""Best-effort version-history enrichment."""

import asyncio
from pathlib import Path

import structlog

from snippet_builder.common.constants import DEFAULT_HISTORY_TIMEOUT_SECONDS
from snippet_builder.history.base import HistoryProvider
from snippet_builder.models.snippet import HistoryMetadata
from snippet_builder.utils.exceptions import DegradedEnrichmentError

logger = structlog.get_logger(__name__)


class HistoryEnricher:
    """Collect history metadata for snippet files.

    The three queries for a file run concurrently and are joined under a
    single per-file timeout. Unavailable history, a failing provider or a
    timeout degrades to empty metadata with a warning. The build is never
    aborted here.
    """

    def __init__(
        self,
        provider: HistoryProvider | None,
        timeout: float = DEFAULT_HISTORY_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize enricher.

        Args:
            provider: History provider, or None to disable enrichment
            timeout: Seconds allowed for the three queries of one file
        """
        self.provider = provider
        self.timeout = timeout
        self.degraded_count = 0
        self._available: bool | None = None

    def _is_available(self) -> bool:
        if self.provider is None:
            return False
        if self._available is None:
            self._available = self.provider.is_available()
            if not self._available:
                logger.warning(
                    "history_unavailable",
                    provider=type(self.provider).__name__,
                )
        return self._available

    async def _query(
        self, provider: HistoryProvider, directory: Path, filename: str
    ) -> HistoryMetadata:
        """Run the three queries for a file and join them.

        Raises:
            DegradedEnrichmentError: If any query fails or the join times out
        """
        gathered = asyncio.gather(
            provider.first_seen(directory, filename),
            provider.last_updated(directory, filename),
            provider.update_count(directory, filename),
            return_exceptions=True,
        )
        try:
            results = await asyncio.wait_for(gathered, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise DegradedEnrichmentError(
                f"History queries timed out after {self.timeout}s", file=filename
            ) from e

        for result in results:
            if isinstance(result, DegradedEnrichmentError):
                raise result
            if isinstance(result, Exception):
                raise DegradedEnrichmentError(
                    f"History provider failed: {result}", file=filename
                ) from result
            if isinstance(result, BaseException):
                raise result

        first_seen, last_updated, update_count = results
        return HistoryMetadata(
            first_seen=first_seen,
            last_updated=last_updated,
            update_count=update_count,
        )

    async def enrich(self, directory: Path, filename: str) -> HistoryMetadata:
        """Return history metadata for one file, empty when unavailable.

        Args:
            directory: Directory containing the file
            filename: File name within the directory

        Returns:
            HistoryMetadata (empty if history is disabled, unavailable or slow)
        """
        if self.provider is None or not self._is_available():
            return HistoryMetadata.empty()

        try:
            return await self._query(self.provider, directory, filename)
        except DegradedEnrichmentError as e:
            self.degraded_count += 1
            logger.warning(
                "history_enrichment_degraded",
                directory=str(directory),
                file=filename,
                error=e.message,
            )
            return HistoryMetadata.empty()
