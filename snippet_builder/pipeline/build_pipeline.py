"""Build pipeline: load the collection registry and parse every collection."""

import asyncio
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
from tqdm import tqdm

from snippet_builder.common.constants import (
    DEFAULT_HISTORY_TIMEOUT_SECONDS,
    DEFAULT_MAX_CONCURRENCY,
)
from snippet_builder.history.base import HistoryProvider
from snippet_builder.history.enricher import HistoryEnricher
from snippet_builder.history.git_history import GitHistoryProvider
from snippet_builder.models.collection import CollectionManifest
from snippet_builder.models.snippet import SnippetRecord
from snippet_builder.parsing.snippet_reader import SnippetReader
from snippet_builder.registry.loader import load_collections
from snippet_builder.utils.exceptions import (
    BuildError,
    ConfigurationError,
    SnippetBuilderError,
)

logger = structlog.get_logger(__name__)


@dataclass
class BuildStatistics:
    """Statistics for a build run.

    Attributes:
        collections_processed: Number of collections parsed
        snippets_parsed: Total number of snippet records produced
        history_degraded: Snippets whose history fell back to empty metadata
        start_time: Start time as unix timestamp
        end_time: End time as unix timestamp
        duration_seconds: Total build duration
    """

    collections_processed: int = 0
    snippets_parsed: int = 0
    history_degraded: int = 0
    start_time: float = 0.0
    end_time: float = 0.0
    duration_seconds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert statistics to dictionary for JSON serialization."""
        return {
            "collections_processed": self.collections_processed,
            "snippets_parsed": self.snippets_parsed,
            "history_degraded": self.history_degraded,
            "duration_seconds": round(self.duration_seconds, 3),
            "start_time": time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(self.start_time)),
            "end_time": time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(self.end_time)),
        }


@dataclass
class BuildResult:
    """Collections in registry order and each collection's snippet mapping."""

    collections: list[CollectionManifest] = field(default_factory=list)
    snippets: dict[str, dict[str, SnippetRecord]] = field(default_factory=dict)
    stats: BuildStatistics = field(default_factory=BuildStatistics)

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to the JSON export consumed by the page generator."""
        return {
            "collections": [collection.meta.to_dict() for collection in self.collections],
            "snippets": {
                slug: {filename: record.to_dict() for filename, record in records.items()}
                for slug, records in self.snippets.items()
            },
            "stats": self.stats.to_dict(),
        }


class BuildPipeline:
    """Orchestrates a full content build.

    1. Load every collection manifest under the content root
    2. Parse each collection's snippet directory into records
    3. Collect statistics

    Collections are independent: each gets its own reader and enricher.
    Any error aborts the build.
    """

    def __init__(
        self,
        content_root: str | Path,
        history_enabled: bool = True,
        history_timeout: float = DEFAULT_HISTORY_TIMEOUT_SECONDS,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        history_provider: HistoryProvider | None = None,
        show_progress: bool = True,
    ) -> None:
        """Initialize build pipeline.

        Args:
            content_root: Directory holding configs/ and sources/
            history_enabled: Whether to enrich snippets with version history
            history_timeout: Per-file timeout for history queries, in seconds
            max_concurrency: Maximum number of files parsed at once per collection
            history_provider: History provider (default: git)
            show_progress: Whether to display a progress bar
        """
        self.content_root = Path(content_root)
        self.history_enabled = history_enabled
        self.history_timeout = history_timeout
        self.max_concurrency = max_concurrency
        self.history_provider = history_provider or GitHistoryProvider()
        self.show_progress = show_progress
        self.stats = BuildStatistics()

        logger.info(
            "build_pipeline_initialized",
            content_root=str(self.content_root),
            history_enabled=history_enabled,
            history_timeout=history_timeout,
            max_concurrency=max_concurrency,
        )

    def load_collections(self, slugs: list[str] | None = None) -> list[CollectionManifest]:
        """Load the registry, optionally restricted to some collection slugs.

        Raises:
            ConfigurationError: If a manifest is malformed or a slug is unknown
        """
        collections = load_collections(self.content_root)
        if not slugs:
            return collections

        known = {collection.slug for collection in collections}
        unknown = [slug for slug in slugs if slug not in known]
        if unknown:
            raise ConfigurationError(f"Unknown collection(s): {', '.join(unknown)}")

        return [collection for collection in collections if collection.slug in slugs]

    async def build_collection(self, collection: CollectionManifest) -> dict[str, SnippetRecord]:
        """Parse one collection's snippets.

        Raises:
            SnippetBuilderError: If the collection cannot be built; errors
                from collaborators are wrapped in BuildError
        """
        config = collection.meta
        enricher = HistoryEnricher(
            provider=self.history_provider if self.history_enabled else None,
            timeout=self.history_timeout,
        )

        try:
            reader = SnippetReader(config, enricher=enricher, max_concurrency=self.max_concurrency)
            snippets = await reader.read_snippets(config.snippets_directory(self.content_root))
        except SnippetBuilderError as e:
            if e.collection is None:
                e.collection = config.slug
            raise
        except Exception as e:
            raise BuildError(
                f"Unexpected error while building collection: {e}", collection=config.slug
            ) from e

        self.stats.history_degraded += enricher.degraded_count
        return snippets

    async def run_async(self, slugs: list[str] | None = None) -> BuildResult:
        """Run the build inside an existing event loop.

        Args:
            slugs: Optional list of collection slugs to build (None = all)

        Returns:
            BuildResult with every collection's snippets

        Raises:
            SnippetBuilderError: If any collection fails to build
        """
        self.stats = BuildStatistics()
        self.stats.start_time = time.time()

        logger.info("build_started", content_root=str(self.content_root), slugs=slugs)

        try:
            collections = self.load_collections(slugs)
            result = BuildResult(collections=collections, stats=self.stats)

            with tqdm(
                desc="Building collections",
                unit="collection",
                total=len(collections),
                disable=not self.show_progress,
            ) as pbar:
                for collection in collections:
                    snippets = await self.build_collection(collection)
                    result.snippets[collection.slug] = snippets
                    self.stats.collections_processed += 1
                    self.stats.snippets_parsed += len(snippets)
                    pbar.update(1)

        except SnippetBuilderError as e:
            logger.error(
                "build_failed",
                error=e.message,
                error_type=type(e).__name__,
                collection=e.collection,
                file=e.file,
            )
            raise

        self.stats.end_time = time.time()
        self.stats.duration_seconds = self.stats.end_time - self.stats.start_time

        logger.info(
            "build_completed",
            collections_processed=self.stats.collections_processed,
            snippets_parsed=self.stats.snippets_parsed,
            history_degraded=self.stats.history_degraded,
            duration_seconds=round(self.stats.duration_seconds, 3),
        )
        return result

    def run(self, slugs: list[str] | None = None) -> BuildResult:
        """Run the build to completion.

        Args:
            slugs: Optional list of collection slugs to build (None = all)

        Returns:
            BuildResult with every collection's snippets
        """
        return asyncio.run(self.run_async(slugs))
