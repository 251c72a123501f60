"""Snippet reader: parse one collection's snippet files into records."""

import asyncio
import dataclasses
from collections.abc import Callable
from pathlib import Path
from typing import Any

import structlog

from snippet_builder.collaborators.expertise import (
    determine_expertise_from_tags,
    strip_expertise_from_tags,
)
from snippet_builder.collaborators.rendering import render_markdown
from snippet_builder.collaborators.resolvers import get_resolver
from snippet_builder.collaborators.tokenizer import tokenize_snippet
from snippet_builder.common.constants import (
    DEFAULT_MAX_CONCURRENCY,
    REQUIRED_ATTRIBUTES,
    SNIPPET_TYPE,
)
from snippet_builder.history.enricher import HistoryEnricher
from snippet_builder.models.collection import CollectionConfig
from snippet_builder.models.snippet import CodeBlocks, SnippetRecord, SnippetText, TagSet
from snippet_builder.parsing.code_blocks import FenceLexer, get_code_blocks
from snippet_builder.parsing.frontmatter import parse_frontmatter
from snippet_builder.parsing.text import (
    get_short_text,
    get_tags,
    get_textual_content,
    unique_elements,
)
from snippet_builder.utils.exceptions import (
    BuildError,
    CollectionReadError,
    ConfigurationError,
    ParseError,
    SnippetBuilderError,
)

logger = structlog.get_logger(__name__)


def get_files_in_dir(directory_path: str | Path) -> list[str]:
    """List the files of a directory, sorted case-insensitively.

    Subdirectories are not snippets and are left out.

    Args:
        directory_path: Directory to list

    Returns:
        File names sorted by their lower-cased form

    Raises:
        CollectionReadError: If the directory cannot be read
    """
    directory = Path(directory_path)
    try:
        entries = [entry for entry in directory.iterdir() if entry.is_file()]
    except OSError as e:
        raise CollectionReadError(
            f"Error while getting directory files: {e}", file=str(directory)
        ) from e

    # sorted() is stable; names in one directory never tie anyway
    return sorted((entry.name for entry in entries), key=str.lower)


def get_id(snippet_filename: str, source_dir: str) -> str:
    """Compose a snippet id from its collection source path and file name."""
    return f"{source_dir}/{Path(snippet_filename).stem}"


class SnippetReader:
    """Parse the snippet files of one collection.

    Rendering, classification, tag stripping and tokenization are injected
    collaborators; their failures are not caught and abort the build.

    Example:
        >>> reader = SnippetReader(config, enricher=HistoryEnricher(GitHistoryProvider()))
        >>> snippets = asyncio.run(reader.read_snippets(Path("content/sources/js/snippets")))
        >>> snippets["debounce.md"].tags.primary
        'function'
    """

    def __init__(
        self,
        config: CollectionConfig,
        enricher: HistoryEnricher | None = None,
        renderer: Callable[[str], str] = render_markdown,
        classifier: Callable[[list[str]], Any] = determine_expertise_from_tags,
        tag_stripper: Callable[[list[str]], list[str]] = strip_expertise_from_tags,
        tokenizer: Callable[[str], list[str]] = tokenize_snippet,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> None:
        """Initialize reader.

        Args:
            config: Collection configuration
            enricher: History enricher (None disables history metadata)
            renderer: Body -> html renderer
            classifier: Tags -> expertise level
            tag_stripper: Removes expertise tags before search indexing
            tokenizer: Excerpt -> search terms
            max_concurrency: Maximum number of files parsed at once

        Raises:
            ConfigurationError: If the resolver is unknown or a code collection
                declares no language
        """
        if not config.is_blog and config.language is None:
            raise ConfigurationError(
                "Collection declares no language for code blocks", collection=config.slug
            )

        self.config = config
        self.resolver = get_resolver(config.resolver_name)
        self.enricher = enricher or HistoryEnricher(provider=None)
        self.renderer = renderer
        self.classifier = classifier
        self.tag_stripper = tag_stripper
        self.tokenizer = tokenizer
        self.max_concurrency = max_concurrency
        self.logger = logger.bind(collection=config.slug)

    async def read_snippets(self, snippets_path: str | Path) -> dict[str, SnippetRecord]:
        """Read every snippet file of the collection.

        Files are parsed concurrently; the mapping is keyed by file name and
        filled in case-insensitive listing order.

        Args:
            snippets_path: Directory holding the collection's snippet files

        Returns:
            Mapping of file name to SnippetRecord, one entry per file

        Raises:
            CollectionReadError: If the directory or a file cannot be read
            ParseError: If a snippet is malformed
        """
        directory = Path(snippets_path)
        try:
            filenames = get_files_in_dir(directory)
        except CollectionReadError as e:
            raise CollectionReadError(e.message, collection=self.config.slug, file=e.file) from e

        self.logger.info(
            "collection_parse_started",
            snippets_path=str(directory),
            file_count=len(filenames),
        )

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def read_bounded(filename: str) -> SnippetRecord:
            async with semaphore:
                return await self.read_snippet(directory, filename)

        results = await asyncio.gather(
            *(read_bounded(filename) for filename in filenames),
            return_exceptions=True,
        )

        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            self.logger.error(
                "collection_parse_failed",
                failed_count=len(failures),
                file_count=len(filenames),
            )
            # First failure in listing order
            raise failures[0]

        snippets: dict[str, SnippetRecord] = {}
        for filename, record in zip(filenames, results):
            snippets[filename] = record  # type: ignore[assignment]

        self.logger.info(
            "collection_parse_completed",
            snippet_count=len(snippets),
            history_degraded=self.enricher.degraded_count,
        )
        return snippets

    async def read_snippet(self, directory: Path, filename: str) -> SnippetRecord:
        """Read, parse and enrich a single snippet file.

        Raises:
            CollectionReadError: If the file cannot be read
            ParseError: If the snippet is malformed
            BuildError: If a collaborator fails on the file
        """
        file_path = directory / filename
        try:
            content = await asyncio.to_thread(file_path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CollectionReadError(
                f"Error while reading snippet: {e}",
                collection=self.config.slug,
                file=filename,
            ) from e

        try:
            record = self.parse_snippet(filename, content)
        except SnippetBuilderError:
            raise
        except Exception as e:
            raise BuildError(
                f"Unexpected error while parsing snippet: {e}",
                collection=self.config.slug,
                file=filename,
            ) from e

        history = await self.enricher.enrich(directory, filename)
        return dataclasses.replace(record, history=history)

    def parse_snippet(self, filename: str, content: str) -> SnippetRecord:
        """Parse snippet file content into a record without history metadata.

        Args:
            filename: Snippet file name (used for the id and error context)
            content: Full file content

        Returns:
            SnippetRecord with empty history

        Raises:
            ParseError: If the header is malformed, an attribute is missing,
                or a code collection snippet has no code blocks
        """
        try:
            attributes, body = parse_frontmatter(content)
        except ValueError as e:
            raise ParseError(str(e), collection=self.config.slug, file=filename) from e

        self._require_attributes(attributes, filename)

        title = str(attributes["title"])
        tags = get_tags(attributes["tags"])
        if not tags:
            raise ParseError("Snippet has no tags", collection=self.config.slug, file=filename)

        text = get_textual_content(body)
        short_text = get_short_text(text)
        code = self._get_code(body, filename)
        html = self.renderer(body)

        return SnippetRecord(
            id=get_id(filename, self.config.source_dir),
            title=title,
            type=SNIPPET_TYPE,
            tags=TagSet(all=tags, primary=tags[0]),
            expertise=self.classifier(tags),
            code=code,
            text=SnippetText(full=text, short=short_text),
            search_tokens=self._search_tokens(title, tags, short_text),
            html={"full": html, **self.resolver(html)},
        )

    def _require_attributes(self, attributes: dict[str, Any], filename: str) -> None:
        for attribute in REQUIRED_ATTRIBUTES:
            value = attributes.get(attribute)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ParseError(
                    f"Missing required attribute '{attribute}'",
                    collection=self.config.slug,
                    file=filename,
                )

    def _get_code(self, body: str, filename: str) -> CodeBlocks:
        # Blog posts may carry no code at all
        if self.config.is_blog and (self.config.language is None or not FenceLexer(body).tokens()):
            style = "" if self.config.optional_language is not None else None
            return CodeBlocks(src="", example="", style=style)

        try:
            return get_code_blocks(body, self.config)
        except ParseError as e:
            raise ParseError(e.message, collection=self.config.slug, file=filename) from e

    def _search_tokens(self, title: str, tags: list[str], short_text: str) -> str:
        language = self.config.language
        terms = [
            title,
            language.short if language else "",
            language.long if language else "",
            *self.tag_stripper(tags),
            *self.tokenizer(short_text),
        ]
        return " ".join(unique_elements(term.lower() for term in terms if term))


async def read_snippets(
    snippets_path: str | Path,
    config: CollectionConfig,
    enricher: HistoryEnricher | None = None,
) -> dict[str, SnippetRecord]:
    """Read a collection's snippets with the default collaborators."""
    return await SnippetReader(config, enricher=enricher).read_snippets(snippets_path)
