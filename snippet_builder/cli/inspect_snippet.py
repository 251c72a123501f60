"""CLI command for parsing a single snippet file."""

import asyncio
import json
from pathlib import Path

import click

from snippet_builder.history.enricher import HistoryEnricher
from snippet_builder.history.git_history import GitHistoryProvider
from snippet_builder.parsing.snippet_reader import SnippetReader
from snippet_builder.registry.loader import load_manifest
from snippet_builder.utils.config import Config
from snippet_builder.utils.exceptions import SnippetBuilderError
from snippet_builder.utils.logger import configure_logging


@click.command()
@click.argument("manifest_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("snippet_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--no-history", is_flag=True, help="Skip version-history enrichment")
@click.option("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or INFO)")
def inspect_snippet(
    manifest_path: Path, snippet_path: Path, no_history: bool, log_level: str | None
) -> None:
    """Parse SNIPPET_PATH with the collection declared in MANIFEST_PATH.

    Prints the resulting record as JSON.
    """
    try:
        config = Config()
    except SnippetBuilderError as e:
        click.echo(f"Configuration error: {e.describe()}", err=True)
        raise click.Abort() from e

    configure_logging(log_level or config.log_level)

    history_enabled = config.history_enabled and not no_history
    try:
        manifest = load_manifest(manifest_path.resolve())
        enricher = HistoryEnricher(
            GitHistoryProvider() if history_enabled else None,
            timeout=config.history_timeout,
        )
        reader = SnippetReader(manifest.meta, enricher=enricher)
        record = asyncio.run(reader.read_snippet(snippet_path.parent, snippet_path.name))
    except SnippetBuilderError as e:
        click.echo(f"Error {e.describe()}", err=True)
        raise click.Abort() from e

    click.echo(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    inspect_snippet()
