"""CLI command for running the content build."""

import json
from pathlib import Path

import click

from snippet_builder.pipeline.build_pipeline import BuildPipeline, BuildResult
from snippet_builder.utils.config import Config
from snippet_builder.utils.exceptions import SnippetBuilderError
from snippet_builder.utils.logger import configure_logging


def _display_summary(result: BuildResult) -> None:
    """Display build summary to user."""
    stats = result.stats
    click.echo("=" * 80, err=True)
    click.echo("Build Complete!", err=True)
    click.echo("=" * 80, err=True)
    for collection in result.collections:
        count = len(result.snippets.get(collection.slug, {}))
        click.echo(f"  {collection.slug}: {count} snippets", err=True)
    click.echo(f"  Collections: {stats.collections_processed}", err=True)
    click.echo(f"  Snippets: {stats.snippets_parsed}", err=True)
    click.echo(f"  History Degraded: {stats.history_degraded}", err=True)
    click.echo(f"  Duration: {stats.duration_seconds:.2f}s", err=True)


@click.command()
@click.option(
    "--content-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Content root holding configs/ and sources/ (default: $SNIPPET_CONTENT_ROOT or content)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the build result as JSON to this file ('-' for stdout)",
)
@click.option(
    "--collection",
    "collections",
    multiple=True,
    help="Only build the collection with this slug (repeatable)",
)
@click.option("--no-history", is_flag=True, help="Skip version-history enrichment")
@click.option(
    "--history-timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Per-file timeout for history queries in seconds",
)
@click.option(
    "--max-concurrency",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of snippet files parsed at once",
)
@click.option("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or INFO)")
def build(  # noqa: PLR0913
    content_root: Path | None,
    output: Path | None,
    collections: tuple[str, ...],
    no_history: bool,
    history_timeout: float | None,
    max_concurrency: int | None,
    log_level: str | None,
) -> None:
    """Parse every snippet collection under the content root.

    Loads collection manifests from CONTENT_ROOT/configs/*.json and parses
    each collection's snippet files into render-ready records.

    Examples:

        \b
        # Build everything and export for the page generator
        snippet-build --content-root content -o build/snippets.json

        \b
        # Build one collection without git history
        snippet-build --collection js --no-history
    """
    try:
        config = Config()
    except SnippetBuilderError as e:
        click.echo(f"Configuration error: {e.describe()}", err=True)
        raise click.Abort() from e

    configure_logging(log_level or config.log_level)

    pipeline = BuildPipeline(
        content_root=content_root or config.content_root,
        history_enabled=config.history_enabled and not no_history,
        history_timeout=(
            history_timeout if history_timeout is not None else config.history_timeout
        ),
        max_concurrency=(
            max_concurrency if max_concurrency is not None else config.max_concurrency
        ),
    )

    try:
        result = pipeline.run(list(collections) or None)
    except SnippetBuilderError as e:
        click.echo(f"Error {e.describe()}", err=True)
        raise click.Abort() from e
    except KeyboardInterrupt:
        click.echo("\nBuild interrupted by user", err=True)
        raise click.Abort() from None

    if not result.collections:
        click.echo("  No collection manifests found", err=True)

    _display_summary(result)

    if output is not None:
        payload = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
        if str(output) == "-":
            click.echo(payload)
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(payload, encoding="utf-8")
            click.echo(f"Build result saved to: {output}", err=True)


if __name__ == "__main__":
    build()
