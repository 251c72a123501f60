"""CLI command for listing the collections of a content root."""

from pathlib import Path

import click

from snippet_builder.registry.loader import load_collections
from snippet_builder.utils.config import Config
from snippet_builder.utils.exceptions import SnippetBuilderError
from snippet_builder.utils.logger import configure_logging


@click.command()
@click.option(
    "--content-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Content root holding configs/ (default: $SNIPPET_CONTENT_ROOT or content)",
)
def list_collections(content_root: Path | None) -> None:
    """List discovered collections in registry order."""
    try:
        config = Config()
    except SnippetBuilderError as e:
        click.echo(f"Configuration error: {e.describe()}", err=True)
        raise click.Abort() from e

    configure_logging(config.log_level)

    try:
        collections = load_collections(content_root or config.content_root)
    except SnippetBuilderError as e:
        click.echo(f"Error {e.describe()}", err=True)
        raise click.Abort() from e

    if not collections:
        click.echo("No collection manifests found")
        return

    click.echo("-" * 80)
    click.echo(f"{'Slug':<16} {'Resolver':<14} {'Language':<12} Source")
    click.echo("-" * 80)
    for collection in collections:
        meta = collection.meta
        language = meta.language.short if meta.language else "-"
        if meta.optional_language:
            language = f"{language}+{meta.optional_language.short}"
        click.echo(f"{meta.slug:<16} {meta.resolver_name:<14} {language:<12} {meta.source_dir}")
    click.echo()
    click.echo(f"Total Collections: {len(collections)}")


if __name__ == "__main__":
    list_collections()
