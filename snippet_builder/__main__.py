"""Main entry point: ``python -m snippet_builder <command>``."""

import sys

import click

from snippet_builder import __version__
from snippet_builder.cli.build import build
from snippet_builder.cli.inspect_snippet import inspect_snippet
from snippet_builder.cli.list_collections import list_collections


@click.group()
@click.version_option(__version__, prog_name="snippet-builder")
def cli() -> None:
    """Snippet content build pipeline."""


cli.add_command(build)
cli.add_command(list_collections, name="collections")
cli.add_command(inspect_snippet, name="inspect")


def main() -> int:
    """Main application entry point.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        cli.main(standalone_mode=False)
        return 0
    except click.Abort:
        return 1
    except click.ClickException as e:
        e.show()
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
