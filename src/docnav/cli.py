"""CLI interface for Docnav.

Command-line tool for building documentation navigation and page links.
"""

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from docnav.config import Config
from docnav.core.errors import NavigationError
from docnav.core.loader import ItemsLoader
from docnav.core.pagination import add_doc_buttons
from docnav.core.tree import build_nav_tree, tree_to_dict

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docnav.toml)",
)

items_file_option = click.option(
    "--items-file",
    "-i",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="JSON file with navigation items (overrides config)",
)

verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log tree placement)",
)


@click.group()
def cli() -> None:
    """Docnav - navigation trees and page links for documentation sites."""


@cli.command()
@config_option
@items_file_option
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Where to write the doc posts JSON (overrides config)",
)
@verbose_option
def build(
    config_path: Path | None,
    items_file: Path | None,
    output_file: Path | None,
    verbose: bool,
) -> None:
    """Build the linked page sequence and write it as JSON."""
    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(
            items_file=items_file,
            output_file=output_file,
        )
        loaded = ItemsLoader(config.docs.items_file).load()
        tree = build_nav_tree(loaded.items)
        posts = add_doc_buttons(loaded.posts, tree)

        target = config.docs.output_file
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            json.dumps([post.to_dict() for post in posts], indent=2) + "\n",
            encoding="utf-8",
        )
    except (NavigationError, ValueError, OSError) as e:
        _fail(e)

    click.echo(click.style(f"Wrote {len(posts)} doc posts to {target}", fg="green"))


@cli.command()
@config_option
@items_file_option
@verbose_option
def tree(config_path: Path | None, items_file: Path | None, verbose: bool) -> None:
    """Print the navigation tree as JSON."""
    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(items_file=items_file)
        loaded = ItemsLoader(config.docs.items_file).load()
        nav_tree = build_nav_tree(loaded.items)
    except (NavigationError, ValueError, OSError) as e:
        _fail(e)

    click.echo(json.dumps(tree_to_dict(nav_tree), indent=2))


@cli.command()
@config_option
@items_file_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@verbose_option
def serve(
    config_path: Path | None,
    items_file: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the navigation API server."""
    from docnav.server import run_server

    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            items_file=items_file,
        )
    except (ValueError, OSError) as e:
        _fail(e)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Items file: {config.docs.items_file}")

    run_server(config)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(error: Exception) -> NoReturn:
    click.echo(click.style(f"Error: {error}", fg="red"), err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
