"""CLI entry point for pkgdocs."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, BinaryIO

import click

from pkgdocs import __version__

if TYPE_CHECKING:
    from pkgdocs.container import Container

_config_option = click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Path to config file (default: ~/.pkgdocs/config.yaml)",
)
_verbose_option = click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose (DEBUG) logging",
)


@click.group()
@click.version_option(version=__version__, prog_name="pkgdocs")
def main() -> None:
    """Pkgdocs: documentation link rewriting and source links for package pages."""
    pass


@main.command()
@click.argument("html_file", type=click.File("rb"))
@click.option("--goos", default="", help="GOOS the documentation was rendered for")
@click.option("--goarch", default="", help="GOARCH the documentation was rendered for")
@_config_option
@_verbose_option
def render(
    html_file: BinaryIO,
    goos: str,
    goarch: str,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Render stored documentation HTML, rewriting links if enabled."""
    _setup_logging(verbose)

    from pkgdocs.core.models import VersionedPackage

    container = _load_container(config_path, verbose)
    pkg = VersionedPackage(
        path="",
        module_path="",
        version="",
        goos=goos,
        goarch=goarch,
        documentation_html=html_file.read(),
    )
    details = container.renderer.render(pkg)
    click.echo(details.documentation, nl=False)


@main.command()
@click.argument("module_path")
@click.argument("version")
@click.argument("file_path")
@_config_option
@_verbose_option
def source(
    module_path: str, version: str, file_path: str, config_path: str | None, verbose: bool
) -> None:
    """Print the source location of FILE_PATH in MODULE_PATH at VERSION."""
    _setup_logging(verbose)

    container = _load_container(config_path, verbose)
    click.echo(container.source_locator.locate(module_path, version, file_path))


@main.command()
@click.argument("version")
@_config_option
@_verbose_option
def tag(version: str, config_path: str | None, verbose: bool) -> None:
    """Print the standard library repository tag for VERSION."""
    _setup_logging(verbose)

    from pkgdocs.core.errors import TagResolutionError

    container = _load_container(config_path, verbose)
    try:
        click.echo(container.tag_resolver.resolve(version))
    except TagResolutionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _load_container(config_path: str | None, verbose: bool) -> Container:
    """Load config and build the production container, exiting on config errors."""
    from pkgdocs.config import load_config
    from pkgdocs.container import Container

    try:
        config = load_config(config_path)
    except Exception as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)

    if not verbose:
        logging.getLogger().setLevel(config.log_level)
    return Container.create_default(config)


def _setup_logging(verbose: bool) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
