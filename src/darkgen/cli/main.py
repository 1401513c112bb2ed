"""darkgen CLI entry point: regenerate the dark-theme override block."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from darkgen import __version__
from darkgen.config import DEFAULT_ROOT_URL, DEFAULT_TARGET, FormatOptions, GeneratorConfig
from darkgen.errors import DarkgenError
from darkgen.generator import generate
from darkgen.splicer import splice_file


@click.command()
@click.version_option(version=__version__, prog_name="darkgen")
@click.option("--url", default=DEFAULT_ROOT_URL, show_default=True, help="Page whose stylesheets are scanned")
@click.option(
    "--target",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_TARGET,
    help="Stylesheet to splice the generated rules into",
)
@click.option("--timeout", type=float, default=None, help="Per-request timeout in seconds")
@click.option(
    "--style",
    type=click.Choice(["expanded", "compact"]),
    default="expanded",
    show_default=True,
    help="Output format of generated rules",
)
@click.option("--dry-run", is_flag=True, help="Print the generated block instead of writing it")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(
    url: str,
    target: Path,
    timeout: float | None,
    style: str,
    dry_run: bool,
    verbose: bool,
) -> None:
    """Regenerate the auto-generated dark-theme rules from a live site's CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    config = GeneratorConfig(
        root_url=url,
        target_path=target,
        timeout=timeout,
        format=FormatOptions(style=style),
    )

    try:
        generated = generate(config)
        if dry_run:
            click.echo(generated)
            return
        splice_file(config.target_path, generated)
    except DarkgenError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
