"""
Unified CLI entry point for frameio-b2 operations using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click

from . import export, handle, imports
from .._version import __version__


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="frameio-b2")
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to config file (default: ~/.config/frameio-b2/config.toml)",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP and S3 logs)",
)
@click.option(
    "--max-workers",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of concurrent export transfers (default: one per file)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], debug: int, max_workers: Optional[int]) -> None:
    """frameio-b2 - Copy assets between Frame.io and Backblaze B2."""
    # Store shared options in context for subcommands to access
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debug"] = debug
    ctx.obj["max_workers"] = max_workers


# Register subcommands
cli.add_command(export.export)
cli.add_command(imports.import_command)
cli.add_command(handle.handle)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main"]
