"""
Export command for frameio-b2 CLI.

This module provides the export command for copying Frame.io assets to B2.
"""

import logging
import sys

import click

from ..models.transfer import ExportSummary
from ..utils.constants import DEPTH_ASSET, DEPTH_PROJECT
from .common import echo_json, load_config, run_operation


@click.command()
@click.option("--resource-id", required=True, help="Frame.io asset id to export")
@click.option(
    "--depth",
    type=click.Choice([DEPTH_ASSET, DEPTH_PROJECT]),
    default=DEPTH_ASSET,
    show_default=True,
    help="Export the asset itself or its entire project",
)
@click.pass_context
def export(ctx: click.Context, resource_id: str, depth: str) -> None:
    """Export Frame.io assets to Backblaze B2."""
    config = load_config(ctx, use_wrapping=True)
    results = run_operation(config, "export", lambda service: service.export(resource_id, depth))

    echo_json([result.to_response() for result in results])

    summary = ExportSummary.from_results(results)
    if summary.has_failures:
        logging.error("Export completed with %d failed file(s) out of %d", summary.rejected, summary.total)
        sys.exit(1)
    logging.info("All %d file(s) exported successfully", summary.total)


__all__ = ["export"]
