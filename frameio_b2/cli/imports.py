"""
Import command for frameio-b2 CLI.

This module provides the import command for copying one B2 object into Frame.io.
"""

from typing import Optional

import click

from ..models.transfer import ImportRequest
from .common import echo_json, load_config, run_operation


@click.command(name="import")
@click.option("--resource-id", required=True, help="Frame.io asset id whose project receives the file")
@click.option("--b2-path", required=True, help="Object path inside the bucket")
@click.option("--filesize", type=click.IntRange(min=0), default=None, help="Size of the object in bytes")
@click.pass_context
def import_command(ctx: click.Context, resource_id: str, b2_path: str, filesize: Optional[int]) -> None:
    """Import a file from Backblaze B2 into Frame.io."""
    config = load_config(ctx, use_wrapping=True)
    request = ImportRequest(resource_id=resource_id, b2path=b2_path, filesize=filesize)
    result = run_operation(config, "import", lambda service: service.import_(request))
    echo_json(result.to_response())


__all__ = ["import_command"]
