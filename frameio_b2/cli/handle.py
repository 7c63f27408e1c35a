"""
Handle command for frameio-b2 CLI.

Replays a saved custom action callback through the same verification,
dialogue and transfer path a web host would use.
"""

from typing import BinaryIO

import click

from ..utils.constants import SIGNATURE_HEADER, TIMESTAMP_HEADER
from .common import echo_json, load_config, run_operation


@click.command()
@click.option(
    "--body",
    "body_file",
    required=True,
    type=click.File("rb"),
    help="File with the raw callback body ('-' for stdin)",
)
@click.option("--timestamp", required=True, help=f"Value of the {TIMESTAMP_HEADER} header")
@click.option("--signature", required=True, help=f"Value of the {SIGNATURE_HEADER} header")
@click.option("--encoding", default="utf-8", show_default=True, help="Encoding of the callback body")
@click.pass_context
def handle(ctx: click.Context, body_file: BinaryIO, timestamp: str, signature: str, encoding: str) -> None:
    """Process a saved Frame.io callback and print the response."""
    config = load_config(ctx)
    body = body_file.read()
    headers = {TIMESTAMP_HEADER: timestamp, SIGNATURE_HEADER: signature}
    response = run_operation(
        config, "callback handling", lambda service: service.handle_callback(headers, body, encoding)
    )
    echo_json(response)


__all__ = ["handle"]
