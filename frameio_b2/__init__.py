"""
frameio-b2 - A bridge between Frame.io and Backblaze B2.

This package answers Frame.io custom action callbacks: it verifies them,
walks the user through a short form dialogue, then exports Frame.io assets
to a B2 bucket or imports a B2 object into Frame.io.
"""

from ._version import __version__

__author__ = "frameio-b2 developers"

# Import main classes and functions for easy access
from .api import B2Client, BearerTokenAuth, FrameioClient
from .dialogue import next_form, resolve_direction
from .exceptions import (
    AuthenticationError,
    BridgeError,
    ConfigurationError,
    DialogueError,
    ImportFailure,
    TransferError,
    TraversalError,
)
from .models import BridgeConfig, CallbackRequest, ExportEntry, ExportResult, ImportRequest, ImportResult
from .services import BridgeService
from .transfer import AssetTreeFlattener, export_files, import_file
from .utils import setup_logging, verify_timestamp_and_signature
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "B2Client",
    "BearerTokenAuth",
    "FrameioClient",
    "next_form",
    "resolve_direction",
    "AuthenticationError",
    "BridgeError",
    "ConfigurationError",
    "DialogueError",
    "ImportFailure",
    "TransferError",
    "TraversalError",
    "BridgeConfig",
    "CallbackRequest",
    "ExportEntry",
    "ExportResult",
    "ImportRequest",
    "ImportResult",
    "BridgeService",
    "AssetTreeFlattener",
    "export_files",
    "import_file",
    "setup_logging",
    "verify_timestamp_and_signature",
    "cli_main",
    "cli_group",
]
