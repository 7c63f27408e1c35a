"""
Exception hierarchy for the Frame.io / Backblaze B2 bridge.

Each exception carries the HTTP status a host web layer should answer with.
Only ``AuthenticationError`` maps to a client error; everything else is
surfaced as a generic internal error with no user-facing detail.
"""


class BridgeError(Exception):
    """Base class for all bridge errors."""

    status_code = 500


class ConfigurationError(BridgeError):
    """Required configuration is missing or invalid."""


class AuthenticationError(BridgeError):
    """Callback timestamp is missing/stale or its signature does not match."""

    status_code = 403


class DialogueError(BridgeError):
    """The submitted form data cannot be interpreted."""


class TraversalError(BridgeError):
    """Asset tree flattening hit an asset it cannot export."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class TransferError(BridgeError):
    """A single file could not be copied to storage."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Failed to transfer {name}: {reason}")
        self.name = name
        self.reason = reason


class ImportFailure(BridgeError):
    """Importing a storage object into Frame.io was aborted."""


__all__ = [
    "BridgeError",
    "ConfigurationError",
    "AuthenticationError",
    "DialogueError",
    "TraversalError",
    "TransferError",
    "ImportFailure",
]
