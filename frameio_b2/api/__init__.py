"""
Collaborator API clients.

This package provides clients for the two external services:
- Frame.io asset API (listing, folder and asset creation)
- Backblaze B2 storage (streaming uploads and signed downloads)
"""

from .auth import BearerTokenAuth
from .b2_client import B2Client
from .frameio_client import FrameioClient

__all__ = ["BearerTokenAuth", "B2Client", "FrameioClient"]
