"""
Protocols for type safety.

This package provides protocols that define the interfaces of the
external collaborators used by the transfer orchestration.
"""

from .collaborator_protocol import AssetClientProtocol, StorageClientProtocol

__all__ = ["AssetClientProtocol", "StorageClientProtocol"]
