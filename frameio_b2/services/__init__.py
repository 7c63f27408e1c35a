"""
Service layer for frameio-b2.

This package provides high-level services that orchestrate the callback
handling, abstracting the complexity of verification, dialogue and transfers.
"""

from .bridge_service import BridgeService

__all__ = ["BridgeService"]
