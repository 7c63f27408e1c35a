"""
Pydantic models for frameio-b2.

This package contains all Pydantic models used in the application:
- assets: Frame.io asset payloads and flattened export entries
- forms: Custom action form descriptors
- callback: Inbound callback bodies
- transfer: Export and import results
- config: Bridge settings
"""

from .base import BridgeBaseModel, FrameioBaseModel
from .assets import AssetNode, ExportEntry, ProjectRef
from .forms import FormDescriptor, FormField, FormOption
from .transfer import (
    ExportResult,
    ExportSummary,
    ImportRequest,
    ImportResult,
    StoredObject,
    TransferResult,
)
from .callback import CallbackRequest, ResourceRef
from .config import BridgeConfig

__all__ = [
    "BridgeBaseModel",
    "FrameioBaseModel",
    "AssetNode",
    "ExportEntry",
    "ProjectRef",
    "FormDescriptor",
    "FormField",
    "FormOption",
    "ExportResult",
    "ExportSummary",
    "ImportRequest",
    "ImportResult",
    "StoredObject",
    "TransferResult",
    "CallbackRequest",
    "ResourceRef",
    "BridgeConfig",
]
