"""
Models for Frame.io assets and the flattened export list.

``AssetNode`` mirrors the parts of a Frame.io asset payload the bridge reads;
``ExportEntry`` is one file ready to be copied to storage.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from .base import BridgeBaseModel, FrameioBaseModel

# ============================================================================
# Asset Types
# ============================================================================

ASSET_TYPE_FOLDER = "folder"
ASSET_TYPE_VERSION_STACK = "version_stack"
ASSET_TYPE_FILE = "file"

# Asset types whose children are expanded during flattening
CONTAINER_ASSET_TYPES = (ASSET_TYPE_FOLDER, ASSET_TYPE_VERSION_STACK)


class ProjectRef(FrameioBaseModel):
    """Project record embedded in an asset payload."""

    root_asset_id: str
    name: str


class AssetNode(FrameioBaseModel):
    """
    A Frame.io asset: folder, version stack or file.

    Attributes:
        id: Asset identifier
        type: Asset type (folder, version_stack, file, ...)
        name: Display name of the asset
        filesize: Size in bytes (files only)
        original: Download URL of the original media (files only)
        project: Enclosing project, when the API includes it
    """

    id: str
    type: str
    name: str = ""
    filesize: Optional[int] = None
    original: Optional[str] = None
    project: Optional[ProjectRef] = None

    @property
    def is_container(self) -> bool:
        """Check if the asset has children to expand."""
        return self.type in CONTAINER_ASSET_TYPES

    @property
    def is_file(self) -> bool:
        """Check if the asset is a single file."""
        return self.type == ASSET_TYPE_FILE

    @property
    def children_path(self) -> str:
        """API path listing this asset's children."""
        return f"{self.id}/children"


class ExportEntry(BridgeBaseModel):
    """
    A single file ready to be copied to storage.

    Attributes:
        url: Source download URL
        name: Relative path of the file, built from its ancestor folder names
        filesize: Size in bytes
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    url: Optional[str] = None
    name: str
    filesize: Optional[int] = Field(default=None, ge=0)


__all__ = [
    "ASSET_TYPE_FOLDER",
    "ASSET_TYPE_VERSION_STACK",
    "ASSET_TYPE_FILE",
    "CONTAINER_ASSET_TYPES",
    "ProjectRef",
    "AssetNode",
    "ExportEntry",
]
