"""
Collaborator protocols for type safety.

The flattener and the transfer orchestration only depend on these
interfaces, so tests and alternative backends can supply any object with
matching methods.
"""

from typing import Any, Dict, List, Optional, Protocol

from ..models.assets import AssetNode
from ..models.transfer import StoredObject


class AssetClientProtocol(Protocol):
    """Interface of the media asset platform client."""

    def get_assets(self, path: str) -> List[AssetNode]:
        """
        Fetch the asset(s) at an id or ``<id>/children`` path.

        Args:
            path: Asset id or children path

        Returns:
            Assets in source order
        """
        ...

    def create_folder(self, parent_id: str, base_path: str) -> AssetNode:
        """
        Ensure a folder path exists below a parent asset.

        Args:
            parent_id: Asset id to start from
            base_path: Folder path to ensure

        Returns:
            The innermost folder
        """
        ...

    def create_asset(
        self, name: str, parent: AssetNode, source_url: str, filesize: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Create a file asset ingested from a remote URL.

        Returns:
            The created asset descriptor
        """
        ...


class StorageClientProtocol(Protocol):
    """Interface of the object storage client."""

    def stream_upload(self, source_url: str, dest_name: str, filesize: Optional[int] = None) -> StoredObject:
        """
        Copy a remote file into storage.

        Returns:
            Metadata of the stored object
        """
        ...

    def create_signed_download_url(self, path: str) -> str:
        """
        Create a time-limited download URL for an object.

        Returns:
            Signed URL
        """
        ...


__all__ = ["AssetClientProtocol", "StorageClientProtocol"]
