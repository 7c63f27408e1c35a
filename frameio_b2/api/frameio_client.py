"""
Frame.io API client.

Thin wrapper over the Frame.io v2 REST API covering the three calls the
bridge needs: listing assets, ensuring a folder path exists and creating a
file asset from a remote URL.
"""

# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# Third-party imports
import httpx

# Local imports
from ..models.assets import ASSET_TYPE_FOLDER, AssetNode
from ..models.config import BridgeConfig
from ..utils import create_session_with_retry
from ..utils.constants import DEFAULT_FRAMEIO_API_URL, DEFAULT_TIMEOUT, PATH_SEPARATOR
from ..utils.error_handling import with_error_handling
from .auth import BearerTokenAuth

# Page size requested when listing children
PAGE_SIZE = 100


class FrameioClient:
    """
    A client for interacting with the Frame.io API.

    API documentation: https://developer.frame.io/api/reference/

    ``get_assets`` accepts either an asset id (``<id>``) or a children path
    (``<id>/children``) and always returns a list of assets.
    """

    def __init__(self, token: str, api_url: str = DEFAULT_FRAMEIO_API_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the Frame.io client.

        Args:
            token: Frame.io API token
            api_url: API root URL
            timeout: Request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.session = create_session_with_retry(auth=BearerTokenAuth(token), base_url=self.api_url, timeout=timeout)

    @classmethod
    def from_config(cls, config: BridgeConfig) -> "FrameioClient":
        """Create a client from bridge settings."""
        config.require("frameio_token")
        return cls(config.frameio_token, config.frameio_api_url)

    def close(self) -> None:
        """Close the session and release all connections."""
        self.session.close()
        logging.debug("FrameioClient session closed")

    def __enter__(self) -> "FrameioClient":
        return self

    def __exit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        self.close()

    def _check_response(self, response: httpx.Response, operation: str) -> None:
        """Raise for error responses, logging the body for diagnosis."""
        if response.is_error:
            logging.error("Failed to %s: %s - %s", operation, response.status_code, response.text)
        response.raise_for_status()

    # ------------------------------------------------------------------
    # Assets
    # ------------------------------------------------------------------

    @with_error_handling("list Frame.io assets")
    def get_assets(self, path: str) -> List[AssetNode]:
        """
        Fetch the asset(s) at an id or children path.

        Children listings are followed across pages.

        Args:
            path: Asset id or ``<id>/children``

        Returns:
            List of assets in the order returned by the API
        """
        url = f"/assets/{path}"
        params: Dict[str, Any] = {"include": "project"}
        is_listing = path.endswith("/children")
        if is_listing:
            params["page_size"] = PAGE_SIZE

        assets: List[AssetNode] = []
        page = 1
        while True:
            if is_listing:
                params["page"] = page
            response = self.session.get(url, params=params)
            self._check_response(response, f"get assets at {path}")

            payload = response.json()
            items = payload if isinstance(payload, list) else [payload]
            assets.extend(AssetNode(**item) for item in items)

            total_pages = int(response.headers.get("total-pages", 1))
            if not is_listing or page >= total_pages:
                break
            page += 1

        logging.debug("Fetched %d asset(s) at %s", len(assets), path)
        return assets

    @with_error_handling("create Frame.io folder")
    def create_folder(self, parent_id: str, base_path: str) -> AssetNode:
        """
        Ensure a folder path exists below a parent asset.

        Each segment of ``base_path`` is matched against the existing child
        folders by name and created when missing.

        Args:
            parent_id: Asset id to start from (usually the project root)
            base_path: Folder path such as ``imports/b2``

        Returns:
            The innermost folder
        """
        folder = AssetNode(id=parent_id, type=ASSET_TYPE_FOLDER)
        for segment in [part for part in base_path.split(PATH_SEPARATOR) if part]:
            existing = next(
                (
                    child
                    for child in self.get_assets(folder.children_path)
                    if child.type == ASSET_TYPE_FOLDER and child.name == segment
                ),
                None,
            )
            if existing is not None:
                logging.debug("Reusing folder %s (%s)", segment, existing.id)
                folder = existing
                continue

            response = self.session.post(
                f"/assets/{folder.id}/children", json={"type": ASSET_TYPE_FOLDER, "name": segment}
            )
            self._check_response(response, f"create folder {segment}")
            folder = AssetNode(**response.json())
            logging.info("Created folder %s (%s)", segment, folder.id)
        return folder

    @with_error_handling("create Frame.io asset")
    def create_asset(
        self, name: str, parent: AssetNode, source_url: str, filesize: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Create a file asset that Frame.io ingests from a remote URL.

        Args:
            name: Asset name
            parent: Folder to create the asset in
            source_url: URL Frame.io downloads the media from
            filesize: Size in bytes

        Returns:
            The created asset as returned by the API
        """
        body: Dict[str, Any] = {"type": "file", "name": name, "source": {"url": source_url}}
        if filesize is not None:
            body["filesize"] = filesize

        response = self.session.post(f"/assets/{parent.id}/children", json=body)
        self._check_response(response, f"create asset {name}")
        logging.info("Created asset %s in folder %s", name, parent.id)
        return response.json()


__all__ = ["FrameioClient"]
