"""
Asset tree flattening.

Expands a Frame.io asset tree (folders, version stacks and files) into an
ordered flat list of files to export. Traversal is depth-first pre-order,
siblings keep the order the API returned them in, and each file's name is
the path of its ancestor folders joined with ``/``.

The traversal uses an explicit stack so deep trees never hit the
interpreter's recursion limit, and ``iter_entries`` can be consumed
partially.
"""

import logging
from typing import Iterator, List, Tuple, Union

from ..exceptions import TraversalError
from ..models.assets import AssetNode, ExportEntry
from ..protocols import AssetClientProtocol
from ..utils.constants import DEPTH_ASSET, DEPTH_PROJECT, PATH_SEPARATOR

# Stack items: (asset path to fetch, prefix) or (asset, prefix)
_WorkItem = Tuple[Union[str, AssetNode], str]


class AssetTreeFlattener:
    """Flatten Frame.io asset trees into export entries."""

    def __init__(self, client: AssetClientProtocol) -> None:
        """
        Initialize the flattener.

        Args:
            client: Asset API client used to fetch each level of the tree
        """
        self.client = client

    def resolve_project_root(self, asset_path: str) -> Tuple[str, str]:
        """
        Find the project enclosing the asset(s) at a path.

        Args:
            asset_path: Asset id or children path

        Returns:
            Tuple of (children path of the project root, project name prefix)

        Raises:
            TraversalError: If no asset or no project record is found
        """
        assets = self.client.get_assets(asset_path)
        if not assets:
            raise TraversalError(f"No asset found at {asset_path}", path=asset_path)

        project = assets[0].project
        if project is None:
            raise TraversalError(f"Asset {assets[0].id} carries no project record", path=asset_path)

        logging.info("Exporting entire project %s (root %s)", project.name, project.root_asset_id)
        return f"{project.root_asset_id}/children", f"{project.name}{PATH_SEPARATOR}"

    def iter_entries(self, asset_path: str, path_prefix: str = "", depth: str = DEPTH_ASSET) -> Iterator[ExportEntry]:
        """
        Lazily walk the tree below a path, yielding one entry per file.

        Args:
            asset_path: Asset id or children path to start from
            path_prefix: Prefix prepended to every exported name
            depth: ``"project"`` restarts the walk at the enclosing project root

        Yields:
            ExportEntry objects in depth-first pre-order

        Raises:
            TraversalError: On an asset type that cannot be exported
        """
        if depth == DEPTH_PROJECT:
            asset_path, path_prefix = self.resolve_project_root(asset_path)

        stack: List[_WorkItem] = [(asset_path, path_prefix)]
        while stack:
            item, prefix = stack.pop()

            if isinstance(item, str):
                assets = self.client.get_assets(item)
                logging.debug("Listing %s, %r, %d asset(s)", item, prefix, len(assets))
                # Reversed so the first sibling is popped first
                stack.extend((asset, prefix) for asset in reversed(assets))
                continue

            if item.is_container:
                stack.append((item.children_path, f"{prefix}{item.name}{PATH_SEPARATOR}"))
            elif item.is_file:
                yield ExportEntry(url=item.original, name=f"{prefix}{item.name}", filesize=item.filesize)
            else:
                path = f"{prefix}{item.name}"
                logging.error("Unknown asset type %r at %s (id %s)", item.type, path, item.id)
                raise TraversalError(f"Unknown asset type {item.type!r} at {path}", path=path)

    def flatten(self, asset_path: str, path_prefix: str = "", depth: str = DEPTH_ASSET) -> List[ExportEntry]:
        """
        Flatten the tree below a path into a list of export entries.

        Args:
            asset_path: Asset id or children path to start from
            path_prefix: Prefix prepended to every exported name
            depth: ``"asset"`` for the selected asset(s), ``"project"`` for the whole project

        Returns:
            Export entries in depth-first pre-order

        Example:
            >>> AssetTreeFlattener(client).flatten("folder-id")
            [ExportEntry(url=..., name='A/x.txt', filesize=10), ...]
        """
        entries = list(self.iter_entries(asset_path, path_prefix, depth))
        logging.info("Flattened %s into %d file(s)", asset_path, len(entries))
        return entries


__all__ = ["AssetTreeFlattener"]
