"""
Import of a single Backblaze B2 object into Frame.io.

Signing the download URL and preparing the destination folder run side
by side. Both must succeed before the asset is created; a failure in
either aborts the import and nothing is created in Frame.io.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait

from ..exceptions import ImportFailure, TraversalError
from ..models.assets import AssetNode
from ..models.transfer import ImportRequest, ImportResult
from ..protocols import AssetClientProtocol, StorageClientProtocol
from ..utils.constants import PATH_SEPARATOR
from ..utils.error_handling import describe_error


def derive_destination_name(b2path: str, upload_path: str = "") -> str:
    """
    Derive the Frame.io asset name for an object path.

    Objects exported earlier live under the upload path; that prefix is
    dropped when they are imported back.

    Args:
        b2path: Object path inside the bucket
        upload_path: Configured export prefix

    Returns:
        Name without the upload prefix and without a leading separator

    Example:
        >>> derive_destination_name("exports/foo/bar.mov", "exports/")
        'foo/bar.mov'
    """
    name = b2path.removeprefix(upload_path) if upload_path else b2path
    return name.removeprefix(PATH_SEPARATOR)


def prepare_destination_folder(frameio: AssetClientProtocol, resource_id: str, download_path: str) -> AssetNode:
    """
    Ensure the download folder exists in the resource's project.

    Args:
        frameio: Asset API client
        resource_id: Asset the custom action was triggered on
        download_path: Folder path below the project root

    Returns:
        The destination folder
    """
    assets = frameio.get_assets(resource_id)
    if not assets or assets[0].project is None:
        raise TraversalError(f"Cannot find the project of asset {resource_id}", path=resource_id)

    root_id = assets[0].project.root_asset_id
    logging.info("Project root of %s: %s", resource_id, root_id)
    return frameio.create_folder(root_id, download_path)


def import_file(
    frameio: AssetClientProtocol,
    storage: StorageClientProtocol,
    request: ImportRequest,
    upload_path: str = "",
    download_path: str = "",
) -> ImportResult:
    """
    Import one storage object into the resource's project.

    Args:
        frameio: Asset API client
        storage: Storage client
        request: What to import and where it was requested from
        upload_path: Export prefix stripped from the asset name
        download_path: Folder path imported files are placed in

    Returns:
        ImportResult merging the request with the created asset

    Raises:
        ImportFailure: If signing the URL or preparing the folder fails
    """
    logging.info("Importing %s into project of %s", request.b2path, request.resource_id)

    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="import") as executor:
        signed_url_future = executor.submit(storage.create_signed_download_url, request.b2path)
        folder_future = executor.submit(prepare_destination_folder, frameio, request.resource_id, download_path)
        wait([signed_url_future, folder_future])

    for step, future in (("sign download URL", signed_url_future), ("prepare destination folder", folder_future)):
        error = future.exception()
        if error is not None:
            logging.error("Import of %s aborted, could not %s: %s", request.b2path, step, error)
            raise ImportFailure(f"Could not {step} for {request.b2path}: {describe_error(error)}") from error

    name = derive_destination_name(request.b2path, upload_path)
    created = frameio.create_asset(name, folder_future.result(), signed_url_future.result(), request.filesize)
    logging.info("Imported %s as %s", request.b2path, name)

    # Created asset fields win over the request fields, as in a dict merge
    merged = {"b2path": request.b2path, "id": request.resource_id, "filesize": request.filesize, **created}
    return ImportResult(**merged)


__all__ = ["derive_destination_name", "prepare_destination_folder", "import_file"]
