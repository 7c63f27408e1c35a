"""
Export of Frame.io assets to Backblaze B2.

Every file of the flattened tree is copied by its own task; all tasks
are started at once and the export waits for every one of them to settle.
A failed copy is recorded in that file's result and never stops the
others. Results come back in the order of the flattened tree.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import List, Optional

from ..models.assets import ExportEntry
from ..models.transfer import ExportResult, ExportSummary, TransferResult
from ..protocols import AssetClientProtocol, StorageClientProtocol
from ..utils.constants import DEPTH_ASSET
from ..utils.error_handling import describe_error
from .flatten import AssetTreeFlattener


def settle(future: Future) -> TransferResult:
    """
    Turn a finished transfer future into a settled outcome.

    Args:
        future: Completed future of ``stream_upload``

    Returns:
        Fulfilled outcome with the stored object, or rejected outcome with the reason
    """
    error = future.exception()
    if error is not None:
        return TransferResult.rejected(describe_error(error))
    return TransferResult.fulfilled(future.result())


def transfer_entries(
    storage: StorageClientProtocol, entries: List[ExportEntry], max_workers: Optional[int] = None
) -> List[ExportResult]:
    """
    Copy entries to storage concurrently and collect one result per entry.

    Args:
        storage: Storage client
        entries: Files to copy
        max_workers: Optional cap on concurrent copies (default: one worker per entry)

    Returns:
        ExportResult list where result[i] belongs to entries[i]
    """
    if not entries:
        return []

    workers = min(max_workers, len(entries)) if max_workers else len(entries)
    logging.info("Transferring %d file(s) with %d worker(s)", len(entries), workers)

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="export") as executor:
        futures = [executor.submit(storage.stream_upload, entry.url, entry.name, entry.filesize) for entry in entries]
        wait(futures)

    results = []
    for entry, future in zip(entries, futures):
        outcome = settle(future)
        if not outcome.is_fulfilled:
            logging.error("Failed to export %s: %s", entry.name, outcome.reason)
        results.append(ExportResult.from_outcome(entry, outcome))
    return results


def export_files(
    frameio: AssetClientProtocol,
    storage: StorageClientProtocol,
    resource_id: str,
    depth: str = DEPTH_ASSET,
    max_workers: Optional[int] = None,
) -> List[ExportResult]:
    """
    Export the asset(s) below a resource to storage.

    Args:
        frameio: Asset API client
        storage: Storage client
        resource_id: Asset the custom action was triggered on
        depth: ``"asset"`` for the selected asset(s), ``"project"`` for the whole project
        max_workers: Optional cap on concurrent copies

    Returns:
        One ExportResult per flattened file, in flattened order

    Raises:
        TraversalError: If the tree cannot be flattened; no copy is started
    """
    entries = AssetTreeFlattener(frameio).flatten(resource_id, "", depth)
    results = transfer_entries(storage, entries, max_workers)

    summary = ExportSummary.from_results(results)
    log = logging.warning if summary.has_failures else logging.info
    log("Export of %s finished: %d succeeded, %d failed", resource_id, summary.fulfilled, summary.rejected)
    return results


__all__ = ["settle", "transfer_entries", "export_files"]
