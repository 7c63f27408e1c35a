"""
Transfer operations between Frame.io and Backblaze B2.

Modules:
    - flatten: Asset tree flattening into export entries
    - export: Concurrent export of flattened files to storage
    - importer: Import of one storage object into Frame.io
"""

from .flatten import AssetTreeFlattener
from .export import export_files, settle, transfer_entries
from .importer import derive_destination_name, import_file, prepare_destination_folder

__all__ = [
    "AssetTreeFlattener",
    "export_files",
    "settle",
    "transfer_entries",
    "derive_destination_name",
    "import_file",
    "prepare_destination_folder",
]
