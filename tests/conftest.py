"""
Test fixtures and fake collaborators for frameio-b2 tests.

This module provides common fixtures, in-memory stand-ins for the Frame.io
and B2 clients, and helpers for building asset trees and signed callbacks.
"""

import json
import threading
import time
from typing import Any, Dict, List, Optional

import pytest
import respx

from frameio_b2.exceptions import TransferError
from frameio_b2.models.assets import AssetNode
from frameio_b2.models.config import BridgeConfig
from frameio_b2.models.transfer import StoredObject
from frameio_b2.utils.signature import compute_signature

API_URL = "https://api.frame.io/v2"
SECRET = "test-secret"


def file_asset(asset_id: str, name: str, filesize: int, project: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Build a file asset payload."""
    payload = {
        "id": asset_id,
        "type": "file",
        "name": name,
        "filesize": filesize,
        "original": f"https://assets.frame.io/{asset_id}/{name}",
    }
    if project:
        payload["project"] = project
    return payload


def folder_asset(
    asset_id: str, name: str, asset_type: str = "folder", project: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """Build a folder or version stack asset payload."""
    payload = {"id": asset_id, "type": asset_type, "name": name}
    if project:
        payload["project"] = project
    return payload


class FakeFrameio:
    """In-memory asset API keyed by request path."""

    def __init__(self, tree: Dict[str, List[Dict[str, Any]]]) -> None:
        self.tree = tree
        self.calls: List[str] = []
        self.created_folders: List[tuple] = []
        self.created_assets: List[tuple] = []
        self.folder_error: Optional[Exception] = None
        self._lock = threading.Lock()

    def get_assets(self, path: str) -> List[AssetNode]:
        with self._lock:
            self.calls.append(path)
        return [AssetNode(**payload) for payload in self.tree.get(path, [])]

    def create_folder(self, parent_id: str, base_path: str) -> AssetNode:
        if self.folder_error is not None:
            raise self.folder_error
        self.created_folders.append((parent_id, base_path))
        return AssetNode(id="download-folder", type="folder", name=base_path)

    def create_asset(
        self, name: str, parent: AssetNode, source_url: str, filesize: Optional[int] = None
    ) -> Dict[str, Any]:
        self.created_assets.append((name, parent.id, source_url, filesize))
        return {"id": "new-asset", "name": name, "type": "file", "parent_id": parent.id}


class FakeStorage:
    """In-memory storage client; uploads of names in ``failing`` raise."""

    def __init__(self, failing: Optional[set] = None, delays: Optional[Dict[str, float]] = None) -> None:
        self.failing = failing or set()
        self.delays = delays or {}
        self.uploads: List[tuple] = []
        self.sign_error: Optional[Exception] = None
        self._lock = threading.Lock()

    def stream_upload(self, source_url: str, dest_name: str, filesize: Optional[int] = None) -> StoredObject:
        time.sleep(self.delays.get(dest_name, 0))
        with self._lock:
            self.uploads.append((source_url, dest_name, filesize))
        if dest_name in self.failing:
            raise TransferError(dest_name, "connection reset")
        return StoredObject(bucket="media", key=f"exports/{dest_name}", filesize=filesize)

    def create_signed_download_url(self, path: str) -> str:
        if self.sign_error is not None:
            raise self.sign_error
        return f"https://s3.example.com/media/{path}?signature=abc"


@pytest.fixture
def sample_tree():
    """Folder A holding x.txt and folder B holding y.txt."""
    return {
        "folder-a": [folder_asset("folder-a", "A")],
        "folder-a/children": [file_asset("x", "x.txt", 10), folder_asset("folder-b", "B")],
        "folder-b/children": [file_asset("y", "y.txt", 20)],
    }


@pytest.fixture
def fake_frameio(sample_tree):
    """Fake asset client serving the sample tree."""
    return FakeFrameio(sample_tree)


@pytest.fixture
def fake_storage():
    """Fake storage client where every upload succeeds."""
    return FakeStorage()


@pytest.fixture
def bridge_config():
    """Bridge settings for tests."""
    return BridgeConfig(
        frameio_secret=SECRET,
        frameio_token="fio-token",
        frameio_api_url=API_URL,
        bucket_name="media",
        b2_key_id="key-id",
        b2_application_key="app-key",
        b2_endpoint_url="https://s3.us-west-004.backblazeb2.com",
        upload_path="exports/",
        download_path="imports/b2",
    )


@pytest.fixture
def httpx_mock():
    """Provide respx mock for HTTP mocking."""
    with respx.mock:
        yield respx


def signed_headers(body: bytes, secret: str = SECRET, timestamp: Optional[str] = None) -> Dict[str, str]:
    """Build the headers Frame.io would send with a body."""
    timestamp = timestamp or str(int(time.time()))
    return {
        "X-Frameio-Request-Timestamp": timestamp,
        "X-Frameio-Signature": compute_signature(timestamp, body, secret),
    }


def callback_body(data: Optional[Dict[str, Any]], request_type: str = "import-export", **extra: Any) -> bytes:
    """Build a callback body."""
    payload = {"type": request_type, "data": data, "resource": {"id": "folder-a", "type": "folder"}, **extra}
    return json.dumps(payload).encode("utf-8")
