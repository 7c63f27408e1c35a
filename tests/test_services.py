"""Tests for the callback service."""

import json
from unittest.mock import Mock, patch

import pytest

from conftest import FakeFrameio, FakeStorage, callback_body, file_asset, signed_headers

from frameio_b2.exceptions import AuthenticationError, DialogueError
from frameio_b2.models.transfer import ImportRequest
from frameio_b2.services.bridge_service import BridgeService


@pytest.fixture
def service(bridge_config, fake_frameio, fake_storage):
    """Service wired to the fake collaborators."""
    return BridgeService(bridge_config, fake_frameio, fake_storage)


class TestHandleCallback:
    """Test BridgeService.handle_callback."""

    def test_first_question(self, service):
        """Test the generic action answers with the copytype form."""
        body = callback_body(None)

        response = service.handle_callback(signed_headers(body), body)

        assert response["title"] == "Import or Export?"
        assert response["fields"][0]["name"] == "copytype"

    def test_import_question_mentions_bucket(self, service):
        """Test the import question names the configured bucket."""
        body = callback_body({"copytype": "import"})

        response = service.handle_callback(signed_headers(body), body)

        assert "media" in response["description"]

    def test_export_proceeds(self, service, fake_storage):
        """Test a complete export dialogue runs the export."""
        body = callback_body({"copytype": "export", "depth": "asset"})

        response = service.handle_callback(signed_headers(body), body)

        assert [item["name"] for item in response] == ["A/x.txt", "A/B/y.txt"]
        assert all(item["status"] == "fulfilled" for item in response)
        assert len(fake_storage.uploads) == 2
        json.dumps(response)

    def test_export_choice_with_stray_path(self, service, fake_frameio, fake_storage):
        """Test an export choice runs the export even when a b2path is submitted."""
        body = callback_body({"copytype": "export", "depth": "asset", "b2path": "exports/a.mov"})

        response = service.handle_callback(signed_headers(body), body)

        assert [item["name"] for item in response] == ["A/x.txt", "A/B/y.txt"]
        assert fake_frameio.created_assets == []

    def test_import_proceeds(self, bridge_config, fake_storage):
        """Test a complete import dialogue runs the import."""
        project = {"root_asset_id": "root", "name": "P"}
        frameio = FakeFrameio({"folder-a": [file_asset("folder-a", "a.mov", 1, project=project)]})
        service = BridgeService(bridge_config, frameio, fake_storage)
        body = callback_body({"b2path": "exports/a.mov"}, filesize=99)

        response = service.handle_callback(signed_headers(body), body)

        assert response["b2path"] == "exports/a.mov"
        assert response["filesize"] == 99
        assert frameio.created_assets[0][0] == "a.mov"
        assert frameio.created_folders == [("root", "imports/b2")]

    def test_bad_signature(self, service, fake_storage):
        """Test an unsigned callback is rejected before any work."""
        body = callback_body({"copytype": "export", "depth": "asset"})
        headers = signed_headers(body, secret="wrong")

        with pytest.raises(AuthenticationError) as exc_info:
            service.handle_callback(headers, body)

        assert exc_info.value.status_code == 403
        assert fake_storage.uploads == []

    def test_stale_timestamp(self, service):
        """Test a stale callback is rejected."""
        body = callback_body(None)

        with pytest.raises(AuthenticationError):
            service.handle_callback(signed_headers(body, timestamp="1000"), body)

    def test_malformed_body(self, service):
        """Test a signed but malformed body is a dialogue failure."""
        body = b"not json"

        with pytest.raises(DialogueError):
            service.handle_callback(signed_headers(body), body)

    def test_missing_resource(self, service):
        """Test a body without resource is a dialogue failure."""
        body = json.dumps({"type": "import-export"}).encode()

        with pytest.raises(DialogueError):
            service.handle_callback(signed_headers(body), body)


class TestOperations:
    """Test direct service operations."""

    @patch("frameio_b2.services.bridge_service.export_files")
    def test_export_passes_worker_cap(self, mock_export, bridge_config):
        """Test the configured worker cap reaches the export."""
        bridge_config.max_workers = 3
        service = BridgeService(bridge_config, Mock(), Mock())

        service.export("res", "project")

        mock_export.assert_called_once_with(service.frameio, service.storage, "res", "project", 3)

    @patch("frameio_b2.services.bridge_service.import_file")
    def test_import_passes_paths(self, mock_import, bridge_config):
        """Test configured paths reach the import."""
        service = BridgeService(bridge_config, Mock(), Mock())
        request = ImportRequest(resource_id="res", b2path="exports/a.mov")

        service.import_(request)

        mock_import.assert_called_once_with(
            service.frameio, service.storage, request, upload_path="exports/", download_path="imports/b2"
        )

    def test_context_manager_closes_clients(self, bridge_config):
        """Test leaving the context closes both clients."""
        frameio, storage = Mock(), Mock()

        with BridgeService(bridge_config, frameio, storage):
            pass

        frameio.close.assert_called_once()
        storage.close.assert_called_once()

    def test_from_config_builds_clients(self, bridge_config):
        """Test from_config wires real clients."""
        service = BridgeService.from_config(bridge_config)
        try:
            assert service.frameio.api_url == "https://api.frame.io/v2"
            assert service.storage.bucket_name == "media"
        finally:
            service.close()
