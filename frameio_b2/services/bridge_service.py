"""
Callback service for Frame.io custom actions.

This module provides the framework-agnostic entry point a web layer calls
with the raw callback: it verifies the signature, runs the form dialogue
and, once the dialogue is complete, performs the export or import.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..api import B2Client, FrameioClient
from ..dialogue import next_form, resolve_direction
from ..exceptions import DialogueError
from ..models.callback import CallbackRequest
from ..models.config import BridgeConfig
from ..models.transfer import ExportResult, ImportRequest, ImportResult
from ..protocols import AssetClientProtocol, StorageClientProtocol
from ..transfer import export_files, import_file
from ..utils.constants import COPYTYPE_EXPORT
from ..utils.signature import verify_request

# JSON body returned to the caller: a form, an export result list or an import result
CallbackResponse = Union[Dict[str, Any], List[Dict[str, Any]]]


class BridgeService:
    """
    High-level service for Frame.io custom action callbacks.

    Collaborator clients and configuration are passed in at construction;
    nothing is read from process-wide state at call time.
    """

    def __init__(
        self, config: BridgeConfig, frameio: AssetClientProtocol, storage: StorageClientProtocol
    ) -> None:
        """
        Initialize the bridge service.

        Args:
            config: Bridge settings
            frameio: Asset API client
            storage: Storage client
        """
        self.config = config
        self.frameio = frameio
        self.storage = storage

    @classmethod
    def from_config(cls, config: BridgeConfig) -> "BridgeService":
        """Build the service with real Frame.io and B2 clients."""
        return cls(config, FrameioClient.from_config(config), B2Client.from_config(config))

    def close(self) -> None:
        """Close collaborator sessions that hold connections."""
        for client in (self.frameio, self.storage):
            close = getattr(client, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> "BridgeService":
        return self

    def __exit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def export(self, resource_id: str, depth: str) -> List[ExportResult]:
        """
        Export the asset(s) below a resource to storage.

        Args:
            resource_id: Asset the action was triggered on
            depth: ``"asset"`` or ``"project"``

        Returns:
            One result per exported file
        """
        logging.info("Starting export of %s (depth=%s)", resource_id, depth)
        return export_files(self.frameio, self.storage, resource_id, depth, self.config.max_workers)

    def import_(self, request: ImportRequest) -> ImportResult:
        """
        Import one storage object into the resource's project.

        Args:
            request: Import instruction

        Returns:
            The import result
        """
        logging.info("Starting import of %s", request.b2path)
        return import_file(
            self.frameio,
            self.storage,
            request,
            upload_path=self.config.upload_path,
            download_path=self.config.download_path,
        )

    def parse_callback(self, body: Union[bytes, str], encoding: str = "utf-8") -> CallbackRequest:
        """
        Parse a raw callback body.

        Raises:
            DialogueError: If the body is not a valid callback
        """
        try:
            text = body.decode(encoding) if isinstance(body, bytes) else body
            return CallbackRequest(**json.loads(text))
        except (ValueError, TypeError, ValidationError) as e:
            logging.error("Malformed callback body: %s", e)
            raise DialogueError("Malformed callback body") from e

    def process(self, callback: CallbackRequest) -> CallbackResponse:
        """
        Answer a verified callback.

        Args:
            callback: Parsed callback

        Returns:
            Form to show, export result list, or import result
        """
        logging.debug("Callback type=%s resource=%s data=%s", callback.type, callback.resource.id, callback.data)

        form = next_form(callback.data, callback.type, self.config.bucket_name)
        if form is not None:
            return form.to_response()

        if resolve_direction(callback.data) == COPYTYPE_EXPORT:
            results = self.export(callback.resource.id, callback.data["depth"])  # type: ignore[index]
            return [result.to_response() for result in results]

        return self.import_(callback.to_import_request()).to_response()

    def handle_callback(
        self, headers: Mapping[str, str], body: Union[bytes, str], encoding: str = "utf-8"
    ) -> CallbackResponse:
        """
        Verify and answer a raw callback.

        Args:
            headers: Request headers (case-insensitive lookup)
            body: Raw, undecoded request body
            encoding: Encoding of the body

        Returns:
            Form to show, export result list, or import result

        Raises:
            AuthenticationError: If the callback is stale or unsigned (403)
            DialogueError: If the submission cannot be interpreted
            TraversalError: If the asset tree cannot be flattened
            ImportFailure: If the import was aborted
        """
        verify_request(headers, body, self.config.frameio_secret, encoding)
        return self.process(self.parse_callback(body, encoding))


__all__ = ["BridgeService", "CallbackResponse"]
