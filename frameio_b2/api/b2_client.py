"""
Backblaze B2 storage client.

Talks to B2 through its S3-compatible API with boto3. Media is streamed
from a source URL straight into a multipart upload, nothing is staged on
local disk.
"""

# Standard library imports
import logging
import math
import threading
from typing import Any, Iterator, Optional

# Third-party imports
import boto3
import httpx
from boto3.s3.transfer import TransferConfig
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

# Local imports
from ..exceptions import TransferError
from ..models.config import BridgeConfig
from ..models.transfer import StoredObject
from ..utils import create_session_with_retry
from ..utils.constants import (
    DEFAULT_SIGNED_URL_DURATION,
    MULTIPART_CHUNK_SIZE,
    MULTIPART_CONCURRENCY,
    PATH_SEPARATOR,
    STREAM_CHUNK_SIZE,
    STREAM_TIMEOUT,
)
from ..utils.error_handling import describe_error

# S3 API limit on parts per multipart upload
MAX_MULTIPART_PARTS = 10000


class StreamReader:
    """Read-only file object over an iterator of byte chunks."""

    def __init__(self, chunks: Iterator[bytes]) -> None:
        self._chunks = chunks
        self._buffer = b""
        self._exhausted = False

    def read(self, size: int = -1) -> bytes:
        if size is None or size < 0:
            data = self._buffer + b"".join(self._chunks)
            self._buffer = b""
            self._exhausted = True
            return data

        while len(self._buffer) < size and not self._exhausted:
            try:
                self._buffer += next(self._chunks)
            except StopIteration:
                self._exhausted = True

        data, self._buffer = self._buffer[:size], self._buffer[size:]
        return data

    def readable(self) -> bool:
        return True


def multipart_chunk_size(filesize: Optional[int]) -> int:
    """
    Pick a part size that keeps large files under the part-count limit.

    Args:
        filesize: Declared size in bytes, if known

    Returns:
        Part size in bytes
    """
    if not filesize:
        return MULTIPART_CHUNK_SIZE
    return max(MULTIPART_CHUNK_SIZE, math.ceil(filesize / MAX_MULTIPART_PARTS))


class B2Client:
    """Client for copying media into and signing downloads out of a B2 bucket."""

    def __init__(
        self,
        key_id: str,
        application_key: str,
        endpoint_url: str,
        bucket_name: str,
        upload_path: str = "",
        signed_url_duration: int = DEFAULT_SIGNED_URL_DURATION,
    ) -> None:
        """Initialize the B2 client.

        Args:
            key_id: B2 application key id
            application_key: B2 application key
            endpoint_url: S3-compatible endpoint of the bucket's region
            bucket_name: Bucket to read from and write to
            upload_path: Prefix for exported objects
            signed_url_duration: Lifetime of signed download URLs in seconds
        """
        self.key_id = key_id
        self.application_key = application_key
        self.endpoint_url = endpoint_url
        self.bucket_name = bucket_name
        self.upload_path = upload_path
        self.signed_url_duration = signed_url_duration
        self._s3: Optional[Any] = None
        self._s3_lock = threading.Lock()
        self.http = create_session_with_retry(timeout=STREAM_TIMEOUT)

    @classmethod
    def from_config(cls, config: BridgeConfig) -> "B2Client":
        """Create a client from bridge settings."""
        config.require("b2_key_id", "b2_application_key", "b2_endpoint_url", "bucket_name")
        return cls(
            config.b2_key_id,
            config.b2_application_key,
            config.b2_endpoint_url,
            config.bucket_name,
            upload_path=config.upload_path,
            signed_url_duration=config.signed_url_duration,
        )

    def connect(self) -> Any:
        """
        Return the boto3 S3 client, creating it on first use.

        Export workers call this concurrently; the client is created once
        and shared.

        Returns:
            boto3 S3 client bound to the B2 endpoint
        """
        if self._s3 is None:
            with self._s3_lock:
                if self._s3 is None:
                    self._s3 = boto3.client(
                        "s3",
                        endpoint_url=self.endpoint_url,
                        aws_access_key_id=self.key_id,
                        aws_secret_access_key=self.application_key,
                        config=Config(signature_version="s3v4", retries={"max_attempts": 5, "mode": "standard"}),
                    )
                    logging.debug("Connected to B2 endpoint %s", self.endpoint_url)
        return self._s3

    def close(self) -> None:
        """Close the HTTP session used for streaming."""
        self.http.close()
        logging.debug("B2Client streaming session closed")

    def object_key(self, name: str) -> str:
        """
        Build the bucket key for an exported file.

        Args:
            name: Relative path of the file

        Returns:
            ``<upload_path>/<name>``, or ``name`` when no upload path is set
        """
        if not self.upload_path:
            return name
        return f"{self.upload_path.rstrip(PATH_SEPARATOR)}{PATH_SEPARATOR}{name}"

    def stream_upload(self, source_url: str, dest_name: str, filesize: Optional[int] = None) -> StoredObject:
        """
        Stream a remote file into the bucket.

        Args:
            source_url: URL to download the media from
            dest_name: Relative path of the file; the object key adds the upload path
            filesize: Declared size in bytes, used to size multipart parts

        Returns:
            StoredObject describing the written object

        Raises:
            TransferError: If downloading or uploading fails
        """
        key = self.object_key(dest_name)
        s3 = self.connect()
        transfer_config = TransferConfig(
            multipart_chunksize=multipart_chunk_size(filesize),
            max_concurrency=MULTIPART_CONCURRENCY,
        )

        logging.info("Streaming %s to b2://%s/%s", dest_name, self.bucket_name, key)
        try:
            with self.http.stream("GET", source_url) as response:
                response.raise_for_status()
                reader = StreamReader(response.iter_bytes(chunk_size=STREAM_CHUNK_SIZE))
                s3.upload_fileobj(reader, self.bucket_name, key, Config=transfer_config)
        except (httpx.HTTPError, BotoCoreError, ClientError) as e:
            logging.error("Failed to stream %s to %s: %s", source_url, key, e)
            raise TransferError(dest_name, describe_error(e)) from e

        logging.info("Stored %s (%s bytes)", key, filesize if filesize is not None else "unknown")
        return StoredObject(bucket=self.bucket_name, key=key, filesize=filesize)

    def create_signed_download_url(self, path: str) -> str:
        """
        Create a time-limited download URL for an object.

        Args:
            path: Object key inside the bucket

        Returns:
            Presigned URL valid for ``signed_url_duration`` seconds
        """
        s3 = self.connect()
        url = s3.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket_name, "Key": path},
            ExpiresIn=self.signed_url_duration,
        )
        logging.debug("Signed download URL for %s valid %ds", path, self.signed_url_duration)
        return url


__all__ = ["B2Client", "StreamReader", "multipart_chunk_size"]
