"""Configuration model for frameio-b2."""

from typing import List, Optional

from pydantic import Field, field_validator

from ..exceptions import ConfigurationError
from ..utils.config_manager import ConfigManager
from ..utils.constants import DEFAULT_FRAMEIO_API_URL, DEFAULT_SIGNED_URL_DURATION, MAX_SIGNED_URL_DURATION
from .base import BridgeBaseModel


class BridgeConfig(BridgeBaseModel):
    """
    Settings shared by every bridge component.

    Attributes:
        frameio_secret: Shared secret used to sign custom action callbacks
        frameio_token: Bearer token for the Frame.io API
        frameio_api_url: Frame.io API root
        bucket_name: Backblaze B2 bucket name
        b2_key_id: B2 application key id
        b2_application_key: B2 application key
        b2_endpoint_url: S3-compatible B2 endpoint (e.g. https://s3.us-west-004.backblazeb2.com)
        upload_path: Prefix for exported objects inside the bucket
        download_path: Frame.io folder path imported files are placed in
        signed_url_duration: Lifetime of signed download URLs in seconds
        max_workers: Optional cap on concurrent export transfers (unbounded if None)
    """

    frameio_secret: str = ""
    frameio_token: str = ""
    frameio_api_url: str = DEFAULT_FRAMEIO_API_URL
    bucket_name: str = ""
    b2_key_id: str = ""
    b2_application_key: str = ""
    b2_endpoint_url: str = ""
    upload_path: str = ""
    download_path: str = ""
    signed_url_duration: int = Field(default=DEFAULT_SIGNED_URL_DURATION, ge=1, le=MAX_SIGNED_URL_DURATION)
    max_workers: Optional[int] = Field(default=None, ge=1)

    @field_validator("frameio_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the API root so paths can be appended with a single slash."""
        return v.rstrip("/")

    @classmethod
    def from_sources(cls, config_path: Optional[str] = None) -> "BridgeConfig":
        """
        Load settings from the TOML file and environment.

        Args:
            config_path: Optional path to the TOML configuration file

        Returns:
            Validated BridgeConfig

        Raises:
            ConfigurationError: If the file is unreadable or values are invalid
        """
        manager = ConfigManager(config_path)
        try:
            return cls(**manager.load())
        except (FileNotFoundError, ValueError) as e:
            # pydantic's ValidationError is a ValueError
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def missing(self, *keys: str) -> List[str]:
        """Return the names of the given settings that are empty."""
        return [key for key in keys if not getattr(self, key)]

    def require(self, *keys: str) -> None:
        """
        Ensure the given settings are present.

        Raises:
            ConfigurationError: If any of them is empty
        """
        missing = self.missing(*keys)
        if missing:
            raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")


__all__ = ["BridgeConfig"]
