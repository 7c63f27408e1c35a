"""
Configuration management utilities.

This module provides centralized configuration loading from a TOML file
with environment variable overrides.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .constants import CONFIG_SECTION, DEFAULT_CONFIG_PATH

# Environment variables recognised as overrides, mapped to their config keys
ENV_OVERRIDES = {
    "FRAMEIO_SECRET": "frameio_secret",
    "FRAMEIO_TOKEN": "frameio_token",
    "FRAMEIO_API_URL": "frameio_api_url",
    "BUCKET_NAME": "bucket_name",
    "B2_APPLICATION_KEY_ID": "b2_key_id",
    "B2_APPLICATION_KEY": "b2_application_key",
    "B2_ENDPOINT_URL": "b2_endpoint_url",
    "UPLOAD_PATH": "upload_path",
    "DOWNLOAD_PATH": "download_path",
    "SIGNED_URL_DURATION": "signed_url_duration",
    "MAX_WORKERS": "max_workers",
}


class ConfigManager:
    """
    Manages configuration loading and access.

    Settings come from the ``[bridge]`` section of a TOML file, then any
    recognised environment variable replaces the file value.
    """

    def __init__(self, config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default path.
            environ: Environment mapping to read overrides from (default: os.environ)
        """
        self.explicit_path = config_path is not None
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self.environ = os.environ if environ is None else environ
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file and environment.

        A missing default file is not an error, settings may come from the
        environment alone.

        Returns:
            Dictionary containing configuration data

        Raises:
            FileNotFoundError: If an explicitly given config file doesn't exist
            ValueError: If config file is invalid
        """
        if self._config is not None:
            return self._config

        file_config: Dict[str, Any] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, "rb") as f:
                    file_config = tomllib.load(f)
                logging.debug("Loaded configuration from %s", self.config_path)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        elif self.explicit_path:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        else:
            logging.debug("No configuration file at %s, using environment only", self.config_path)

        section = dict(file_config.get(CONFIG_SECTION, {}))
        for env_name, key in ENV_OVERRIDES.items():
            value = self.environ.get(env_name)
            if value is not None and value != "":
                section[key] = value
                logging.debug("Configuration key %s taken from %s", key, env_name)

        self._config = section
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        config = self.load()
        value = config.get(key)
        return value if value is not None else default

    def has_key(self, key: str) -> bool:
        """
        Check if a configuration key exists.

        Args:
            key: Configuration key

        Returns:
            True if key exists, False otherwise
        """
        try:
            return key in self.load()
        except (FileNotFoundError, ValueError):
            return False

    def reload(self) -> None:
        """Force reload configuration from file and environment."""
        self._config = None
        self.load()


__all__ = ["ConfigManager", "ENV_OVERRIDES"]
