"""
Logging configuration and utilities for the frameio-b2 package.

This module provides logging setup and a wrapping formatter so that
long transfer and traversal messages stay readable in a terminal.
"""

import logging
from typing import Optional

# Default width for log message wrapping
DEFAULT_LOG_WIDTH = 120

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Third-party loggers that are noisy below maximum verbosity
CLIENT_LOGGERS = ("httpx", "httpcore", "botocore", "boto3", "s3transfer", "urllib3")


class WrappingFormatter(logging.Formatter):
    """Formatter that wraps log lines longer than ``width`` on word boundaries."""

    def __init__(
        self, fmt: Optional[str] = None, datefmt: Optional[str] = None, width: int = DEFAULT_LOG_WIDTH
    ) -> None:
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if len(formatted) <= self.width:
            return formatted

        lines = []
        current_line = ""
        for word in formatted.split():
            if len(current_line + " " + word) <= self.width:
                current_line += (" " + word) if current_line else word
            else:
                if current_line:
                    lines.append(current_line)
                current_line = word
        if current_line:
            lines.append(current_line)

        return "\n".join(lines)


def setup_logging(verbosity: int = 0, use_wrapping: bool = False) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP and S3 client logs)
        use_wrapping: If True, use wrapping formatter for long messages

    Example:
        >>> setup_logging(1)  # INFO level
        >>> setup_logging(3)  # DEBUG level including httpx and botocore
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    if use_wrapping:
        handler = logging.StreamHandler()
        handler.setFormatter(WrappingFormatter(fmt=LOG_FORMAT, width=DEFAULT_LOG_WIDTH))

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    # httpx logs every request at INFO, botocore is chatty at DEBUG
    client_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    for name in CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


__all__ = ["WrappingFormatter", "setup_logging", "get_logger", "CLIENT_LOGGERS"]
