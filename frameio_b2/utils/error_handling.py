"""
Error handling utilities for standardized error logging and handling.

This module provides reusable error handling patterns shared by the
API clients, the transfer orchestration and the CLI.
"""

import logging
import sys
import traceback
from functools import wraps
from typing import Any, Callable, TypeVar

import httpx
from botocore.exceptions import BotoCoreError, ClientError

# Type variable for generic function decorators
F = TypeVar("F", bound=Callable[..., Any])


def handle_http_error(error: httpx.HTTPError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle HTTP errors with standardized logging.

    Args:
        error: The HTTP error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    status_code = None
    if isinstance(error, httpx.HTTPStatusError):
        status_code = error.response.status_code

    if status_code == 401:
        logging.error(
            "Authentication failed during %s: Invalid token. Please check FRAMEIO_TOKEN in your configuration.",
            operation,
        )
    elif status_code == 403:
        logging.error(
            "Authentication failed during %s: You don't have permission to access this resource.",
            operation,
        )
    elif status_code == 404:
        logging.error("Resource not found during %s: %s", operation, error)
    elif status_code is not None and status_code >= 500:
        logging.error("Server error during %s: %s", operation, error)
    else:
        logging.error("HTTP error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_storage_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle Backblaze B2 (S3 API) errors with standardized logging.

    Args:
        error: The botocore error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    if isinstance(error, ClientError):
        code = error.response.get("Error", {}).get("Code", "Unknown")
        if code in ("InvalidAccessKeyId", "SignatureDoesNotMatch", "AccessDenied"):
            logging.error(
                "Storage authentication failed during %s (%s). Please check your B2 application key.",
                operation,
                code,
            )
        else:
            logging.error("Storage error during %s (%s): %s", operation, code, error)
    else:
        logging.error("Storage error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())


def with_error_handling(
    operation: str, *, exit_on_error: bool = False, exit_code: int = 1, reraise: bool = True
) -> Callable[[F], F]:
    """
    Decorator to wrap functions with consistent error handling.

    Args:
        operation: Description of the operation for logging
        exit_on_error: If True, call sys.exit on error
        exit_code: Exit code to use if exit_on_error is True
        reraise: If True, reraise the exception after logging (unless exiting)

    Returns:
        Decorator function

    Example:
        @with_error_handling("create folder")
        def create_folder(...):
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except httpx.HTTPError as e:
                handle_http_error(e, operation)
                if exit_on_error:
                    sys.exit(exit_code)
                if reraise:
                    raise
            except (BotoCoreError, ClientError) as e:
                handle_storage_error(e, operation)
                if exit_on_error:
                    sys.exit(exit_code)
                if reraise:
                    raise
            except Exception as e:
                handle_generic_error(e, operation)
                if exit_on_error:
                    sys.exit(exit_code)
                if reraise:
                    raise
            return None

        return wrapper  # type: ignore[return-value]

    return decorator


def describe_error(error: BaseException) -> str:
    """
    Render an exception as a short reason string for result records.

    Args:
        error: The exception to describe

    Returns:
        ``"<ExceptionType>: <message>"``
    """
    message = str(error)
    return f"{type(error).__name__}: {message}" if message else type(error).__name__


__all__ = [
    "handle_http_error",
    "handle_storage_error",
    "handle_generic_error",
    "with_error_handling",
    "describe_error",
]
