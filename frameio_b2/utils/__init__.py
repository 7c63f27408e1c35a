"""
Utility modules for frameio-b2.
"""

from .logger import setup_logging, WrappingFormatter, get_logger
from .session import create_session_with_retry
from .signature import compute_signature, verify_request, verify_timestamp_and_signature

from . import constants
from . import config_manager
from . import error_handling

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "get_logger",
    "create_session_with_retry",
    "compute_signature",
    "verify_request",
    "verify_timestamp_and_signature",
    "constants",
    "config_manager",
    "error_handling",
]
