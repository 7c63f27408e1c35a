"""
Central constants for the frameio-b2 package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# Configuration
# ============================================================================

# Default location of the TOML configuration file
DEFAULT_CONFIG_PATH = "~/.config/frameio-b2/config.toml"

# Section of the TOML file holding bridge settings
CONFIG_SECTION = "bridge"

# Default Frame.io API root
DEFAULT_FRAMEIO_API_URL = "https://api.frame.io/v2"

# Default lifetime of signed download URLs (seconds)
DEFAULT_SIGNED_URL_DURATION = 3600

# Longest lifetime accepted by the S3-compatible presign API (seconds) - 7 days
MAX_SIGNED_URL_DURATION = 604800

# ============================================================================
# Callback Verification
# ============================================================================

# Accepted clock skew between Frame.io and this host (seconds)
TIMESTAMP_TOLERANCE = 5 * 60

# Signature scheme version prefix
SIGNATURE_VERSION = "v0"

TIMESTAMP_HEADER = "X-Frameio-Request-Timestamp"
SIGNATURE_HEADER = "X-Frameio-Signature"

# ============================================================================
# Form Dialogue
# ============================================================================

REQUEST_TYPE_IMPORT_EXPORT = "import-export"
REQUEST_TYPE_EXPORT = "export"
REQUEST_TYPE_IMPORT = "import"

COPYTYPE_EXPORT = "export"
COPYTYPE_IMPORT = "import"

DEPTH_ASSET = "asset"
DEPTH_PROJECT = "project"

# ============================================================================
# Transfers
# ============================================================================

# Separator between folder names in exported object names
PATH_SEPARATOR = "/"

# Timeout for Frame.io API requests (seconds)
DEFAULT_TIMEOUT = 120

# Timeout for streaming media between services (seconds)
STREAM_TIMEOUT = 300

# Chunk size when streaming media from Frame.io into storage
STREAM_CHUNK_SIZE = 8 * 1024 * 1024

# Part size for multipart uploads to storage
MULTIPART_CHUNK_SIZE = 100 * 1024 * 1024

# Concurrent part uploads per object
MULTIPART_CONCURRENCY = 4
