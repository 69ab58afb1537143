"""Centralized constants for the dbgc utils package.

Single source of truth for paths and environment variable names used across
utility modules.
"""

from pathlib import Path

# ============================================================================
# OUTPUT DIRECTORIES
# ============================================================================

# Per-project working directory (config file, error log)
DBGC_DIR = Path("./.dbgc")

CONFIG_FILE_NAME = "config.json"
ERROR_LOG_FILE = DBGC_DIR / "error.log"

# ============================================================================
# FILE PROCESSING LIMITS
# ============================================================================

# Files larger than this are not scanned (default: 2MB)
DEFAULT_MAX_FILE_SIZE = 2 * 1024 * 1024

# Upper bound for the batch scanner thread pool
DEFAULT_MAX_WORKERS = 8

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

ENV_PREFIX = "DBGC"
ENV_LOG_LEVEL = "DBGC_LOG_LEVEL"
ENV_LOG_JSON = "DBGC_LOG_JSON"
ENV_LOG_FILE = "DBGC_LOG_FILE"
