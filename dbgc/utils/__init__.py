"""dbgc utilities package."""

from .constants import (
    CONFIG_FILE_NAME,
    DBGC_DIR,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_MAX_WORKERS,
    ERROR_LOG_FILE,
)
from .exit_codes import ExitCodes
from .logging import logger

__all__ = [
    "CONFIG_FILE_NAME",
    "DBGC_DIR",
    "DEFAULT_MAX_FILE_SIZE",
    "DEFAULT_MAX_WORKERS",
    "ERROR_LOG_FILE",
    "ExitCodes",
    "logger",
]
