"""Error handling for dbgc commands.

Every command is wrapped by `handle_exceptions`. Click's own exits pass
through untouched, configuration problems become exit code 3 with a one-line
message, and anything unexpected is appended with its traceback to
.dbgc/error.log before being reported as a ClickException.
"""

import sys
import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any

import click

from dbgc.scanner.exceptions import ConfigurationError
from dbgc.utils.logging import logger

from .constants import DBGC_DIR, ERROR_LOG_FILE
from .exit_codes import ExitCodes


class ConfigurationClickError(click.ClickException):
    """Click exception that exits with the configuration error code."""

    exit_code = ExitCodes.CONFIG_ERROR


def _append_error_log(command: str, exc: BaseException) -> Path:
    """Append one crash report to the error log and return its path."""
    DBGC_DIR.mkdir(parents=True, exist_ok=True)
    separator = "-" * 72
    with open(ERROR_LOG_FILE, "a", encoding="utf-8") as f:
        f.write(f"{separator}\n")
        f.write(f"{datetime.now().isoformat(timespec='seconds')}  dbgc {command}\n")
        f.write(f"argv: {' '.join(sys.argv[1:])}\n")
        f.write(f"cwd: {Path.cwd()}\n\n")
        f.write("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
        f.write("\n")
    return ERROR_LOG_FILE


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a click command so failures end with a readable message and exit code."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except ConfigurationError as e:
            # Raised before any file is scanned; no traceback needed
            logger.error("Invalid configuration: {err}", err=str(e))
            raise ConfigurationClickError(f"Invalid configuration: {e}") from e
        except Exception as e:
            logger.opt(exception=True).error(
                "dbgc {cmd} failed: {err}", cmd=func.__name__, err=str(e)
            )
            log_path = _append_error_log(func.__name__, e)
            raise click.ClickException(
                f"{type(e).__name__}: {e}\n\nDetails written to {log_path}"
            ) from e

    return wrapper
