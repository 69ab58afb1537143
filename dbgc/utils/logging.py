"""Loguru configuration for dbgc.

The scanner core logs at DEBUG/TRACE only; everything meant for the user goes
through the Rich console in dbgc.ui. Log records go to stderr so they never
mix with report output (scan --format json) on stdout.

Usage:
    from dbgc.utils.logging import logger
    logger.debug("Scanned {path}", path=path)

Environment Variables:
    DBGC_LOG_LEVEL: TRACE|DEBUG|INFO|WARNING|ERROR (default: WARNING)
    DBGC_LOG_JSON: 0|1 (default: 0) - one JSON object per line on stderr
    DBGC_LOG_FILE: also append JSON lines to this file, at DEBUG level
"""

import json
import os
import sys

from loguru import logger

from .constants import ENV_LOG_FILE, ENV_LOG_JSON, ENV_LOG_LEVEL

logger.remove()

LOG_LEVEL = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
JSON_MODE = os.environ.get(ENV_LOG_JSON, "0") == "1"
LOG_FILE = os.environ.get(ENV_LOG_FILE)

HUMAN_FORMAT = (
    "<dim>{time:HH:mm:ss.SSS}</dim> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> "
    "<level>{message}</level>"
)


def format_json(record) -> str:
    """Render a loguru record as a single JSON line."""
    entry = {
        "ts": record["time"].isoformat(),
        "level": record["level"].name.lower(),
        "logger": record["name"],
        "msg": record["message"],
    }
    for key, value in record["extra"].items():
        entry[key] = value if isinstance(value, (str, int, float, bool)) else str(value)

    exc = record["exception"]
    if exc is not None and exc.type is not None:
        entry["error"] = f"{exc.type.__name__}: {exc.value}"
    return json.dumps(entry)


def _stderr_json(message) -> None:
    # Sinks must not log themselves
    sys.stderr.write(format_json(message.record) + "\n")


def _file_json(message) -> None:
    with open(LOG_FILE, "a", encoding="utf-8") as f:
        f.write(format_json(message.record) + "\n")


logger.level("TRACE", color="<dim>")
logger.level("DEBUG", color="<blue>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red><bold>")

if JSON_MODE:
    logger.add(_stderr_json, level=LOG_LEVEL, colorize=False)
else:
    logger.add(sys.stderr, level=LOG_LEVEL, format=HUMAN_FORMAT, colorize=None)

if LOG_FILE:
    logger.add(_file_json, level="DEBUG")


__all__ = [
    "logger",
]
