"""Runtime configuration for dbgc - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from dbgc.scanner import ScanConfig
from dbgc.utils.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_MAX_WORKERS,
    ENV_PREFIX,
)
from dbgc.utils.logging import logger

DEFAULTS = {
    "scan": {
        "debug_keyword": "debug",
        "output_call_targets": [],
        "comment_marker": "",
        "match_all_output": False,
        "keyword_scope": "literal",
    },
    "files": {
        "exclude": [],
        "extensions": [],
    },
    "limits": {
        "max_file_size": DEFAULT_MAX_FILE_SIZE,
        "max_workers": DEFAULT_MAX_WORKERS,
    },
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _coerce(value: str, default_value: Any) -> Any:
    """Convert an environment string to the type of the default."""
    if isinstance(default_value, bool):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"expected a boolean, got '{value}'")
    if isinstance(default_value, int):
        return int(value)
    if isinstance(default_value, float):
        return float(value)
    if isinstance(default_value, list):
        return [v.strip() for v in value.split(",") if v.strip()]
    return value


def load_runtime_config(root: str | Path = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .dbgc/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (DBGC_<SECTION>_<KEY>, e.g. DBGC_SCAN_DEBUG_KEYWORD)
    2. .dbgc/config.json file
    3. Built-in defaults

    Values whose type does not match the default are ignored with a warning.

    Args:
        root: Root directory to look for config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / ".dbgc" / CONFIG_FILE_NAME
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key not in cfg[section]:
                                logger.warning("Unknown config key {section}.{key} in {path}",
                                               section=section, key=key, path=str(path))
                                continue
                            default_value = cfg[section][key]
                            # bool is an int subclass; keep them apart
                            if isinstance(value, type(default_value)) and (
                                isinstance(value, bool) == isinstance(default_value, bool)
                            ):
                                cfg[section][key] = value
                            else:
                                logger.warning(
                                    "Ignoring {section}.{key} in {path}: expected {expected}",
                                    section=section,
                                    key=key,
                                    path=str(path),
                                    expected=type(default_value).__name__,
                                )
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not load config file from {path}: {err}", path=str(path), err=str(e))
        logger.info("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                value = os.environ[env_var]
                try:
                    cfg[section][key] = _coerce(value, cfg[section][key])
                except (ValueError, AttributeError) as e:
                    logger.warning(
                        "Invalid value for environment variable {var}: '{value}' - {err}",
                        var=env_var,
                        value=value,
                        err=str(e),
                    )
                    logger.info("Using default value: {value}", value=cfg[section][key])

    return cfg


def build_scan_config(cfg: dict[str, Any], **overrides: Any) -> ScanConfig:
    """Build a validated ScanConfig from a runtime config dict.

    Keyword overrides (from CLI flags) win over the config values; an override
    of None means "not given".

    Raises:
        ConfigurationError: if the resulting options are invalid
    """
    scan = dict(cfg.get("scan", {}))
    for key, value in overrides.items():
        if value is not None:
            scan[key] = value

    return ScanConfig(
        debug_keyword=scan.get("debug_keyword", "debug"),
        output_call_targets=frozenset(scan.get("output_call_targets") or ()),
        comment_marker=scan.get("comment_marker") or None,
        match_all_output=bool(scan.get("match_all_output", False)),
        keyword_scope=scan.get("keyword_scope", "literal"),
    )
