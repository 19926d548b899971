"""Runtime configuration for srcfixer - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from srcfixer.utils.logging import logger

CONFIG_DIR = ".srcfix"
CONFIG_FILE = "config.json"
ENV_PREFIX = "SRCFIX"

DEFAULTS = {
    "selection": {
        # Files/paths matching any of these are candidates for processing.
        "include": [
            r"^.*(\.php|\.inc|\.module|\.theme|\.install|\.js)$",
        ],
        # Files/paths matching any of these are skipped. Has priority over
        # "include".
        "exclude": [
            r".*/\.git/.*",
            r"^\.git/.*",
            r".*default\.inc.*",
            r".*jquery.*",
            r".*panelizer\.inc.*",
            r".*\.features\..*",
            r".*\.min\.js.*",
            r".*strongarm\.inc.*",
            r".*App\.js.*",
            r".*getid3.*",
            r".*phpseclib.*",
            r".*fpdf16.*",
        ],
    },
    "fixers": {
        "strip_markers": True,
    },
    "output": {
        "encoding": "utf-8",
    },
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def load_runtime_config(root: str = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .srcfix/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (SRCFIX_<SECTION>_<KEY>)
    2. .srcfix/config.json file
    3. Built-in defaults

    Args:
        root: Root directory to look for config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / CONFIG_DIR / CONFIG_FILE
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key in cfg[section] and isinstance(value, type(cfg[section][key])):
                                cfg[section][key] = value
            logger.debug("Loaded config file {path}", path=str(path))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not load config file from {path}: {err}", path=str(path), err=e)
        logger.info("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                value = os.environ[env_var]
                try:
                    default_value = cfg[section][key]
                    if isinstance(default_value, bool):
                        cfg[section][key] = _parse_bool(value)
                    elif isinstance(default_value, int):
                        cfg[section][key] = int(value)
                    elif isinstance(default_value, list):
                        cfg[section][key] = [v.strip() for v in value.split(",") if v.strip()]
                    else:
                        cfg[section][key] = value
                except ValueError as e:
                    logger.warning(
                        "Invalid value for environment variable {var}: '{value}' - {err}",
                        var=env_var,
                        value=value,
                        err=e,
                    )
                    logger.info("Using default value: {default}", default=cfg[section][key])

    return cfg
