# pwordgen/config.py
"""
Settings persistence for the pwordgen command line.
Settings saved as JSON in %APPDATA%/pwordgen/config.json (Windows) or ~/.pwordgen/config.json (fallback)
"""

import os
import json
import logging
from dataclasses import asdict
from typing import Dict, Any

from .options import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    **asdict(DEFAULT_OPTIONS),
    "copies": 1,
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "pwordgen")
    return os.path.join(os.path.expanduser("~"), ".pwordgen")


def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")


def _valid_value(key: str, value: Any) -> bool:
    default = DEFAULTS[key]
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool) and value >= 1
    return isinstance(value, str)


def load_config() -> Dict[str, Any]:
    p = config_path()
    out = DEFAULTS.copy()
    if not os.path.exists(p):
        return out
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config file %s: %s", p, e)
        return out
    if not isinstance(data, dict):
        logger.warning("ignoring config file %s: expected a JSON object", p)
        return out

    for key, value in data.items():
        if key not in DEFAULTS:
            logger.warning("ignoring unknown config key %r in %s", key, p)
            continue
        if not _valid_value(key, value):
            logger.warning("ignoring config key %r in %s: bad value %r", key, p, value)
            continue
        out[key] = value
    return out


def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    os.makedirs(os.path.dirname(p), exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)


def coerce_value(key: str, raw: str) -> Any:
    """Convert a command line string into the type stored for `key`."""
    if key not in DEFAULTS:
        raise ValueError(f"unknown setting {key!r}; choose from {', '.join(DEFAULTS)}")
    default = DEFAULTS[key]
    if isinstance(default, bool):
        v = raw.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
        raise ValueError(f"{key} expects a boolean (true/false), got {raw!r}")
    if isinstance(default, int):
        try:
            n = int(raw)
        except ValueError:
            raise ValueError(f"{key} expects an integer, got {raw!r}") from None
        if n < 1:
            raise ValueError(f"{key} must be >= 1")
        return n
    return raw
