from __future__ import annotations

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict

from statue_dashboard.config.model import GlobalConfig
from statue_dashboard.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

GLOBAL_CONFIG_FILE = "global.json"


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load UI settings from <root>/global.json.

    A missing file falls back to the defaults on GlobalConfig. Unknown keys are
    ignored with a warning; unreadable JSON or non-string values raise ConfigError.
    """
    root = Path(root)
    global_path = root / GLOBAL_CONFIG_FILE
    logger.info("Loading global config", extra={"config_root": str(root)})

    if not global_path.is_file():
        logger.warning(f"No {GLOBAL_CONFIG_FILE} found at {root}, using defaults")
        return GlobalConfig()

    try:
        with global_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to read {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    return _global_config_from_raw(raw, source=global_path)


def _global_config_from_raw(raw: Dict[str, Any], source: Path) -> GlobalConfig:
    known = {f.name for f in fields(GlobalConfig)}
    values: Dict[str, str] = {}

    for key, value in raw.items():
        if key not in known:
            logger.warning(f"Ignoring unknown key '{key}' in {source.name}")
            continue
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"'{key}' in {source} must be a non-empty string")
        values[key] = value.strip()

    return GlobalConfig(**values)
