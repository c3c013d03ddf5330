from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class ConfigError(ValueError):
    pass


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


DEFAULTS: Dict[str, Any] = {
    "format": "text",  # 'text' or 'json'
    "verbose": False,
    "progress_every": 50000,  # nodes; 0 disables
    "progress_secs": 5.0,
}

FORMATS = ("text", "json")


def load_yaml(path: str | Path) -> DotDict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"{path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    bad_keys = [k for k in data if not isinstance(k, str)]
    if bad_keys:
        raise ConfigError(f"{path}: keys must be strings, got {bad_keys!r}")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def validate(cfg: Dict[str, Any]) -> None:
    unknown = sorted(set(cfg) - set(DEFAULTS))
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
    if cfg["format"] not in FORMATS:
        raise ConfigError(f"format must be one of {FORMATS}, got {cfg['format']!r}")
    if not isinstance(cfg["verbose"], bool):
        raise ConfigError("verbose must be true or false")
    if isinstance(cfg["progress_every"], bool) or not isinstance(cfg["progress_every"], int) or cfg["progress_every"] < 0:
        raise ConfigError("progress_every must be a non-negative integer")
    if isinstance(cfg["progress_secs"], bool) or not isinstance(cfg["progress_secs"], (int, float)) or cfg["progress_secs"] < 0:
        raise ConfigError("progress_secs must be a non-negative number")


def load_config(path: Optional[str | Path] = None, **overrides) -> DotDict:
    """DEFAULTS, then the YAML file (if any), then non-None overrides."""
    cfg = DotDict(DEFAULTS)
    if path is not None:
        cfg.update(load_yaml(path))
    merge_overrides(cfg, **overrides)
    validate(cfg)
    return cfg
