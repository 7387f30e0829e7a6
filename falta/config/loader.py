# falta/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Lookup order when no path is given:
1. $FALTA_CONFIG
2. ~/.falta/config.yml
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FALTA_CONFIG"


@dataclass(frozen=True)
class FaltaConfig:
    """
    Identity and rendering options.

    - legacy_message_match: a foreign error whose text equals a factory's
      format spec counts as produced by that factory
    - max_chain_depth: how many cause links identity checks follow
    - warn_on_render_mismatch: log a warning when positional arguments do
      not fit the format spec
    """

    legacy_message_match: bool = True
    max_chain_depth: int = 256
    warn_on_render_mismatch: bool = True

    @classmethod
    def default(cls) -> "FaltaConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FaltaConfig":
        """Merge a plain mapping into the defaults, ignoring unknown keys"""
        config = cls.default()
        if not data:
            return config
        known = {f.name for f in fields(cls)}
        return replace(config, **{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "FaltaConfig":
        """
        Load configuration from a YAML file.

        The file may either hold the options at top level or under a
        ``falta:`` key. A missing file yields the defaults.
        """
        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return cls.default()
        if isinstance(yaml_data.get("falta"), dict):
            yaml_data = yaml_data["falta"]
        return cls.from_dict(yaml_data)

    def validate(self) -> list:
        """Validate configuration, returning a list of ConfigIssue"""
        from .validator import validate_config
        return validate_config(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _candidate_paths(config_path: Optional[Path]) -> list[Path]:
    if config_path:
        return [Path(config_path)]
    paths = []
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        paths.append(Path(env_path))
    paths.append(Path.home() / ".falta" / "config.yml")
    return paths


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    for path in _candidate_paths(config_path):
        if not path.exists():
            continue
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("ignoring unreadable falta config %s: %s", path, exc)
            return None
        logger.debug("loaded falta config from %s", path)
        return data if isinstance(data, dict) else None
    return None


def load_config(config_path: Optional[Path] = None) -> FaltaConfig:
    """
    Load falta configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        FaltaConfig instance (always has code defaults)

    Note:
        - unreadable or malformed YAML yields the defaults
        - a config with error-level issues yields the defaults
    """
    config = FaltaConfig.from_yaml(config_path)
    errors = [issue for issue in config.validate() if issue.level == "error"]
    if errors:
        for issue in errors:
            logger.warning("invalid falta config, using defaults: %s", issue)
        return FaltaConfig.default()
    return config


_lock = threading.Lock()
_active: Optional[FaltaConfig] = None


def get_config() -> FaltaConfig:
    """Return the process-wide configuration, loading it on first use"""
    global _active
    if _active is None:
        with _lock:
            if _active is None:
                _active = load_config()
    return _active


def set_config(config: Optional[FaltaConfig]) -> None:
    """Replace the process-wide configuration; None reloads on next use"""
    global _active
    with _lock:
        _active = config


__all__ = [
    "FaltaConfig",
    "load_config",
    "get_config",
    "set_config",
    "CONFIG_ENV_VAR",
]
