# falta/config/__init__.py
"""
falta Configuration

Design principles:
1. Code = truth (every option has a default, YAML can be deleted)
2. Configuration objects are frozen; the active one is swapped, never mutated
3. Validation returns structured issues instead of raising
"""

from .loader import (
    FaltaConfig,
    load_config,
    get_config,
    set_config,
    CONFIG_ENV_VAR,
)
from .validator import validate_config, ConfigIssue

__all__ = [
    "FaltaConfig",
    "load_config",
    "get_config",
    "set_config",
    "CONFIG_ENV_VAR",
    "validate_config",
    "ConfigIssue",
]
