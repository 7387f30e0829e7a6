# falta/config/validator.py
"""
Configuration Validator

Validates configuration values.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import List, Literal
from dataclasses import dataclass

from .loader import FaltaConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "falta.max_chain_depth"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(config: FaltaConfig) -> List[ConfigIssue]:
    """
    Validate configuration for illegal/misleading values.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    for name in ("legacy_message_match", "warn_on_render_mismatch"):
        if not isinstance(getattr(config, name), bool):
            issues.append(ConfigIssue(
                level="error",
                path=f"falta.{name}",
                message=f"{name} must be a boolean, got {getattr(config, name)!r}",
                hint=f"Set falta.{name} to true or false",
            ))

    depth = config.max_chain_depth
    if not isinstance(depth, int) or isinstance(depth, bool) or depth < 1:
        issues.append(ConfigIssue(
            level="error",
            path="falta.max_chain_depth",
            message=f"Invalid max_chain_depth: {depth!r} (must be a positive integer)",
            hint="Set falta.max_chain_depth to a value such as 256",
        ))
    elif depth < 8:
        issues.append(ConfigIssue(
            level="warn",
            path="falta.max_chain_depth",
            message=f"max_chain_depth={depth} may stop identity checks before reaching wrapped causes",
            hint="Raise falta.max_chain_depth unless chains are known to be short",
        ))

    if config.legacy_message_match:
        issues.append(ConfigIssue(
            level="warn",
            path="falta.legacy_message_match",
            message="foreign errors whose text equals a format spec are treated as members of that factory",
            hint="Set falta.legacy_message_match=false to match on recorded identity only",
        ))

    return issues


__all__ = [
    "ConfigIssue",
    "validate_config",
]
