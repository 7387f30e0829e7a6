# falta/core/render/types.py
"""
Renderer types shared by both dialects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol


class Dialect(str, Enum):
    """Substitution mode of a format spec"""
    POSITIONAL = "positional"
    NAMED = "named"


@dataclass(frozen=True)
class Rendered:
    """
    Output of a single render call.

    cause is set when a positional %w verb consumed an exception.
    mismatched is True when positional arguments did not fit the format spec.
    """
    text: str
    cause: Optional[BaseException] = None
    mismatched: bool = False


class Renderer(Protocol):
    """A format spec compiled for one dialect"""

    spec: str
    dialect: Dialect

    def render(self, args: tuple[Any, ...]) -> Rendered:  # pragma: no cover - protocol only
        ...


__all__ = [
    "Dialect",
    "Rendered",
    "Renderer",
]
