# falta/core/errors/__init__.py
"""
Library error types for falta.

These are the errors falta itself raises (bad specs, failed renders),
not the error values that factories produce.

No side effects on import.
"""

from . import codes
from .exceptions import FaltaLibError, ConfigError, RenderError

__all__ = [
    "codes",
    "FaltaLibError",
    "ConfigError",
    "RenderError",
]
