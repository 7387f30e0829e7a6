# falta/core/__init__.py
"""
Core components: renderers, factories, error values and identity checks.
"""

from .errors import FaltaLibError, ConfigError, RenderError
from .render import Dialect
from .identity import Identity, iter_chain, is_error, is_match, find
from .capture import Capture, ErrorSlot
from .instance import Falta, new_error
from .factory import (
    M,
    Factory,
    PositionalFactory,
    NamedFactory,
    new,
    new_m,
    newf,
    create_factory,
)

__all__ = [
    "FaltaLibError",
    "ConfigError",
    "RenderError",
    "Dialect",
    "Identity",
    "iter_chain",
    "is_error",
    "is_match",
    "find",
    "Capture",
    "ErrorSlot",
    "Falta",
    "new_error",
    "M",
    "Factory",
    "PositionalFactory",
    "NamedFactory",
    "new",
    "new_m",
    "newf",
    "create_factory",
]
