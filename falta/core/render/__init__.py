# falta/core/render/__init__.py
"""
Rendering strategies: turn a format spec plus arguments into a message.

- PositionalRenderer: printf-style verbs matched by position
- NamedRenderer: Jinja2 placeholders looked up on a single record

Both render the raw spec unchanged when called with no arguments.
"""

from .types import Dialect, Rendered, Renderer
from .positional import PositionalRenderer, has_verbs, VERBS_PATTERN
from .named import NamedRenderer, record_fields

__all__ = [
    "Dialect",
    "Rendered",
    "Renderer",
    "PositionalRenderer",
    "NamedRenderer",
    "has_verbs",
    "record_fields",
    "VERBS_PATTERN",
]
