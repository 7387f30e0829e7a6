# falta/core/render/named.py
"""
Named-field rendering with Jinja2.

Placeholders look fields up on a single record:

    "invalid circle: radius ({{ radius }}) <= 0"
    "invalid circle: radius ({{.Radius}}) <= 0"   # dotted form, same lookup
    "invalid value {{.}}"                         # the whole record

A record is a mapping, a pydantic model, a dataclass instance, a
namedtuple, or any object with instance attributes. A spec that only
uses the whole record (``{{.}}``) accepts any value. Undefined fields fail
the render (StrictUndefined) instead of rendering as empty text.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Mapping
from typing import Any, Dict

from jinja2 import Environment, StrictUndefined, TemplateError, TemplateSyntaxError, UndefinedError
from pydantic import BaseModel

from ..errors import ConfigError, RenderError
from .types import Dialect, Rendered

logger = logging.getLogger(__name__)

_ENV = Environment(undefined=StrictUndefined, autoescape=False, keep_trailing_newline=True)

# name the whole record is bound to inside the template
RECORD_NAME = "_record"

# "{{.}}" / "{{- . -}}" -> "{{ _record }}" / "{{- _record -}}"
_WHOLE_RECORD = re.compile(r"\{\{(-?)\s*\.\s*(-?)\}\}")

# "{{.Radius" / "{{- .Radius" -> "{{ Radius" / "{{- Radius"
_DOTTED_FIELD = re.compile(r"\{\{(-?)\s*\.(?=[A-Za-z_])")


def _to_jinja(spec: str) -> str:
    spec = _WHOLE_RECORD.sub(r"{{\1 " + RECORD_NAME + r" \2}}", spec)
    return _DOTTED_FIELD.sub(r"{{\1 ", spec)


def record_fields(record: Any) -> Dict[str, Any]:
    """
    Expose a record's fields as a string-keyed dict.

    Raises:
        TypeError: record has no discoverable fields
    """
    if isinstance(record, Mapping):
        return {str(k): v for k, v in record.items()}
    if isinstance(record, BaseModel):
        return {name: getattr(record, name) for name in type(record).model_fields}
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return {f.name: getattr(record, f.name) for f in dataclasses.fields(record)}
    if isinstance(record, tuple) and hasattr(record, "_asdict"):
        return dict(record._asdict())
    if hasattr(record, "__dict__"):
        return dict(vars(record))
    raise TypeError(f"{type(record).__name__} has no fields")


class NamedRenderer:
    """Renders a Jinja2 spec against one record; syntax is checked on creation"""

    dialect = Dialect.NAMED

    def __init__(self, spec: str):
        self.spec = spec
        self._whole_record = _WHOLE_RECORD.search(spec) is not None
        try:
            self._template = _ENV.from_string(_to_jinja(spec))
        except TemplateSyntaxError as exc:
            raise ConfigError.invalid_spec(spec, exc.message or str(exc), cause=exc) from exc

    def render(self, args: tuple[Any, ...]) -> Rendered:
        if not args:
            return Rendered(self.spec)
        if len(args) > 1:
            logger.debug("named spec %r rendered with first of %d records", self.spec, len(args))

        try:
            context = record_fields(args[0])
        except TypeError as exc:
            if not self._whole_record:
                raise RenderError.unsupported_record(self.spec, args[0]) from exc
            context = {}
        context.setdefault(RECORD_NAME, args[0])

        try:
            return Rendered(self._template.render(context))
        except UndefinedError as exc:
            raise RenderError.missing_field(self.spec, exc.message or str(exc), cause=exc) from exc
        except TemplateError as exc:
            raise RenderError.missing_field(self.spec, str(exc), cause=exc) from exc


__all__ = [
    "NamedRenderer",
    "record_fields",
]
