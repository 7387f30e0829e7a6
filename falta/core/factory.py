# falta/core/factory.py
"""
Error factories.

A factory is declared once with a format spec and produces Falta errors
that all carry the format spec as their identity:

    ErrInvalidCircle = falta.new("invalid circle: radius ({{.Radius}}) <= 0", Circle)
    ErrCannotOpen = falta.newf("open: cannot open file %s")

    raise ErrInvalidCircle(circle)

Two variants exist, one per dialect:
- PositionalFactory: printf-style spec, heterogeneous positional arguments
- NamedFactory[T]: Jinja2 spec rendered against one record of type T

A factory is error-like without being raised: ``str(factory)`` is its
spec and it takes part in is_error()/is_match() on its own, so a factory
can be compared with the errors it produces.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Type, TypeVar, Union

from falta.config import get_config

from .errors import ConfigError
from .identity import Identity
from .instance import Falta
from .render import Dialect, NamedRenderer, PositionalRenderer, Renderer

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Record type for named factories rendered against plain mappings.
M = dict


class Factory(Identity, ABC):
    """Base for both factory variants"""

    dialect: Dialect

    def __init__(self, spec: str, renderer: Renderer, identities: Iterable[str] = ()):
        self._spec = spec
        self._renderer = renderer
        self._identities = frozenset(identities) | {spec}

    @property
    def message(self) -> str:
        return self._spec

    def __str__(self) -> str:
        return self._spec

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._spec!r})"

    def new(self, *args: Any) -> Falta:
        """
        Construct an error from this factory.

        With no arguments the result is the archetype error, whose message
        is the raw spec.

        Raises:
            RenderError: a named field could not be resolved
        """
        rendered = self._renderer.render(args)
        if rendered.mismatched and get_config().warn_on_render_mismatch:
            logger.warning("arguments do not fit format spec %r: %r", self._spec, rendered.text)
        return Falta(self._spec, rendered.text, rendered.cause, self._identities)

    def __call__(self, *args: Any) -> Falta:
        return self.new(*args)

    @abstractmethod
    def extend(self, other: "Factory") -> "Factory":
        """Combine with a factory of the same variant"""

    def _joined(self, other: "Factory") -> tuple[str, frozenset]:
        spec = self._spec + " " + other._spec
        logger.debug("extending %r with %r", self._spec, other._spec)
        return spec, self._identities | other._identities


class PositionalFactory(Factory):
    """Factory for printf-style specs"""

    dialect = Dialect.POSITIONAL

    def __init__(self, spec: str, identities: Iterable[str] = ()):
        super().__init__(spec, PositionalRenderer(spec), identities)

    def extend(self, other: Factory) -> "PositionalFactory":
        """
        Combine with another positional factory.

        The new spec is both specs joined by a space; its errors are also
        errors of ``self`` and of ``other``.
        """
        if not isinstance(other, PositionalFactory):
            raise ConfigError.dialect_mismatch(self, other)
        spec, identities = self._joined(other)
        return PositionalFactory(spec, identities)


class NamedFactory(Factory, Generic[T]):
    """Factory for Jinja2 specs rendered against records of type T"""

    dialect = Dialect.NAMED

    def __init__(self, spec: str, record_type: Type[T] = M, identities: Iterable[str] = ()):
        super().__init__(spec, NamedRenderer(spec), identities)
        self.record_type = record_type

    def new(self, *records: T) -> Falta:
        return super().new(*records)

    def extend(self, other: Factory) -> "NamedFactory[T]":
        """
        Combine with another named factory expecting the same record type.

        The combined factory renders both specs against one record.
        """
        if not isinstance(other, NamedFactory):
            raise ConfigError.dialect_mismatch(self, other)
        if other.record_type is not self.record_type:
            raise ConfigError.record_type_mismatch(self.record_type, other.record_type)
        spec, identities = self._joined(other)
        return NamedFactory(spec, self.record_type, identities)


def _check_spec(spec: Any) -> None:
    if not isinstance(spec, str):
        raise ConfigError.invalid_spec(repr(spec), f"must be str, got {type(spec).__name__}")


def new(spec: str, record_type: Type[T] = M) -> NamedFactory[T]:
    """
    Create a factory rendering ``spec`` as a Jinja2 template against a record.

    Raises:
        ConfigError: spec is not valid template syntax
    """
    _check_spec(spec)
    factory = NamedFactory(spec, record_type)
    logger.debug("created named factory %r for %s", spec, getattr(record_type, "__name__", record_type))
    return factory


def new_m(spec: str) -> NamedFactory[M]:
    """Create a named factory whose records are plain dicts"""
    return new(spec, M)


def newf(spec: str) -> PositionalFactory:
    """Create a factory rendering ``spec`` with printf-style verbs"""
    _check_spec(spec)
    factory = PositionalFactory(spec)
    logger.debug("created positional factory %r", spec)
    return factory


def create_factory(
    spec: str,
    dialect: Union[Dialect, str] = Dialect.POSITIONAL,
    record_type: Type[Any] = M,
) -> Factory:
    """
    Create a factory for the given dialect.

    Raises:
        ConfigError: unknown dialect or invalid spec
    """
    try:
        dialect = Dialect(dialect)
    except ValueError as exc:
        raise ConfigError.unknown_dialect(dialect) from exc
    if dialect is Dialect.NAMED:
        return new(spec, record_type)
    return newf(spec)


__all__ = [
    "M",
    "Factory",
    "PositionalFactory",
    "NamedFactory",
    "new",
    "new_m",
    "newf",
    "create_factory",
]
