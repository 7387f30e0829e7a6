# falta/core/instance.py
"""
Falta: the error value produced by a factory.

A Falta is an ordinary exception (it can be raised and caught) that also
carries its factory's identity keys. It is immutable: wrap() and annotate()
return new values and leave the receiver untouched.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .capture import Capture, ErrorSlot
from .errors import ConfigError
from .identity import Identity, is_error, _safe_str
from .render import has_verbs


class Falta(Identity, Exception):
    """An error carrying the identity of the factory that produced it"""

    def __init__(
        self,
        spec: str,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
        identities: Iterable[str] = (),
    ):
        self._spec = spec
        self._identities = frozenset(identities) | {spec}
        self._message = spec if message is None else message
        self._cause = cause
        super().__init__(self._message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r})"

    def __reduce__(self):
        return (type(self), (self._spec, self._message, self._cause, self._identities))

    def _derive(self, message: str, cause: Optional[BaseException]) -> "Falta":
        return type(self)(self._spec, message, cause, self._identities)

    def wrap(self, err: BaseException) -> "Falta":
        """Return a copy whose cause is ``err``; the message gains ``": <err>"``"""
        if not isinstance(err, BaseException):
            raise TypeError(f"can only wrap exceptions, got {type(err).__name__}")
        return self._derive(f"{self._message}: {_safe_str(err)}", err)

    def annotate(self, annotation: str) -> "Falta":
        """
        Return a copy with ``": <annotation>"`` appended to the message.

        Raises:
            ConfigError: the annotation contains verbs such as %s
        """
        if has_verbs(annotation):
            raise ConfigError.forbidden_verb(annotation)
        return self._derive(f"{self._message}: {annotation}", self._cause)

    def unwrap(self) -> Optional[BaseException]:
        """Return the wrapped cause, if any"""
        return self._cause

    def matches(self, target: Any) -> bool:
        cause = self._cause if self._cause is not None else self.__cause__
        if cause is not None and target is not None and is_error(target, cause):
            return True
        return super().matches(target)

    def capture(self, slot: Optional[ErrorSlot] = None) -> Capture:
        """
        Wrap whatever error leaves the enclosing block with this error.

            with ErrCannotOpen.new(name).capture():
                return open(name)

        See Capture for the slot form used by functions that return errors.
        """
        return Capture(self, slot)


def new_error(msg: str) -> Falta:
    """
    Return a standalone Falta whose message is also its identity.

    Raises:
        ConfigError: msg contains verbs such as %s
    """
    if has_verbs(msg):
        raise ConfigError.forbidden_verb(msg)
    return Falta(msg)


__all__ = [
    "Falta",
    "new_error",
]
