# falta/core/capture.py
"""
Capture: wrap errors leaving a scope with a given falta error.

Two forms:

- raised errors: an exception escaping the block (or decorated function)
  is re-raised as ``falta.wrap(exc)``
- returned errors: an ErrorSlot given a new error inside the block has
  that error replaced by ``falta.wrap(error)`` when the block ends normally

Each exit wraps at most once. A Capture keeps only its slot and the slot's
value on entry; the decorator form enters a fresh Capture per call, so
nested, repeated and concurrent captures do not interact.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

if TYPE_CHECKING:
    from .instance import Falta

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class ErrorSlot:
    """Holder for an error a function is about to return"""
    error: Optional[BaseException] = None

    def __bool__(self) -> bool:
        return self.error is not None


class Capture:
    """Context manager and decorator returned by ``Falta.capture()``"""

    def __init__(self, falta: "Falta", slot: Optional[ErrorSlot] = None):
        self._falta = falta
        self._slot = slot
        self._before: Optional[BaseException] = None

    @property
    def slot(self) -> Optional[ErrorSlot]:
        return self._slot

    def __enter__(self) -> Optional[ErrorSlot]:
        self._before = self._slot.error if self._slot is not None else None
        return self._slot

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is not None:
            # KeyboardInterrupt, SystemExit and friends pass through untouched
            if not isinstance(exc, Exception):
                return False
            wrapped = self._falta.wrap(exc)
            logger.debug("captured %s as %r", type(exc).__name__, wrapped)
            raise wrapped from exc

        # only an error stored during this scope is wrapped
        if self._slot is not None and self._slot.error is not None and self._slot.error is not self._before:
            self._slot.error = self._falta.wrap(self._slot.error)
            logger.debug("captured slot error as %r", self._slot.error)
        return False

    def __call__(self, func: F) -> F:
        @functools.wraps(func)
        def inner(*args, **kwargs):
            with Capture(self._falta, self._slot):
                return func(*args, **kwargs)
        return inner  # type: ignore[return-value]


__all__ = [
    "Capture",
    "ErrorSlot",
]
