# falta/core/identity.py
"""
Error identity.

A factory and every error it produces share identity keys (format specs).
Identity is recorded structurally, so it survives wrapping, annotating and
any message text the arguments produce.

Rules, for an error E checked against a target T:
- E matches T if T's primary key is one of E's identity keys
- E matches T if E wraps a cause that appears in T's cause chain
- a foreign (non-falta) error matches T if its text equals T's spec,
  when legacy_message_match is enabled
- any element of E's cause chain matching T is enough
"""

from __future__ import annotations

from typing import Any, FrozenSet, Iterator, Optional

from falta.config import get_config


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


class Identity:
    """
    Something that carries falta identity keys.

    Subclasses set ``_spec`` (primary key) and ``_identities`` (all keys,
    including ``_spec``).
    """

    _spec: str
    _identities: FrozenSet[str]

    @property
    def spec(self) -> str:
        """The format spec this value was declared with"""
        return self._spec

    @property
    def identities(self) -> FrozenSet[str]:
        """Every format spec this value is a member of"""
        return self._identities

    def matches(self, target: Any) -> bool:
        """
        True if this value belongs to the family ``target`` names.

        ``target`` may be a factory, a falta error, or a foreign exception;
        its whole cause chain is consulted.
        """
        if target is None:
            return False
        legacy = get_config().legacy_message_match
        for t in iter_chain(target):
            if isinstance(t, Identity):
                if t.spec in self._identities:
                    return True
            elif legacy and _safe_str(t) == self._spec:
                return True
        return False


def _next_link(err: Any) -> Optional[Any]:
    unwrap = getattr(err, "unwrap", None)
    if callable(unwrap):
        nxt = unwrap()
        if nxt is not None:
            return nxt
    return getattr(err, "__cause__", None)


def iter_chain(err: Any, max_depth: Optional[int] = None) -> Iterator[Any]:
    """
    Yield ``err`` followed by its causes, outermost first.

    Falta errors are followed through ``unwrap()``, falling back to
    ``__cause__`` (``raise ErrX(...) from exc``) like other exceptions.
    Cycles end the walk.
    """
    depth = max_depth if max_depth is not None else get_config().max_chain_depth
    seen = set()
    while err is not None and depth > 0:
        if id(err) in seen:
            return
        seen.add(id(err))
        yield err
        depth -= 1
        err = _next_link(err)


def is_error(err: Any, target: Any) -> bool:
    """
    Report whether any error in ``err``'s chain matches ``target``.

    Directional: an error from an extended factory is an error of each
    original factory, but not the other way round.
    """
    if err is None or target is None:
        return err is target

    key = target.spec if isinstance(target, Identity) else None
    legacy = get_config().legacy_message_match

    for e in iter_chain(err):
        if e is target:
            return True
        if isinstance(e, Identity):
            if e.matches(target):
                return True
        elif legacy and key is not None and _safe_str(e) == key:
            return True
    return False


def is_match(a: Any, b: Any) -> bool:
    """Symmetric identity check: the same answer in either argument order"""
    return is_error(a, b) or is_error(b, a)


def find(err: Any, target: Identity) -> Optional[Identity]:
    """
    Return the first falta value in ``err``'s chain that belongs to ``target``.

    Returns None when nothing in the chain carries ``target``'s spec.
    """
    for e in iter_chain(err):
        if isinstance(e, Identity) and target.spec in e.identities:
            return e
    return None


__all__ = [
    "Identity",
    "iter_chain",
    "is_error",
    "is_match",
    "find",
]
