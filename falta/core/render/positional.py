# falta/core/render/positional.py
"""
Positional (printf-style) rendering.

Rendering never fails: a mismatch between verbs and arguments is written
into the message using Go-style markers, because raising while building
an error would hide the error being reported.

    %!d(MISSING)            no argument left for the verb
    %!d(str=dog)            argument does not fit the verb
    %!(EXTRA int=1, str=x)  arguments left over
    %!(NOVERB)              spec ends with a bare '%'
"""

from __future__ import annotations

import re
from typing import Any, List, Optional

from .types import Dialect, Rendered

VERBS_PATTERN = re.compile(r"%\w")

_TOKEN = re.compile(r"%(?P<flags>[-+ #0]*)(?P<width>\d+)?(?:\.(?P<prec>\d+))?(?P<verb>.)?", re.DOTALL)

# verbs understood by Python's % operator
_PY_VERBS = frozenset("diouxXeEfFgGcrsa")


def has_verbs(text: str) -> bool:
    """True if text contains a substitution verb such as %s or %d"""
    return VERBS_PATTERN.search(text) is not None


def _describe(arg: Any) -> str:
    return f"{type(arg).__name__}={arg}"


class PositionalRenderer:
    """Renders a printf-style spec against positional arguments"""

    dialect = Dialect.POSITIONAL

    def __init__(self, spec: str):
        self.spec = spec

    def render(self, args: tuple[Any, ...]) -> Rendered:
        if not args:
            return Rendered(self.spec)

        out: List[str] = []
        cause: Optional[BaseException] = None
        mismatched = False
        pos = 0
        argi = 0

        for m in _TOKEN.finditer(self.spec):
            out.append(self.spec[pos:m.start()])
            pos = m.end()
            verb = m.group("verb")

            if verb is None:
                out.append("%!(NOVERB)")
                mismatched = True
                continue
            if verb == "%":
                out.append("%")
                continue
            if argi >= len(args):
                out.append(f"%!{verb}(MISSING)")
                mismatched = True
                continue

            arg = args[argi]
            argi += 1
            head = "%" + (m.group("flags") or "") + (m.group("width") or "")
            if m.group("prec") is not None:
                head += "." + m.group("prec")

            if verb in ("v", "w"):
                if verb == "w" and isinstance(arg, BaseException) and cause is None:
                    cause = arg
                verb = "s"
            if verb not in _PY_VERBS:
                out.append(f"%!{m.group('verb')}({_describe(arg)})")
                mismatched = True
                continue
            try:
                out.append((head + verb) % (arg,))
            except (TypeError, ValueError, OverflowError):
                out.append(f"%!{verb}({_describe(arg)})")
                mismatched = True

        out.append(self.spec[pos:])

        if argi < len(args):
            extra = ", ".join(_describe(a) for a in args[argi:])
            out.append(f"%!(EXTRA {extra})")
            mismatched = True

        return Rendered("".join(out), cause=cause, mismatched=mismatched)


__all__ = [
    "PositionalRenderer",
    "has_verbs",
    "VERBS_PATTERN",
]
