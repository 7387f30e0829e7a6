"""
falta - error factories with stable identity

Declare a factory once, construct errors from it anywhere, and recognise
them later by where they came from rather than by their text.

Basic usage:

Positional (printf-style) factories:
    >>> import falta
    >>> ErrCannotOpen = falta.newf("open: cannot open file %s")
    >>> err = ErrCannotOpen("notes.txt")
    >>> str(err)
    'open: cannot open file notes.txt'
    >>> falta.is_error(err, ErrCannotOpen)
    True

Named (template) factories:
    >>> ErrInvalidCircle = falta.new_m("invalid circle: radius ({{.Radius}}) <= 0")
    >>> str(ErrInvalidCircle({"Radius": -1}))
    'invalid circle: radius (-1) <= 0'

Wrapping and annotating keep identity:
    >>> cause = FileNotFoundError("no such file")
    >>> err = ErrCannotOpen("notes.txt").annotate("startup").wrap(cause)
    >>> falta.is_error(err, ErrCannotOpen), falta.is_error(err, cause)
    (True, True)

Capturing errors leaving a block:
    >>> def load(name):
    ...     with ErrCannotOpen(name).capture():
    ...         return open(name).read()

Extending factories:
    >>> ErrRequest = falta.new_m("request failed: [code={{.code}}]")
    >>> ErrReason = falta.new_m("because {{.reason}}")
    >>> ErrBoth = ErrRequest.extend(ErrReason)
    >>> str(ErrBoth({"code": 503, "reason": "down"}))
    'request failed: [code=503] because down'
"""

__version__ = "0.2.0"

from .core import (
    FaltaLibError,
    ConfigError,
    RenderError,
    Dialect,
    Identity,
    iter_chain,
    is_error,
    is_match,
    find,
    Capture,
    ErrorSlot,
    Falta,
    new_error,
    M,
    Factory,
    PositionalFactory,
    NamedFactory,
    new,
    new_m,
    newf,
    create_factory,
)
from .config import FaltaConfig, load_config, get_config, set_config

__all__ = [
    # Version
    "__version__",

    # Factories
    "new",
    "new_m",
    "newf",
    "new_error",
    "create_factory",
    "Factory",
    "PositionalFactory",
    "NamedFactory",
    "Dialect",
    "M",

    # Error values
    "Falta",
    "Capture",
    "ErrorSlot",

    # Identity
    "Identity",
    "is_error",
    "is_match",
    "iter_chain",
    "find",

    # Library errors
    "FaltaLibError",
    "ConfigError",
    "RenderError",

    # Configuration
    "FaltaConfig",
    "load_config",
    "get_config",
    "set_config",
]
