# falta/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


@dataclass
class FaltaLibError(Exception):
    """
    Base type for every error raised by falta itself.
    """
    message: str
    error_code: str = codes.UNKNOWN
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_config(self) -> bool:
        return self.error_code in codes.CONFIG_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": {k: _safe_str(v) for k, v in self.details.items()},
        }


@dataclass
class ConfigError(FaltaLibError):
    """
    Programmer error detected while declaring or composing factories.

    Raised for invalid format specs, extending across dialects or record
    types, and annotations that contain substitution verbs.
    """

    # -------- factories --------

    @classmethod
    def invalid_spec(
        cls,
        spec: str,
        reason: str,
        *,
        cause: Optional[BaseException] = None,
    ) -> "ConfigError":
        return cls(
            message=f"invalid format spec {spec!r}: {reason}",
            error_code=codes.INVALID_SPEC,
            details={"spec": spec, "reason": reason},
            cause=cause,
        )

    @classmethod
    def forbidden_verb(cls, text: str) -> "ConfigError":
        return cls(
            message=f"string {text!r} has verbs",
            error_code=codes.FORBIDDEN_VERB,
            details={"text": text},
        )

    @classmethod
    def unknown_dialect(cls, dialect: Any) -> "ConfigError":
        return cls(
            message=f"unknown dialect {dialect!r} (must be 'positional' or 'named')",
            error_code=codes.UNKNOWN_DIALECT,
            details={"dialect": dialect},
        )

    @classmethod
    def dialect_mismatch(cls, left: Any, right: Any) -> "ConfigError":
        return cls(
            message=(
                f"{type(left).__name__} can only be extended by another "
                f"{type(left).__name__}, got {type(right).__name__}"
            ),
            error_code=codes.DIALECT_MISMATCH,
            details={"left": type(left).__name__, "right": type(right).__name__},
        )

    @classmethod
    def record_type_mismatch(cls, left: Any, right: Any) -> "ConfigError":
        left = getattr(left, "__name__", repr(left))
        right = getattr(right, "__name__", repr(right))
        return cls(
            message=(
                f"named factories can only be extended by factories with the same "
                f"record type: {left} != {right}"
            ),
            error_code=codes.RECORD_TYPE_MISMATCH,
            details={"left": left, "right": right},
        )


@dataclass
class RenderError(FaltaLibError):
    """
    A format spec could not be rendered against the supplied record.
    """

    @classmethod
    def missing_field(
        cls,
        spec: str,
        reason: str,
        *,
        cause: Optional[BaseException] = None,
    ) -> "RenderError":
        return cls(
            message=f"cannot render {spec!r}: {reason}",
            error_code=codes.MISSING_FIELD,
            details={"spec": spec, "reason": reason},
            cause=cause,
        )

    @classmethod
    def unsupported_record(cls, spec: str, record: Any) -> "RenderError":
        return cls(
            message=f"cannot render {spec!r}: {type(record).__name__} has no fields",
            error_code=codes.UNSUPPORTED_RECORD,
            details={"spec": spec, "record_type": type(record).__name__},
        )
