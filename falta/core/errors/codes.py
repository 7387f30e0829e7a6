# falta/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"

# configuration (programmer errors, raised at declaration time)
INVALID_SPEC: Final[str] = "INVALID_SPEC"
DIALECT_MISMATCH: Final[str] = "DIALECT_MISMATCH"
RECORD_TYPE_MISMATCH: Final[str] = "RECORD_TYPE_MISMATCH"
FORBIDDEN_VERB: Final[str] = "FORBIDDEN_VERB"
UNKNOWN_DIALECT: Final[str] = "UNKNOWN_DIALECT"

# rendering (runtime data errors, raised at construction time)
MISSING_FIELD: Final[str] = "MISSING_FIELD"
UNSUPPORTED_RECORD: Final[str] = "UNSUPPORTED_RECORD"


# ---- semantic groups ----

CONFIG_CODES: Final[set[str]] = {
    INVALID_SPEC,
    DIALECT_MISMATCH,
    RECORD_TYPE_MISMATCH,
    FORBIDDEN_VERB,
    UNKNOWN_DIALECT,
}

RENDER_CODES: Final[set[str]] = {
    MISSING_FIELD,
    UNSUPPORTED_RECORD,
}
