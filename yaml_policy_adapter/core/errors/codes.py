# yaml_policy_adapter/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INTERNAL_ERROR: Final[str] = "INTERNAL_ERROR"
INVALID_ARGUMENT: Final[str] = "INVALID_ARGUMENT"
PRECONDITION_FAILED: Final[str] = "PRECONDITION_FAILED"

# fs
FILE_NOT_FOUND: Final[str] = "FILE_NOT_FOUND"
PERMISSION_DENIED: Final[str] = "PERMISSION_DENIED"
IO_ERROR: Final[str] = "IO_ERROR"

# document format
DECODE_FAILED: Final[str] = "DECODE_FAILED"
ENCODE_FAILED: Final[str] = "ENCODE_FAILED"

# configuration
CONFIG_ERROR: Final[str] = "CONFIG_ERROR"
PATH_NOT_SET: Final[str] = "PATH_NOT_SET"


# ---- semantic groups (internal helpers) ----

IO_CODES: Final[set[str]] = {
    FILE_NOT_FOUND,
    PERMISSION_DENIED,
    IO_ERROR,
}

FORMAT_CODES: Final[set[str]] = {
    DECODE_FAILED,
    ENCODE_FAILED,
}

CONFIG_CODES: Final[set[str]] = {
    CONFIG_ERROR,
    PATH_NOT_SET,
}

# Transient conditions a caller may retry. The adapter itself never retries.
RETRYABLE_CODES: Final[set[str]] = {
    IO_ERROR,
}

KNOWN_CODES: Final[set[str]] = {
    UNKNOWN,
    INTERNAL_ERROR,
    INVALID_ARGUMENT,
    PRECONDITION_FAILED,
} | IO_CODES | FORMAT_CODES | CONFIG_CODES
