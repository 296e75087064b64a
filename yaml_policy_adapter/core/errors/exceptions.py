# yaml_policy_adapter/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Dict, Optional, Union

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Codes outside the known set are downgraded to UNKNOWN.
    """
    c = _safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass(eq=False)
class PolicyAdapterError(Exception):
    """
    Base exception for every adapter failure.
    """
    message: str
    error_code: str = codes.UNKNOWN
    error_type: str = "ADAPTER_ERROR"  # IO_ERROR / DECODE_ERROR / CONFIG_ERROR / ...
    phase: str = "unknown"             # read / decode / encode / write / validate
    retryable: bool = False
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
            "phase": self.phase,
            "retryable": self.retryable,
            "details": self.details,
        }

    # -------- factories --------

    @classmethod
    def io_failure(
        cls,
        path: Union[str, "PathLike[str]"],
        cause: OSError,
        *,
        phase: str = "read",
    ) -> "IoFailure":
        if isinstance(cause, FileNotFoundError):
            code = codes.FILE_NOT_FOUND
        elif isinstance(cause, PermissionError):
            code = codes.PERMISSION_DENIED
        else:
            code = codes.IO_ERROR

        verb = "read" if phase == "read" else "write"
        return IoFailure(
            message=f"failed to {verb} policy file {_safe_str(path)!r}: {_safe_str(cause)}",
            error_code=code,
            phase=phase,
            retryable=code in codes.RETRYABLE_CODES,
            details={"path": _safe_str(path), "errno": getattr(cause, "errno", None)},
            cause=cause,
        )

    @classmethod
    def decode_failure(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> "DecodeFailure":
        return DecodeFailure(
            message=message,
            error_code=codes.DECODE_FAILED,
            details=details or {},
            cause=cause,
        )

    @classmethod
    def encode_failure(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> "EncodeFailure":
        return EncodeFailure(
            message=message,
            error_code=codes.ENCODE_FAILED,
            details=details or {},
            cause=cause,
        )

    @classmethod
    def configuration(
        cls,
        message: str,
        *,
        error_code: str = codes.CONFIG_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ConfigurationError":
        return ConfigurationError(
            message=message,
            error_code=error_code,
            details=details or {},
        )

    @classmethod
    def precondition(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> "PreconditionFailure":
        return PreconditionFailure(
            message=message,
            error_code=codes.PRECONDITION_FAILED,
            details=details or {},
        )

    @classmethod
    def invalid_argument(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> "PreconditionFailure":
        return PreconditionFailure(
            message=message,
            error_code=codes.INVALID_ARGUMENT,
            details=details or {},
        )


@dataclass(eq=False)
class IoFailure(PolicyAdapterError):
    """File missing, unreadable or unwritable."""
    error_code: str = codes.IO_ERROR
    error_type: str = "IO_ERROR"
    phase: str = "read"


@dataclass(eq=False)
class DecodeFailure(PolicyAdapterError):
    """Malformed document or wrong shape at any level."""
    error_code: str = codes.DECODE_FAILED
    error_type: str = "DECODE_ERROR"
    phase: str = "decode"


@dataclass(eq=False)
class EncodeFailure(PolicyAdapterError):
    error_code: str = codes.ENCODE_FAILED
    error_type: str = "ENCODE_ERROR"
    phase: str = "encode"


@dataclass(eq=False)
class ConfigurationError(PolicyAdapterError):
    """E.g. a save attempted with an empty or unset path."""
    error_code: str = codes.CONFIG_ERROR
    error_type: str = "CONFIG_ERROR"
    phase: str = "validate"


@dataclass(eq=False)
class PreconditionFailure(PolicyAdapterError):
    """
    A mutation request that cannot apply as a whole: a batch remove
    referencing an absent rule, a filtered remove with an out-of-range
    index or empty filter values, or an invalid argument.
    """
    error_code: str = codes.PRECONDITION_FAILED
    error_type: str = "PRECONDITION_ERROR"
    phase: str = "validate"


__all__ = [
    "PolicyAdapterError",
    "IoFailure",
    "DecodeFailure",
    "EncodeFailure",
    "ConfigurationError",
    "PreconditionFailure",
]
