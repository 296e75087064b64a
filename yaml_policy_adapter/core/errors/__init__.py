# yaml_policy_adapter/core/errors/__init__.py
"""
Error types for the policy adapter.

Every failure surfaces as a PolicyAdapterError subclass carrying a stable
error code from `codes`.

No side effects on import.
"""

from . import codes
from .exceptions import (
    PolicyAdapterError,
    IoFailure,
    DecodeFailure,
    EncodeFailure,
    ConfigurationError,
    PreconditionFailure,
)

__all__ = [
    "codes",
    "PolicyAdapterError",
    "IoFailure",
    "DecodeFailure",
    "EncodeFailure",
    "ConfigurationError",
    "PreconditionFailure",
]
