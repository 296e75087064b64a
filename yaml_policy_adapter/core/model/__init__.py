# yaml_policy_adapter/core/model/__init__.py
"""
Policy Models

The rule model contract consumed by adapters, plus an in-memory model
"""

from .base import PolicyModel
from .memory import MemoryPolicyModel

__all__ = [
    "PolicyModel",
    "MemoryPolicyModel",
]
