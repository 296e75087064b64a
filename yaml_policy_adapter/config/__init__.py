# yaml_policy_adapter/config/__init__.py
"""
Adapter configuration: code defaults with optional YAML overrides
"""

from .loader import AdapterConfig, load_config

__all__ = [
    "AdapterConfig",
    "load_config",
]
