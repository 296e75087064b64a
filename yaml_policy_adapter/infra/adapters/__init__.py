# yaml_policy_adapter/infra/adapters/__init__.py
"""
Policy Adapters

Infrastructure layer implementations of the Adapter contract
"""

from .yaml_file import YamlFileAdapter

__all__ = [
    "YamlFileAdapter",
]
