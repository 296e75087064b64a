# yaml_policy_adapter/core/adapter/__init__.py
from .base import Adapter

__all__ = ["Adapter"]
