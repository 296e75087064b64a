# yaml_policy_adapter/core/model/base.py
"""
Policy Model Interface

The part of an enforcement engine's rule model that the adapter talks to
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List

from ..rules.models import Rule


class PolicyModel(ABC):
    """
    Abstract rule model fed by loads and read by saves

    Implementations:
    - MemoryPolicyModel: plain in-memory model
    - engine-specific models wrapping their own assertion tables
    """

    @abstractmethod
    def add_policy(self, section: str, family_key: str, rule: Rule) -> bool:
        """
        Accept one rule during a load

        Args:
            section: "p" or "g"
            family_key: Rule family (e.g. "p", "g2")
            rule: Rule fields

        Returns:
            True if the rule was added, False if it was already present
        """
        pass

    @abstractmethod
    def get_policy_families(self, section: str) -> Dict[str, List[Rule]]:
        """
        Current rules of a section, grouped by family key

        Returns:
            Mapping of family key to rule list; empty for unknown sections
        """
        pass


__all__ = ["PolicyModel"]
