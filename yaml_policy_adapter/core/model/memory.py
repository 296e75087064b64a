# yaml_policy_adapter/core/model/memory.py
"""
Memory Policy Model

In-memory model for tests and for engines without a rule table of their own
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .base import PolicyModel
from ..rules.models import Rule


class MemoryPolicyModel(PolicyModel):
    """
    Rules kept per section and family, in insertion order

    Duplicate rules within a family are ignored.
    """

    def __init__(self, policies: Optional[Dict[str, Dict[str, List[Rule]]]] = None):
        """
        Initialize memory model

        Args:
            policies: Optional dict of section -> family key -> rules
        """
        self._sections: Dict[str, Dict[str, List[Rule]]] = {}
        for section, families in (policies or {}).items():
            for family_key, rules in families.items():
                for rule in rules:
                    self.add_policy(section, family_key, rule)

    def add_policy(self, section: str, family_key: str, rule: Sequence[str]) -> bool:
        rules = self._sections.setdefault(section, {}).setdefault(family_key, [])
        rule = list(rule)
        if rule in rules:
            return False
        rules.append(rule)
        return True

    def get_policy_families(self, section: str) -> Dict[str, List[Rule]]:
        families = self._sections.get(section, {})
        return {key: [list(rule) for rule in rules] for key, rules in families.items()}

    def get_policy(self, section: str, family_key: str) -> List[Rule]:
        """Rules of one family (copy); empty if unknown"""
        rules = self._sections.get(section, {}).get(family_key, [])
        return [list(rule) for rule in rules]

    def has_policy(self, section: str, family_key: str, rule: Sequence[str]) -> bool:
        return list(rule) in self._sections.get(section, {}).get(family_key, [])

    def remove_policy(self, section: str, family_key: str, rule: Sequence[str]) -> bool:
        """
        Remove a rule

        Returns:
            True if removed, False if not found
        """
        rules = self._sections.get(section, {}).get(family_key)
        if not rules or list(rule) not in rules:
            return False
        rules.remove(list(rule))
        return True

    def policy_count(self, section: Optional[str] = None) -> int:
        sections = [section] if section is not None else list(self._sections)
        return sum(
            len(rules)
            for name in sections
            for rules in self._sections.get(name, {}).values()
        )

    def clear(self) -> None:
        """Drop all rules"""
        self._sections.clear()


__all__ = ["MemoryPolicyModel"]
