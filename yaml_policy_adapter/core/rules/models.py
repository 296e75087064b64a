# yaml_policy_adapter/core/rules/models.py
"""
Rule Store Models

In-memory shape of persisted rules: families of ordered string rules,
plus the positional filter used by filtered loads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple


Rule = List[str]


class Section(str, Enum):
    """Coarse rule category derived from a family key"""
    P = "p"  # permission-type families: p, p2, ...
    G = "g"  # grouping/role-type families: g, g2, ...


def section_of(family_key: str) -> Section:
    """
    Derive the section of a rule family from the first character of its key.

    "p" (either case) selects Section.P, anything else Section.G.

    Raises:
        ValueError: if family_key is empty
    """
    if not family_key:
        raise ValueError("family key must be a non-empty string")
    if family_key[0].lower() == Section.P.value:
        return Section.P
    return Section.G


@dataclass
class RuleStore:
    """
    Mapping from family key to an ordered list of rules.

    Family order and rule order within a family follow insertion order.
    """
    families: Dict[str, List[Rule]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.families)

    def __contains__(self, family_key: object) -> bool:
        return family_key in self.families

    def __iter__(self) -> Iterator[str]:
        return iter(self.families)

    def items(self) -> Iterator[Tuple[str, List[Rule]]]:
        return iter(self.families.items())

    def get(self, family_key: str) -> Optional[List[Rule]]:
        return self.families.get(family_key)

    def family(self, family_key: str) -> List[Rule]:
        """Rules of a family, creating an empty family if missing"""
        return self.families.setdefault(family_key, [])

    def rule_count(self) -> int:
        return sum(len(rules) for rules in self.families.values())

    def to_dict(self) -> Dict[str, List[Rule]]:
        return {key: [list(rule) for rule in rules] for key, rules in self.families.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Sequence[Sequence[str]]]) -> "RuleStore":
        return cls(families={key: [list(rule) for rule in rules] for key, rules in data.items()})


@dataclass
class Filter:
    """
    Per-section positional templates for a filtered load.

    Position i is either "" (field i unconstrained) or a literal that
    field i of a rule must equal for the rule to be kept.
    """
    p: List[str] = field(default_factory=list)
    g: List[str] = field(default_factory=list)

    @classmethod
    def all(cls) -> "Filter":
        """Filter admitting every rule"""
        return cls()

    def template_for(self, section: Section) -> List[str]:
        if section is Section.P:
            return self.p
        return self.g

    def is_empty(self) -> bool:
        return not any(self.p) and not any(self.g)


__all__ = [
    "Rule",
    "Section",
    "section_of",
    "RuleStore",
    "Filter",
]
