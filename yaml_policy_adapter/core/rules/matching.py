# yaml_policy_adapter/core/rules/matching.py
"""
Rule Matching

Positional comparisons shared by filtered loads and filtered removals.
"""

from __future__ import annotations

from typing import Sequence


def admits(template: Sequence[str], rule: Sequence[str]) -> bool:
    """
    Check whether a filter template admits a rule.

    Empty template positions are skipped. A non-empty position rejects the
    rule when the field differs or the rule is too short to have it.
    """
    for index, value in enumerate(template):
        if not value:
            continue
        if index >= len(rule) or rule[index] != value:
            return False
    return True


def fields_in_range(rule: Sequence[str], field_index: int, field_values: Sequence[str]) -> bool:
    """True if rule has a field for every position field_values addresses"""
    return field_index + len(field_values) <= len(rule)


def matches_fields(rule: Sequence[str], field_index: int, field_values: Sequence[str]) -> bool:
    """
    Check whether rule[field_index:] agrees with field_values.

    Empty entries match anything. The caller checks the range first with
    fields_in_range().
    """
    for offset, value in enumerate(field_values):
        if value and rule[field_index + offset] != value:
            return False
    return True


__all__ = [
    "admits",
    "fields_in_range",
    "matches_fields",
]
