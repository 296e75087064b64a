# yaml_policy_adapter/core/rules/__init__.py
"""
Rule Store

Rule models, positional matching and the YAML codec
"""

from .models import (
    Rule,
    Section,
    section_of,
    RuleStore,
    Filter,
)

from .matching import (
    admits,
    fields_in_range,
    matches_fields,
)

from .codec import (
    encode,
    decode,
)

__all__ = [
    "Rule",
    "Section",
    "section_of",
    "RuleStore",
    "Filter",
    "admits",
    "fields_in_range",
    "matches_fields",
    "encode",
    "decode",
]
