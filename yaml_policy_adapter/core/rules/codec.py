# yaml_policy_adapter/core/rules/codec.py
"""
Rule Store Codec

Converts a RuleStore to and from its YAML text form:

    p:
    - [alice, data1, read]
    - [bob, data2, write]
    g:
    - [alice, admin]

Empty families are kept as `key: []`. An empty store encodes to an empty
document, and empty or comment-only text decodes to an empty store. A family
key repeated in one document is a decode failure.
"""

from __future__ import annotations

from typing import Any

import yaml

from ..errors import PolicyAdapterError
from .models import RuleStore


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects a key repeated within one mapping"""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                except TypeError:
                    continue  # unhashable; the base class reports it
                if duplicate:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping", node.start_mark,
                        f"found duplicate key {key!r}", key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def encode(store: RuleStore) -> str:
    """
    Encode a RuleStore as YAML text

    Raises:
        EncodeFailure: if a field cannot be represented
    """
    if not store.families:
        return ""

    try:
        # default_flow_style=None: rules (lists of scalars) go inline, the rest block
        return yaml.safe_dump(
            store.to_dict(),
            default_flow_style=None,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        raise PolicyAdapterError.encode_failure(
            f"cannot encode policy document: {e}",
            cause=e,
        ) from e


def decode(text: str) -> RuleStore:
    """
    Decode YAML text into a RuleStore

    Raises:
        DecodeFailure: if the text is not YAML or has the wrong shape
    """
    if not text.strip():
        return RuleStore()

    try:
        doc = yaml.load(text, Loader=_UniqueKeyLoader)
    except yaml.YAMLError as e:
        raise PolicyAdapterError.decode_failure(
            f"policy document is not valid YAML: {e}",
            cause=e,
        ) from e

    if doc is None:
        return RuleStore()

    if not isinstance(doc, dict):
        raise PolicyAdapterError.decode_failure(
            "top level should be a mapping",
            details={"found": type(doc).__name__},
        )

    store = RuleStore()
    for family_key, rules in doc.items():
        if not isinstance(family_key, str) or not family_key:
            raise PolicyAdapterError.decode_failure(
                "family key should be a non-empty string",
                details={"family_key": repr(family_key)},
            )
        store.families[family_key] = _decode_family(family_key, rules)
    return store


def _decode_family(family_key: str, rules: Any) -> list:
    if not isinstance(rules, list):
        raise PolicyAdapterError.decode_failure(
            f"rules of {family_key!r} should be a list",
            details={"family_key": family_key, "found": type(rules).__name__},
        )

    decoded = []
    for index, rule in enumerate(rules):
        if not isinstance(rule, list):
            raise PolicyAdapterError.decode_failure(
                f"rule {index} of {family_key!r} should be a list",
                details={"family_key": family_key, "index": index, "found": type(rule).__name__},
            )
        for value in rule:
            if not isinstance(value, str):
                raise PolicyAdapterError.decode_failure(
                    f"rule {index} of {family_key!r} has a non-string field",
                    details={"family_key": family_key, "index": index, "field": repr(value)},
                )
        decoded.append(list(rule))
    return decoded


__all__ = ["encode", "decode"]
