# yaml_policy_adapter/__init__.py
"""
yaml-policy-adapter - YAML file persistence for access-control policy rules

Loads rules from a YAML file into an enforcement engine's model, saves them
back, and applies single-rule and batch mutations directly to the file.

Basic usage:
    >>> from yaml_policy_adapter import YamlFileAdapter, MemoryPolicyModel, Filter
    >>> adapter = YamlFileAdapter("rbac_policy.yaml")
    >>> model = MemoryPolicyModel()
    >>> adapter.load_policy(model)
    >>> adapter.add_policy("p", "p", ["alice", "data1", "read"])
    True

Filtered load (keep only domain1 rules):
    >>> adapter.load_filtered_policy(model, Filter(p=["", "domain1"], g=["", "", "domain1"]))
    >>> adapter.is_filtered()
    True
"""

__version__ = "0.1.0"

from .config import AdapterConfig, load_config
from .core.adapter import Adapter
from .core.errors import (
    codes,
    PolicyAdapterError,
    IoFailure,
    DecodeFailure,
    EncodeFailure,
    ConfigurationError,
    PreconditionFailure,
)
from .core.model import PolicyModel, MemoryPolicyModel
from .core.rules import Rule, RuleStore, Filter, Section, section_of, encode, decode
from .infra.adapters import YamlFileAdapter

__all__ = [
    "__version__",
    "AdapterConfig",
    "load_config",
    "Adapter",
    "YamlFileAdapter",
    "PolicyModel",
    "MemoryPolicyModel",
    "Rule",
    "RuleStore",
    "Filter",
    "Section",
    "section_of",
    "encode",
    "decode",
    "codes",
    "PolicyAdapterError",
    "IoFailure",
    "DecodeFailure",
    "EncodeFailure",
    "ConfigurationError",
    "PreconditionFailure",
]
