# yaml_policy_adapter/core/__init__.py
"""
Core components: rule models, codec, model and adapter contracts, errors.

No side effects on import.
"""
