# yaml_policy_adapter/core/adapter/base.py
"""
Adapter Interface

Defines the persistence contract an enforcement engine calls into
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..model.base import PolicyModel
from ..rules.models import Filter


class Adapter(ABC):
    """
    Abstract interface for loading and storing policy rules

    Implementations:
    - YamlFileAdapter: rules in a single YAML file

    All methods raise PolicyAdapterError subclasses on failure. Mutations
    are not safe to run concurrently against the same storage; callers
    serialize them.
    """

    @abstractmethod
    def load_policy(self, model: PolicyModel) -> None:
        """Load every stored rule into model"""
        pass

    @abstractmethod
    def load_filtered_policy(self, model: PolicyModel, filter: Filter) -> None:
        """Load the rules admitted by filter into model"""
        pass

    @abstractmethod
    def is_filtered(self) -> bool:
        """True if the last load excluded at least one rule"""
        pass

    @abstractmethod
    def save_policy(self, model: PolicyModel) -> None:
        """Replace stored rules with the model's rules"""
        pass

    @abstractmethod
    def clear_policy(self) -> None:
        """Remove all stored rules"""
        pass

    @abstractmethod
    def add_policy(self, section: str, family_key: str, rule: Sequence[str]) -> bool:
        """
        Store one rule

        Returns:
            True if newly added, False if already present
        """
        pass

    @abstractmethod
    def add_policies(self, section: str, family_key: str, rules: Sequence[Sequence[str]]) -> bool:
        """
        Store a batch of rules, all or nothing

        Returns:
            True if the whole batch was added
        """
        pass

    @abstractmethod
    def remove_policy(self, section: str, family_key: str, rule: Sequence[str]) -> bool:
        """
        Remove one rule

        Returns:
            True if something was removed
        """
        pass

    @abstractmethod
    def remove_policies(self, section: str, family_key: str, rules: Sequence[Sequence[str]]) -> bool:
        """
        Remove a batch of rules, only if all of them are present

        Returns:
            True if the batch was removed (or the family does not exist)
        """
        pass

    @abstractmethod
    def remove_filtered_policy(
        self,
        section: str,
        family_key: str,
        field_index: int,
        field_values: List[str],
    ) -> bool:
        """
        Remove rules whose fields from field_index on match field_values

        Returns:
            True if at least one rule was removed
        """
        pass


__all__ = ["Adapter"]
