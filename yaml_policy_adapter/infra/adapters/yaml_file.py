# yaml_policy_adapter/infra/adapters/yaml_file.py
"""
YAML File Adapter

Stores policy rules in a single YAML file:

    p:
    - [alice, data1, read]
    - [bob, data2, write]
    g:
    - [alice, data2_admin]

Every mutation is read-modify-write against the whole file. The adapter
does no locking; callers serialize mutations per file.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Union
import logging
import os

from yaml_policy_adapter.config import AdapterConfig
from yaml_policy_adapter.core.adapter import Adapter
from yaml_policy_adapter.core.errors import (
    PolicyAdapterError,
    PreconditionFailure,
    codes,
)
from yaml_policy_adapter.core.model import PolicyModel
from yaml_policy_adapter.core.rules import (
    Filter,
    Rule,
    RuleStore,
    admits,
    decode,
    encode,
    fields_in_range,
    matches_fields,
    section_of,
)
from yaml_policy_adapter.utils.files import (
    is_empty_path,
    read_text,
    write_text,
    write_text_atomic,
)

logger = logging.getLogger(__name__)


class YamlFileAdapter(Adapter):
    """
    Adapter persisting rules to a YAML file

    Example:
        adapter = YamlFileAdapter("rbac_policy.yaml")
        model = MemoryPolicyModel()
        adapter.load_policy(model)
        adapter.add_policy("p", "p", ["alice", "data1", "read"])
    """

    def __init__(
        self,
        file_path: Optional[Union[str, "os.PathLike[str]"]],
        config: Optional[AdapterConfig] = None,
    ):
        """
        Initialize YAML file adapter

        Args:
            file_path: Policy file location. Required for every operation.
            config: Adapter configuration (code defaults if None)
        """
        self.file_path = file_path
        self.config = config or AdapterConfig.default()
        self._is_filtered = False

    def __repr__(self) -> str:
        return f"YamlFileAdapter(file_path={self.file_path!r}, filtered={self._is_filtered})"

    # ------------------------------------------------------------------
    # loading
    # ------------------------------------------------------------------

    def load_policy(self, model: PolicyModel) -> None:
        self._load_into_model(model, Filter.all())
        self._is_filtered = False

    def load_filtered_policy(self, model: PolicyModel, filter: Filter) -> None:
        self._is_filtered = self._load_into_model(model, filter)

    def is_filtered(self) -> bool:
        return self._is_filtered

    def _load_into_model(self, model: PolicyModel, filter: Filter) -> bool:
        """
        Fold admitted rules into model in file order

        Returns:
            True if the filter excluded at least one rule
        """
        store = self._read_store()
        admit_all = filter.is_empty()

        admitted = 0
        excluded = 0
        for family_key, rules in store.items():
            section = section_of(family_key)
            template = filter.template_for(section)
            for rule in rules:
                if admit_all or admits(template, rule):
                    model.add_policy(section.value, family_key, rule)
                    admitted += 1
                else:
                    excluded += 1

        logger.debug(
            f"Loaded {admitted} rules from {len(store)} families in {self.file_path} "
            f"({excluded} excluded by filter)"
        )
        return excluded > 0

    # ------------------------------------------------------------------
    # saving
    # ------------------------------------------------------------------

    def save_policy(self, model: PolicyModel) -> None:
        self._require_path()
        if self._is_filtered:
            logger.warning(
                f"Saving a filtered policy to {self.file_path}: "
                "rules excluded by the last load will be dropped"
            )

        families = {}
        for section in self.config.sections:
            families.update(model.get_policy_families(section))

        self._write_store(RuleStore.from_dict(families))

    def clear_policy(self) -> None:
        self._write_store(RuleStore())

    # ------------------------------------------------------------------
    # mutations
    # ------------------------------------------------------------------

    def add_policy(self, section: str, family_key: str, rule: Sequence[str]) -> bool:
        self._check_family(section, family_key)
        rule = self._check_rule(rule)

        store = self._read_store()
        rules = store.family(family_key)
        if rule in rules:
            logger.debug(f"Rule {rule} already in {family_key!r}, not added")
            return False

        rules.append(rule)
        self._write_store(store)
        return True

    def add_policies(self, section: str, family_key: str, rules: Sequence[Sequence[str]]) -> bool:
        self._check_family(section, family_key)
        batch = [self._check_rule(rule) for rule in rules]
        if not batch:
            return False
        if _has_duplicates(batch):
            logger.debug(f"Batch for {family_key!r} repeats a rule, not added")
            return False

        store = self._read_store()
        existing = store.family(family_key)
        if any(rule in existing for rule in batch):
            logger.debug(f"Batch for {family_key!r} overlaps existing rules, not added")
            return False

        existing.extend(batch)
        self._write_store(store)
        return True

    def remove_policy(self, section: str, family_key: str, rule: Sequence[str]) -> bool:
        self._check_family(section, family_key)
        rule = self._check_rule(rule)

        store = self._read_store()
        rules = store.get(family_key)
        removed = False
        if rules is not None:
            kept = [r for r in rules if r != rule]
            removed = len(kept) != len(rules)
            store.families[family_key] = kept

        self._write_store(store)
        return removed

    def remove_policies(self, section: str, family_key: str, rules: Sequence[Sequence[str]]) -> bool:
        self._check_family(section, family_key)
        batch = [self._check_rule(rule) for rule in rules]

        store = self._read_store()
        existing = store.get(family_key)
        if existing is None:
            return True

        missing = [rule for rule in batch if rule not in existing]
        if missing:
            return self._reject(PolicyAdapterError.precondition(
                f"{len(missing)} of {len(batch)} rules are not in {family_key!r}",
                details={"family_key": family_key, "missing": missing},
            ))

        store.families[family_key] = [rule for rule in existing if rule not in batch]
        self._write_store(store)
        return True

    def remove_filtered_policy(
        self,
        section: str,
        family_key: str,
        field_index: int,
        field_values: List[str],
    ) -> bool:
        self._check_family(section, family_key)
        if isinstance(field_index, bool) or not isinstance(field_index, int):
            raise PolicyAdapterError.invalid_argument(
                "field_index should be an integer",
                details={"field_index": repr(field_index)},
            )
        values = self._check_rule(field_values)

        if not values:
            return self._reject(PolicyAdapterError.precondition(
                "field_values must not be empty",
                details={"family_key": family_key},
            ))
        if field_index < 0:
            return self._reject(PolicyAdapterError.precondition(
                f"field_index {field_index} is negative",
                details={"family_key": family_key, "field_index": field_index},
            ))

        store = self._read_store()
        rules = store.get(family_key)
        if not rules:
            return False

        for rule in rules:
            if not fields_in_range(rule, field_index, values):
                return self._reject(PolicyAdapterError.precondition(
                    f"field range {field_index}..{field_index + len(values) - 1} "
                    f"exceeds a rule of {family_key!r}",
                    details={"family_key": family_key, "rule": rule, "field_index": field_index},
                ))

        kept = [rule for rule in rules if not matches_fields(rule, field_index, values)]
        if len(kept) == len(rules):
            return False

        store.families[family_key] = kept
        self._write_store(store)
        logger.debug(f"Removed {len(rules) - len(kept)} rules from {family_key!r}")
        return True

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _require_path(self) -> str:
        if is_empty_path(self.file_path):
            raise PolicyAdapterError.configuration(
                "policy file path is empty",
                error_code=codes.PATH_NOT_SET,
            )
        return os.fspath(self.file_path)

    def _read_store(self) -> RuleStore:
        path = self._require_path()
        try:
            text = read_text(path, encoding=self.config.encoding)
        except UnicodeDecodeError as e:
            raise PolicyAdapterError.decode_failure(
                f"policy file {path!r} is not valid {self.config.encoding}",
                details={"path": path},
                cause=e,
            ) from e
        except OSError as e:
            raise PolicyAdapterError.io_failure(path, e, phase="read") from e
        return decode(text)

    def _write_store(self, store: RuleStore) -> None:
        path = self._require_path()
        text = encode(store)
        try:
            if self.config.atomic_write:
                write_text_atomic(path, text, encoding=self.config.encoding, fsync=self.config.fsync)
            else:
                write_text(path, text, encoding=self.config.encoding)
        except OSError as e:
            raise PolicyAdapterError.io_failure(path, e, phase="write") from e
        logger.debug(f"Wrote {store.rule_count()} rules in {len(store)} families to {path}")

    def _reject(self, error: PreconditionFailure) -> bool:
        if self.config.strict:
            raise error
        logger.info(f"Policy change rejected: {error}")
        return False

    @staticmethod
    def _check_family(section: str, family_key: str) -> None:
        if not isinstance(family_key, str) or not family_key:
            raise PolicyAdapterError.invalid_argument(
                "family key should be a non-empty string",
                details={"family_key": repr(family_key)},
            )
        derived = section_of(family_key).value
        if section and section != derived:
            logger.debug(f"Section {section!r} ignored for family {family_key!r} (section {derived!r})")

    @staticmethod
    def _check_rule(rule: Sequence[str]) -> Rule:
        if not isinstance(rule, (list, tuple)):
            raise PolicyAdapterError.invalid_argument(
                "rule should be a sequence of strings",
                details={"rule": repr(rule)},
            )
        fields = list(rule)
        if not all(isinstance(value, str) for value in fields):
            raise PolicyAdapterError.invalid_argument(
                "rule fields should be strings",
                details={"rule": repr(rule)},
            )
        return fields


def _has_duplicates(rules: List[Rule]) -> bool:
    seen = set()
    for rule in rules:
        key = tuple(rule)
        if key in seen:
            return True
        seen.add(key)
    return False


__all__ = ["YamlFileAdapter"]
