# tests/rules/test_models.py
"""
Rule model tests - section derivation, filters and positional matching
"""

import pytest

from yaml_policy_adapter.core.rules import (
    Filter,
    RuleStore,
    Section,
    admits,
    fields_in_range,
    matches_fields,
    section_of,
)


class TestSectionOf:
    """First character of the family key selects the section"""

    @pytest.mark.parametrize("family_key", ["p", "p2", "pX", "P"])
    def test_permission_families(self, family_key):
        assert section_of(family_key) is Section.P

    @pytest.mark.parametrize("family_key", ["g", "g2", "G", "x", "role"])
    def test_everything_else_is_grouping(self, family_key):
        assert section_of(family_key) is Section.G

    def test_empty_key_is_rejected(self):
        with pytest.raises(ValueError):
            section_of("")


class TestFilter:

    def test_all_admits_everything(self):
        f = Filter.all()

        assert f.is_empty()
        assert f.template_for(Section.P) == []
        assert f.template_for(Section.G) == []

    def test_template_per_section(self):
        f = Filter(p=["", "domain1"], g=["", "", "domain1"])

        assert f.template_for(Section.P) == ["", "domain1"]
        assert f.template_for(Section.G) == ["", "", "domain1"]
        assert not f.is_empty()

    def test_blank_templates_count_as_empty(self):
        assert Filter(p=["", ""], g=[""]).is_empty()


class TestAdmits:
    """Filtered-load template matching"""

    def test_empty_template_admits(self):
        assert admits([], ["alice", "data1", "read"])

    def test_blank_positions_are_skipped(self):
        assert admits(["", "data1", ""], ["alice", "data1", "read"])
        assert not admits(["", "data1", ""], ["bob", "data2", "write"])

    def test_no_normalization(self):
        assert not admits(["Alice"], ["alice", "data1", "read"])
        assert not admits(["alice "], ["alice", "data1", "read"])

    def test_constraint_past_rule_end_rejects(self):
        assert not admits(["", "", "domain1"], ["alice", "admin"])

    def test_blank_positions_past_rule_end_are_ignored(self):
        assert admits(["alice", "", "", ""], ["alice", "admin"])


class TestFieldRange:
    """Filtered-removal matching"""

    def test_in_range(self):
        rule = ["alice", "data2_admin", "domain1", "domain2"]

        assert fields_in_range(rule, 0, ["alice", "data2_admin"])
        assert fields_in_range(rule, 1, ["data2_admin", "domain1", "domain2"])
        assert not fields_in_range(rule, 2, ["domain1", "domain2", "x"])
        assert not fields_in_range(["alice", "data2_admin"], 0, ["alice", "data2_admin", "not_exists"])

    def test_matches_fields(self):
        rule = ["alice", "data2_admin", "domain1", "domain2"]

        assert matches_fields(rule, 1, ["data2_admin", "domain1", "domain2"])
        assert matches_fields(rule, 0, ["alice", "", "domain1"])
        assert not matches_fields(rule, 0, ["alice", "domain1"])


class TestRuleStore:

    def test_family_creates_missing(self):
        store = RuleStore()

        store.family("p").append(["alice", "data1", "read"])

        assert store.get("p") == [["alice", "data1", "read"]]
        assert "p" in store
        assert store.rule_count() == 1

    def test_to_dict_copies(self):
        store = RuleStore.from_dict({"p": [("alice", "data1", "read")]})

        data = store.to_dict()
        data["p"][0].append("extra")

        assert store.get("p") == [["alice", "data1", "read"]]
