"""Tests for association matching against query triples."""

import pytest

from biolink_explorer.reasoning.associations import Association, find_valid_associations, query
from biolink_explorer.utils import CyclicHierarchyError, UnknownEntityError

from tests.conftest import make_model


def _names(results):
    return [(a.name, a.depth) for a in results]


# ---------------------------------------------------------------------------
# Gene / chemical scenario
# ---------------------------------------------------------------------------

class TestScenario:
    def test_matching_triple(self, scenario_model):
        results = query(scenario_model, "gene", "affects", "chemical_entity")
        assert _names(results) == [("gene_to_chemical_association", 1)]
        match = results[0]
        assert isinstance(match, Association)
        assert match.subject.name == "gene"
        assert match.object.name == "chemical_entity"
        assert match.predicate.name == "affects"
        assert match.qualifiers == []

    def test_swapped_ranges_do_not_match(self, scenario_model):
        assert query(scenario_model, "chemical_entity", "affects", "gene") == []

    def test_broader_relation_does_not_match(self, scenario_model):
        assert query(scenario_model, "gene", "related_to", "chemical_entity") == []

    def test_abstract_association_root_skipped(self, scenario_data):
        scenario_data["classes"]["association"]["slot_usage"] = {"subject": {"range": "named_thing"}}
        model = make_model(scenario_data)
        assert _names(query(model, "gene", "affects", "chemical_entity")) == [
            ("gene_to_chemical_association", 1),
        ]

    def test_concrete_association_root_matches_at_depth_zero(self, scenario_data):
        scenario_data["classes"]["association"] = {"slot_usage": {"subject": {"range": "named_thing"}}}
        model = make_model(scenario_data)
        assert _names(query(model, "gene", "affects", "chemical_entity")) == [
            ("gene_to_chemical_association", 1),
            ("association", 0),
        ]

    def test_class_without_overrides_skipped(self, scenario_data):
        scenario_data["classes"]["bare_association"] = {"is_a": "association"}
        model = make_model(scenario_data)
        names = [a.name for a in query(model, "gene", "affects", "chemical_entity")]
        assert "bare_association" not in names

    def test_abstract_subclass_skipped(self, scenario_data):
        scenario_data["classes"]["gene_to_chemical_association"]["abstract"] = True
        model = make_model(scenario_data)
        assert query(model, "gene", "affects", "chemical_entity") == []

    def test_mixin_child_of_association_not_a_candidate(self, scenario_data):
        scenario_data["classes"]["mixed_in_association"] = {
            "is_a": "named_thing",
            "mixins": ["association"],
            "slot_usage": {"subject": {"range": "gene"}},
        }
        model = make_model(scenario_data)
        names = [a.name for a in query(model, "gene", "related_to", "gene")]
        assert "mixed_in_association" not in names


# ---------------------------------------------------------------------------
# Ordering and inheritance through the Biolink excerpt
# ---------------------------------------------------------------------------

class TestMiniBiolink:
    def test_deepest_first(self, mini_model):
        results = query(mini_model, "small molecule", "affects", "gene")
        assert _names(results) == [
            ("small molecule affects gene association", 2),
            ("chemical affects gene association", 1),
        ]
        assert results[0].subject.name == "small molecule"
        assert results[0].object.name == "gene or gene product"

    def test_narrower_relation_matches(self, mini_model):
        results = query(mini_model, "chemical entity", "affects activity of", "gene")
        assert _names(results) == [("chemical affects gene association", 1)]

    def test_subject_range_inherited_from_mixin(self, mini_model):
        results = query(mini_model, "gene", "interacts with", "disease")
        assert _names(results) == [("gene to thing association", 1)]
        assert results[0].subject.name == "gene"
        assert results[0].predicate.name == "related to"
        assert results[0].object.name == "named thing"

    def test_ties_keep_discovery_order(self, mini_model):
        model = make_model(
            {
                "slots": {"related to": {}, "qualifier": {}},
                "classes": {
                    "named thing": {},
                    "association": {"abstract": True},
                    "first": {"is_a": "association", "slot_usage": {"subject": {"range": "named thing"}}},
                    "second": {"is_a": "association", "slot_usage": {"object": {"range": "named thing"}}},
                },
            },
            mini_model.anchor_names,
        )
        assert _names(query(model, "named thing", "related to", "named thing")) == [
            ("first", 1),
            ("second", 1),
        ]

    def test_idempotent(self, mini_model):
        first = query(mini_model, "small molecule", "affects", "gene")
        second = query(mini_model, "small molecule", "affects", "gene")
        assert [a.to_dict() for a in first] == [a.to_dict() for a in second]

    def test_to_dict(self, mini_model):
        result = query(mini_model, "gene", "related to", "gene")[0]
        assert result.to_dict() == {
            "association": "gene to thing association",
            "depth": 1,
            "subject": "gene",
            "predicate": "related to",
            "object": "named thing",
            "qualifiers": [],
        }

    def test_entities_passed_directly(self, mini_model):
        results = find_valid_associations(
            mini_model,
            mini_model.get_class("small molecule"),
            mini_model.get_relation("affects"),
            mini_model.get_class("gene"),
        )
        assert len(results) == 2


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestErrors:
    def test_unknown_subject(self, scenario_model):
        with pytest.raises(UnknownEntityError):
            query(scenario_model, "protein", "affects", "gene")

    def test_unknown_relation(self, scenario_model):
        with pytest.raises(UnknownEntityError) as exc_info:
            query(scenario_model, "gene", "treats", "gene")
        assert exc_info.value.kind == "relation"

    def test_relation_name_is_not_a_class(self, scenario_model):
        with pytest.raises(UnknownEntityError):
            query(scenario_model, "gene", "affects", "affects")

    def test_cycle_above_association_root(self, scenario_data):
        scenario_data["classes"]["loop_a"] = {"is_a": "loop_b"}
        scenario_data["classes"]["loop_b"] = {"is_a": "loop_a"}
        scenario_data["classes"]["association"]["mixins"] = ["loop_a"]
        del scenario_data["classes"]["gene_to_chemical_association"]["slot_usage"]["object"]
        model = make_model(scenario_data)
        with pytest.raises(CyclicHierarchyError):
            query(model, "gene", "affects", "chemical_entity")
