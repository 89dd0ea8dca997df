"""Tests for the built-in scenario catalog."""

import pytest

from graph import DEFAULT_SCENARIO, SCENARIOS, ScenarioType, get_scenario, list_scenarios


def test_catalog_has_every_scenario_type():
    assert [s.key for s in list_scenarios()] == [t.value for t in ScenarioType]
    assert DEFAULT_SCENARIO == "standard"


@pytest.mark.parametrize("key", list(SCENARIOS))
def test_every_catalog_scenario_is_valid(key):
    sc = get_scenario(key)
    assert sc.problems() == []
    assert (sc.start, sc.goal) == ("S", "G")
    assert not sc.graph.has_negative_edges()


def test_lookup_by_enum_and_unknown_key():
    assert get_scenario(ScenarioType.DEEP_NARROW).key == "deep_narrow"
    assert get_scenario("nope") is None


def test_uniform_scenario_has_unit_weights():
    assert get_scenario("uniform_cost").graph.is_uniform_cost()
    assert not get_scenario("variable_cost").graph.is_uniform_cost()


def test_standard_scenario_shape(standard):
    g = standard.graph
    assert g.node_ids() == ["S", "A", "B", "C", "D", "G"]
    assert g.edge_count() == 7
    assert g.get_node("S").label == "Start"
