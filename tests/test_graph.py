"""Tests for the graph model: nodes, edges, adjacency, validation."""

import pytest

from errors import InvalidScenario
from graph import Edge, Graph, Node, Scenario


def test_node_label_defaults_to_id():
    assert Node("A").label == "A"
    assert Node("S", label="Start").label == "Start"


def test_edge_from_dict_accepts_from_to_aliases():
    edge = Edge.from_dict({"from": "A", "to": "B", "weight": 3})
    assert (edge.source, edge.target, edge.weight) == ("A", "B", 3)
    assert edge.connects("A", "B")
    assert not edge.connects("B", "A")


def test_edges_from_keeps_insertion_order():
    g = Graph()
    for nid in "SABC":
        g.create_node(nid)
    g.create_edge("S", "C", 1)
    g.create_edge("S", "A", 1)
    g.create_edge("S", "B", 1)
    assert [e.target for e in g.edges_from("S")] == ["C", "A", "B"]
    assert g.edges_from("A") == []


def test_duplicate_node_id_rejected():
    g = Graph()
    g.create_node("A")
    with pytest.raises(InvalidScenario):
        g.create_node("A")


def test_duplicate_node_in_dict_rejected():
    with pytest.raises(InvalidScenario):
        Graph.from_dict({"nodes": [{"id": "A"}, {"id": "A"}], "edges": []})


def test_dangling_edges_and_negative_weights():
    g = Graph()
    g.create_node("S")
    g.create_edge("S", "X", -1)
    assert [e.target for e in g.dangling_edges()] == ["X"]
    assert g.has_negative_edges()


def test_is_uniform_cost(make_scenario):
    assert make_scenario([("S", "A", 1), ("A", "G", 1)]).graph.is_uniform_cost()
    assert not make_scenario([("S", "A", 1), ("A", "G", 2)]).graph.is_uniform_cost()


def test_path_cost_and_exhaustive_minimum(standard):
    g = standard.graph
    assert g.path_cost(["S", "A", "C", "G"]) == 11
    assert g.path_cost(["S", "B", "D", "G"]) == 11
    assert g.min_path_cost("S", "G") == 11
    with pytest.raises(ValueError):
        g.path_cost(["S", "G"])


def test_simple_paths_enumerates_every_route(standard):
    paths = sorted("".join(p) for p in standard.graph.simple_paths("S", "G"))
    assert paths == ["SACG", "SADG", "SBDG"]


def test_min_path_cost_unreachable(make_scenario):
    sc = make_scenario([("S", "A", 1)], nodes=["S", "A", "G"])
    assert sc.graph.min_path_cost("S", "G") is None


def test_scenario_problems(make_scenario):
    assert make_scenario([("S", "G", 1)]).problems() == []

    missing_goal = make_scenario([("S", "A", 1)])
    assert any("goal" in p for p in missing_goal.problems())

    same = make_scenario([("S", "A", 1)], start="S", goal="S")
    assert any("same node" in p for p in same.problems())

    dangling = make_scenario([("S", "G", 1), ("G", "Z", 1)], nodes=["S", "G"])
    assert any("Z" in p for p in dangling.problems())


def test_scenario_validate_reports_every_problem(make_scenario):
    sc = make_scenario([("S", "Z", 1)], nodes=["S"], goal="G")
    with pytest.raises(InvalidScenario) as info:
        sc.validate()
    assert len(info.value.problems) == 2


def test_scenario_dict_round_trip(standard):
    again = Scenario.from_dict(standard.to_dict())
    assert again.key == standard.key
    assert again.graph.node_ids() == standard.graph.node_ids()
    assert [e.to_dict() for e in again.graph.edges] == [e.to_dict() for e in standard.graph.edges]


def test_neighbours_and_edge_lookup():
    g = Graph()
    for nid in "SAB":
        g.create_node(nid)
    first = g.create_edge("S", "B", 4)
    g.create_edge("S", "A", 1)
    g.create_edge("S", "B", 9)

    assert [nid for nid, _ in g.neighbours("S")] == ["B", "A", "B"]
    assert g.neighbours("S")[1][1].weight == 1
    assert g.neighbours("A") == []

    assert g.get_edge_between("S", "B") is first
    assert g.get_edge_between("B", "S") is None
    assert g.get_edge_between("A", "B") is None
