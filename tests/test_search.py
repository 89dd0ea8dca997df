"""Tests for the stepwise search engine."""

import pytest

from algorithms import Strategy, algorithms_by_tag, get_algorithm
from algorithms.state import Discovery, SearchState, SearchStatus
from engine import SearchEngine, create, reconstruct_path
from errors import BrokenChain, InvalidScenario, StepLimitExceeded
from graph import SCENARIOS, get_scenario

ALL = [s.value for s in Strategy]
COST = ["ucs", "dijkstra"]


def run(scenario, strategy):
    engine = create(scenario, strategy)
    states = [engine.state]
    while not engine.is_terminal:
        states.append(engine.step())
    return engine, states


# ---------------------------------------------------------------------------
# Initial state
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("strategy", ALL)
def test_initial_state(standard, strategy):
    state = create(standard, strategy).state
    assert state.frontier == ("S",)
    assert state.explored == ()
    assert state.records == {"S": Discovery(0, None)}
    assert state.current is None
    assert state.step_count == 0
    assert state.status is SearchStatus.UNSTARTED
    assert state.max_frontier_size == 1
    assert state.explanation


def test_unknown_strategy_rejected(standard):
    with pytest.raises(ValueError):
        SearchEngine(standard, "astar")


# ---------------------------------------------------------------------------
# Known answers on the catalog
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("strategy", ALL)
def test_standard_scenario_path_and_cost(standard, strategy):
    engine, _ = run(standard, strategy)
    state = engine.state
    assert state.status is SearchStatus.SOLVED
    assert state.total_cost == 11
    if strategy != "dfs":
        assert state.path == ("S", "A", "C", "G")
    else:
        assert state.path == ("S", "B", "D", "G")


def test_ucs_relaxes_d_through_b(standard):
    engine = create(standard, "ucs")
    engine.step()                       # S
    engine.step()                       # A: discovers C(5), D(10)
    state = engine.step()               # B: ties with C on 5, wins by insertion
    assert state.current == "B"
    assert state.relaxed == ("D",)
    assert state.records["D"] == Discovery(9, "B")
    assert state.pseudocode_line == get_algorithm("ucs").line_for("relax")


def test_bfs_standard_visit_order_and_peak_frontier(standard):
    engine, states = run(standard, "bfs")
    assert [s.current for s in states[1:]] == ["S", "A", "B", "C", "D", "G"]
    assert engine.state.explored == ("S", "A", "B", "C", "D")
    assert engine.max_frontier_size == 3


def test_deep_narrow_dfs_follows_last_pushed_branch():
    engine, _ = run(get_scenario("deep_narrow"), "dfs")
    assert engine.state.path == ("S", "B", "B1", "B2", "B3", "G")
    assert engine.state.explored == ("S", "B", "B1", "B2", "B3")
    assert "A" not in engine.state.explored


def test_wide_shallow_cost_strategies_take_the_cheap_branch():
    sc = get_scenario("wide_shallow")
    for strategy in COST:
        engine, _ = run(sc, strategy)
        assert engine.state.path == ("S", "E", "G")
        assert engine.state.total_cost == 2
    bfs, _ = run(sc, "bfs")
    assert bfs.state.path == ("S", "A", "G")
    assert bfs.state.total_cost == 11


def test_variable_cost_bfs_shorter_ucs_cheaper():
    sc = get_scenario("variable_cost")
    bfs, _ = run(sc, "bfs")
    ucs, _ = run(sc, "ucs")
    assert bfs.state.path == ("S", "A", "G")
    assert bfs.state.total_cost == 20
    assert ucs.state.path == ("S", "B", "C", "D", "G")
    assert ucs.state.total_cost == 4


def test_goal_leaves_frontier_but_is_not_explored(standard):
    engine, _ = run(standard, "dfs")
    state = engine.state
    assert state.current == "G"
    assert "G" not in state.frontier
    assert "G" not in state.explored
    assert state.frontier == ("A",)
    assert engine.is_terminal


# ---------------------------------------------------------------------------
# Properties over every (scenario, strategy)
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("key", list(SCENARIOS))
@pytest.mark.parametrize("strategy", COST)
def test_cost_strategies_match_exhaustive_optimum(key, strategy):
    sc = get_scenario(key)
    engine, _ = run(sc, strategy)
    assert engine.state.total_cost == sc.graph.min_path_cost("S", "G")
    assert sc.graph.path_cost(engine.state.path) == engine.state.total_cost


@pytest.mark.parametrize("key", list(SCENARIOS))
def test_bfs_finds_fewest_edges(key):
    sc = get_scenario(key)
    engine, _ = run(sc, "bfs")
    fewest = min(len(p) for p in sc.graph.simple_paths("S", "G"))
    assert len(engine.state.path) == fewest


def test_bfs_equals_ucs_on_uniform_weights():
    sc = get_scenario("uniform_cost")
    bfs, _ = run(sc, "bfs")
    ucs, _ = run(sc, "ucs")
    assert bfs.state.path == ucs.state.path == ("S", "A", "C", "G")
    assert bfs.state.total_cost == ucs.state.total_cost == 3


@pytest.mark.parametrize("key", list(SCENARIOS))
@pytest.mark.parametrize("strategy", ALL)
def test_frontier_invariants_hold_every_step(key, strategy):
    _, states = run(get_scenario(key), strategy)
    for state in states:
        assert len(set(state.frontier)) == len(state.frontier)
        assert not set(state.frontier) & set(state.explored)
        assert len(set(state.explored)) == len(state.explored)
        assert state.max_frontier_size >= len(state.frontier)
        for nid in state.frontier + state.explored:
            assert nid in state.records


@pytest.mark.parametrize("key", list(SCENARIOS))
@pytest.mark.parametrize("strategy", ALL)
def test_step_count_advances_by_one(key, strategy):
    _, states = run(get_scenario(key), strategy)
    assert [s.step_count for s in states] == list(range(len(states)))


def test_dfs_terminates_on_cycle_without_reexpanding(make_scenario):
    sc = make_scenario([("S", "A", 1), ("A", "B", 1), ("B", "S", 1), ("B", "A", 1)], nodes=["S", "A", "B", "G"])
    engine, _ = run(sc, "dfs")
    assert engine.state.status is SearchStatus.EXHAUSTED
    assert engine.state.explored == ("S", "A", "B")
    assert engine.state.path == ()


@pytest.mark.parametrize("strategy", ALL)
def test_unreachable_goal_exhausts(make_scenario, strategy):
    sc = make_scenario([("S", "A", 1)], nodes=["S", "A", "G"])
    engine, states = run(sc, strategy)
    assert engine.status is SearchStatus.EXHAUSTED
    assert len(states) == 3
    assert engine.state.explored == ("S", "A")
    assert "NOT reachable" in engine.state.explanation
    assert engine.state.pseudocode_line == get_algorithm(strategy).line_for("exhausted")


@pytest.mark.parametrize("strategy", ALL)
def test_step_after_termination_is_a_no_op(standard, strategy):
    engine, _ = run(standard, strategy)
    final = engine.state
    assert engine.step() is final
    assert engine.step() is final


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("strategy", ALL)
def test_resume_from_serialised_snapshot(standard, strategy):
    straight, _ = run(standard, strategy)

    engine = create(standard, strategy)
    engine.step()
    engine.step()
    resumed = SearchEngine(standard, strategy, state=SearchState.from_dict(engine.state.to_dict()))
    final = resumed.run()
    assert final.path == straight.state.path
    assert final.explored == straight.state.explored
    assert final.step_count == straight.state.step_count


def test_resume_rejects_snapshot_for_other_endpoints(standard):
    foreign = SearchState.initial("A", "G")
    with pytest.raises(ValueError):
        SearchEngine(standard, "bfs", state=foreign)


def test_run_with_cap_raises(standard):
    engine = create(standard, "bfs")
    with pytest.raises(StepLimitExceeded) as info:
        engine.run(max_steps=2)
    assert info.value.limit == 2
    assert info.value.state.step_count == 2


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
def test_invalid_scenario_rejected_at_construction(make_scenario):
    sc = make_scenario([("S", "A", 1)])
    with pytest.raises(InvalidScenario):
        create(sc, "bfs")


@pytest.mark.parametrize("strategy", COST)
def test_negative_weight_rejected_for_cost_strategies(make_scenario, strategy):
    sc = make_scenario([("S", "A", -1), ("A", "G", 1)])
    with pytest.raises(InvalidScenario) as info:
        create(sc, strategy)
    assert "negative" in str(info.value)


def test_negative_weight_allowed_for_bfs(make_scenario):
    sc = make_scenario([("S", "A", -1), ("A", "G", 1)])
    engine, _ = run(sc, "bfs")
    assert engine.state.total_cost == 0


def test_reconstruct_path_walks_parents():
    records = {"S": Discovery(0, None), "A": Discovery(1, "S"), "G": Discovery(2, "A")}
    assert reconstruct_path(records, "S", "G") == ["S", "A", "G"]


def test_reconstruct_path_missing_parent():
    records = {"S": Discovery(0, None), "G": Discovery(3, "X")}
    with pytest.raises(BrokenChain) as info:
        reconstruct_path(records, "S", "G")
    assert info.value.node_id == "X"


def test_reconstruct_path_cycle():
    records = {"S": Discovery(0, None), "A": Discovery(1, "G"), "G": Discovery(2, "A")}
    with pytest.raises(BrokenChain):
        reconstruct_path(records, "S", "G")


def test_reconstruct_path_orphan_without_parent():
    records = {"S": Discovery(0, None), "G": Discovery(2, None)}
    with pytest.raises(BrokenChain):
        reconstruct_path(records, "S", "G")


def test_algorithms_by_tag():
    assert [a.key for a in algorithms_by_tag("weighted")] == [Strategy.UCS, Strategy.DIJKSTRA]
    assert [a.key for a in algorithms_by_tag("unweighted")] == [Strategy.BFS, Strategy.DFS]
    assert algorithms_by_tag("heuristic") == []
