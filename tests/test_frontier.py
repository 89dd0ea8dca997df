"""Tests for the three frontier disciplines."""

import pytest

from algorithms.frontier import CostFrontier, FifoFrontier, LifoFrontier
from algorithms.state import Discovery


def test_fifo_pops_in_discovery_order():
    f = FifoFrontier()
    for nid in "ABC":
        f.push(nid)
    assert [f.pop() for _ in range(3)] == ["A", "B", "C"]


def test_lifo_pops_most_recent_first():
    f = LifoFrontier()
    for nid in "ABC":
        f.push(nid)
    assert [f.pop() for _ in range(3)] == ["C", "B", "A"]


def test_snapshot_is_insertion_order_for_every_discipline():
    for cls in (FifoFrontier, LifoFrontier, CostFrontier):
        f = cls()
        f.push("B", 5)
        f.push("A", 1)
        f.push("C", 3)
        assert f.snapshot() == ("B", "A", "C")


def test_duplicate_push_and_empty_pop_raise():
    f = FifoFrontier()
    f.push("A")
    with pytest.raises(ValueError):
        f.push("A")
    f.pop()
    with pytest.raises(IndexError):
        f.pop()


def test_cost_frontier_pops_cheapest():
    f = CostFrontier()
    f.push("A", 4)
    f.push("B", 1)
    f.push("C", 2)
    assert [f.pop() for _ in range(3)] == ["B", "C", "A"]


def test_cost_frontier_tie_goes_to_earliest_inserted():
    f = CostFrontier()
    f.push("B", 5)
    f.push("C", 5)
    f.push("A", 5)
    assert f.pop() == "B"
    assert f.pop() == "C"


def test_decrease_reorders_but_keeps_insertion_seq():
    f = CostFrontier()
    f.push("D", 10)
    f.push("C", 5)
    f.push("E", 9)
    f.decrease("D", 9)
    # D and E now tie on 9; D was inserted first
    assert f.ranked() == [("C", 5), ("D", 9), ("E", 9)]
    assert [f.pop() for _ in range(3)] == ["C", "D", "E"]
    assert len(f) == 0


def test_decrease_ignores_costlier_and_rejects_non_members():
    f = CostFrontier()
    f.push("A", 3)
    f.decrease("A", 7)
    assert f.priority("A") == 3
    with pytest.raises(KeyError):
        f.decrease("Z", 1)


def test_order_only_frontiers_ignore_decrease():
    f = FifoFrontier()
    f.push("A")
    f.push("B")
    f.decrease("B", 0)
    assert f.pop() == "A"


def test_from_snapshot_uses_record_costs():
    records = {"A": Discovery(7, "S"), "B": Discovery(2, "S")}
    f = CostFrontier.from_snapshot(("A", "B"), records)
    assert f.snapshot() == ("A", "B")
    assert f.pop() == "B"
    assert "A" in f
