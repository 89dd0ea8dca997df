"""
frontier.py — Frontier Disciplines
===================================
One interface, three backing structures:

    FifoFrontier  – deque, pop from the front      (BFS)
    LifoFrontier  – deque, pop from the back       (DFS)
    CostFrontier  – binary heap on (cost, seq)     (UCS / Dijkstra)

Every frontier remembers the insertion sequence of its members, so
`snapshot()` always returns ids in the order they were first discovered,
whatever the removal discipline.

CostFrontier tie-break: heap entries are keyed (cost, insertion seq), so
among equal costs the earliest-inserted node comes out first.  That is
exactly the node a left-to-right first-minimum scan of the frontier would
pick.  A cheaper cost found later (`decrease`) pushes a fresh entry with
the SAME seq; the old entry goes stale and is skipped when popped.
"""

import heapq
from collections import deque
from typing import Deque, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from algorithms.state import Discovery


class Frontier:
    """
    Base class.  Subclasses implement `_push` / `_pop`; membership and
    insertion order are tracked here.

    Attributes:
        _members : {node_id: insertion seq}, dict order = insertion order.
        _seq     : Next insertion sequence number.
    """

    kind: str = "frontier"

    def __init__(self):
        self._members: Dict[str, int] = {}
        self._seq: int = 0

    @classmethod
    def from_snapshot(
        cls,
        entries: Iterable[str],
        records: Optional[Mapping[str, Discovery]] = None,
    ) -> "Frontier":
        """Rebuild a frontier from SearchState.frontier (+ cost records)."""
        frontier = cls()
        records = records or {}
        for node_id in entries:
            rec = records.get(node_id)
            frontier.push(node_id, rec.cost if rec else 0)
        return frontier

    # ------------------------------------------------------------------
    # Interface
    # ------------------------------------------------------------------
    def push(self, node_id: str, cost: float = 0) -> None:
        if node_id in self._members:
            raise ValueError(f"'{node_id}' is already in the frontier")
        self._members[node_id] = self._seq
        self._push(node_id, cost, self._seq)
        self._seq += 1

    def pop(self) -> str:
        if not self._members:
            raise IndexError(f"pop from an empty {self.kind}")
        node_id = self._pop()
        del self._members[node_id]
        return node_id

    def decrease(self, node_id: str, cost: float) -> None:
        """A cheaper cost to node_id was found.  Order-only frontiers ignore it."""

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(self._members)

    def __contains__(self, node_id) -> bool:
        return node_id in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._members)})"

    # ------------------------------------------------------------------
    # Backing structure hooks
    # ------------------------------------------------------------------
    def _push(self, node_id: str, cost: float, seq: int) -> None:
        raise NotImplementedError

    def _pop(self) -> str:
        raise NotImplementedError


class FifoFrontier(Frontier):
    """Queue: the earliest-discovered node is expanded first."""

    kind = "queue"

    def __init__(self):
        super().__init__()
        self._queue: Deque[str] = deque()

    def _push(self, node_id, cost, seq):
        self._queue.append(node_id)

    def _pop(self):
        return self._queue.popleft()


class LifoFrontier(Frontier):
    """Stack: the most recently discovered node is expanded first."""

    kind = "stack"

    def __init__(self):
        super().__init__()
        self._stack: Deque[str] = deque()

    def _push(self, node_id, cost, seq):
        self._stack.append(node_id)

    def _pop(self):
        return self._stack.pop()


class CostFrontier(Frontier):
    """Priority queue on cumulative path cost g(n)."""

    kind = "priority queue"

    def __init__(self):
        super().__init__()
        self._heap: List[Tuple[float, int, str]] = []
        self._cost: Dict[str, float] = {}

    def _push(self, node_id, cost, seq):
        self._cost[node_id] = cost
        heapq.heappush(self._heap, (cost, seq, node_id))

    def _pop(self):
        while True:
            cost, seq, node_id = heapq.heappop(self._heap)
            # stale: node already popped, or a cheaper entry was pushed since
            if self._members.get(node_id) == seq and cost == self._cost[node_id]:
                del self._cost[node_id]
                return node_id

    def decrease(self, node_id: str, cost: float) -> None:
        if node_id not in self._members:
            raise KeyError(node_id)
        if cost < self._cost[node_id]:
            self._cost[node_id] = cost
            heapq.heappush(self._heap, (cost, self._members[node_id], node_id))

    def priority(self, node_id: str) -> float:
        return self._cost[node_id]

    def ranked(self) -> List[Tuple[str, float]]:
        """(node_id, cost) in the order they would be popped."""
        return sorted(
            ((nid, self._cost[nid]) for nid in self._members),
            key=lambda item: (item[1], self._members[item[0]]),
        )
