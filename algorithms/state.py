"""
state.py — Search State Snapshot
=================================
Every call to SearchEngine.step() returns a SearchState: a frozen-in-time
picture of everything the visualizer needs to render one frame.

    • current      – the node expanded by the last step
    • frontier     – discovered but not yet expanded, in insertion order
    • explored     – expanded nodes, in expansion order
    • records      – node → Discovery(cost, parent) bookkeeping
    • path / total_cost once the goal has been expanded
    • step_count and the peak frontier size
    • the pseudocode line and plain-English explanation of the last step

Design decisions:
  - SearchState is a frozen dataclass.  A transition builds a new one; it
    never edits the previous snapshot, so the Stepper can keep a history
    for rewind and the renderer can hold on to any frame it likes.
  - `records` maps node id → Discovery.  A node that has not been
    discovered yet simply has no entry.
  - Status is derived, never stored, so it cannot drift from the fields.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, NamedTuple, Optional, Tuple


class SearchStatus(Enum):
    UNSTARTED = "unstarted"
    RUNNING   = "running"
    SOLVED    = "solved"
    EXHAUSTED = "exhausted"


class Discovery(NamedTuple):
    """Best known way to reach a node: cumulative cost and predecessor."""

    cost:   float
    parent: Optional[str]


@dataclass(frozen=True)
class SearchState:
    """
    Attributes:
        start, goal        : Designated node ids.
        current            : Most recently expanded node id (None before the first step).
        frontier           : Node ids awaiting expansion, in insertion order.
        explored           : Node ids already expanded, in expansion order.
        records            : {node_id: Discovery(cost, parent)}; start is (0, None).
        path               : start → goal ids, empty until the goal is expanded.
        total_cost         : Cost of `path`; 0 until solved.
        step_count         : Expansions performed so far.
        max_frontier_size  : Peak len(frontier) seen so far.
        discovered         : Ids first discovered by the last step.
        relaxed            : Ids whose cost improved during the last step.
        pseudocode_line    : Pseudocode line matching the last step.
        explanation        : Human-readable "why" text for Learning Mode.
    """

    start:             str
    goal:              str
    current:           Optional[str]            = None
    frontier:          Tuple[str, ...]          = ()
    explored:          Tuple[str, ...]          = ()
    records:           Mapping[str, Discovery]  = field(default_factory=dict)
    path:              Tuple[str, ...]          = ()
    total_cost:        float                    = 0
    step_count:        int                      = 0
    max_frontier_size: int                      = 0
    discovered:        Tuple[str, ...]          = ()
    relaxed:           Tuple[str, ...]          = ()
    pseudocode_line:   int                      = 0
    explanation:       str                      = ""

    @classmethod
    def initial(cls, start: str, goal: str, explanation: str = "", pseudocode_line: int = 0) -> "SearchState":
        """frontier = [start], explored = [], cost_of[start] = 0."""
        return cls(
            start=start,
            goal=goal,
            frontier=(start,),
            records={start: Discovery(0, None)},
            max_frontier_size=1,
            pseudocode_line=pseudocode_line,
            explanation=explanation,
        )

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    @property
    def cost_of(self) -> Dict[str, float]:
        return {nid: rec.cost for nid, rec in self.records.items()}

    @property
    def parent_of(self) -> Dict[str, Optional[str]]:
        return {nid: rec.parent for nid, rec in self.records.items()}

    @property
    def solved(self) -> bool:
        return self.current == self.goal

    @property
    def is_terminal(self) -> bool:
        return self.solved or not self.frontier

    @property
    def status(self) -> SearchStatus:
        if self.solved:
            return SearchStatus.SOLVED
        if not self.frontier:
            return SearchStatus.EXHAUSTED
        if self.step_count == 0:
            return SearchStatus.UNSTARTED
        return SearchStatus.RUNNING

    # ------------------------------------------------------------------
    # Serialisation  (the web adapter keeps snapshots in the session)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "start":             self.start,
            "goal":              self.goal,
            "current":           self.current,
            "frontier":          list(self.frontier),
            "explored":          list(self.explored),
            "records":           {nid: [rec.cost, rec.parent] for nid, rec in self.records.items()},
            "path":              list(self.path),
            "total_cost":        self.total_cost,
            "step_count":        self.step_count,
            "max_frontier_size": self.max_frontier_size,
            "discovered":        list(self.discovered),
            "relaxed":           list(self.relaxed),
            "pseudocode_line":   self.pseudocode_line,
            "explanation":       self.explanation,
            "status":            self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SearchState":
        return cls(
            start=data["start"],
            goal=data["goal"],
            current=data.get("current"),
            frontier=tuple(data.get("frontier", ())),
            explored=tuple(data.get("explored", ())),
            records={nid: Discovery(cost, parent) for nid, (cost, parent) in data.get("records", {}).items()},
            path=tuple(data.get("path", ())),
            total_cost=data.get("total_cost", 0),
            step_count=data.get("step_count", 0),
            max_frontier_size=data.get("max_frontier_size", 0),
            discovered=tuple(data.get("discovered", ())),
            relaxed=tuple(data.get("relaxed", ())),
            pseudocode_line=data.get("pseudocode_line", 0),
            explanation=data.get("explanation", ""),
        )
