"""
algorithms/__init__.py — Strategy Registry
============================================
Single source of truth for every search strategy the visualizer knows.

    from algorithms import Strategy, REGISTRY, get_algorithm

REGISTRY maps Strategy → AlgoInfo.  AlgoInfo carries what the engine
needs (frontier class, relaxation flag, pseudocode, narration) next to
the static description card the UI shows.  Adding a strategy is: write
the module, add one entry here.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Type, Union

from algorithms import bfs, dfs, dijkstra, ucs
from algorithms.frontier import CostFrontier, FifoFrontier, Frontier, LifoFrontier


class Strategy(str, Enum):
    BFS      = "bfs"
    DFS      = "dfs"
    UCS      = "ucs"
    DIJKSTRA = "dijkstra"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each strategy
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              Strategy
    label:            str                 # e.g. "Breadth-First Search (BFS)"
    short:            str                 # e.g. "BFS"
    frontier:         Type[Frontier]      # backing structure for the frontier
    relaxes:          bool                # may a frontier node's cost be lowered?
    pseudocode:       List[str]
    event_lines:      Dict[str, int]      # engine event → pseudocode line
    narrate:          Callable            # (event, node, state) → explanation
    tags:             List[str] = field(default_factory=list)
    description:      str       = ""
    mechanics:        str       = ""
    completeness:     str       = ""
    complexity_time:  str       = ""
    complexity_space: str       = ""
    optimality:       str       = ""
    use_cases:        List[str] = field(default_factory=list)
    strengths:        List[str] = field(default_factory=list)
    limitations:      List[str] = field(default_factory=list)

    @property
    def weighted(self) -> bool:
        return self.relaxes

    def line_for(self, event: str) -> int:
        return self.event_lines.get(event, self.event_lines.get("expand", 0))

    def card(self) -> dict:
        """JSON-safe description card (no callables)."""
        return {
            "key":              self.key.value,
            "label":            self.label,
            "short":            self.short,
            "frontier":         self.frontier.kind,
            "tags":             list(self.tags),
            "description":      self.description,
            "mechanics":        self.mechanics,
            "completeness":     self.completeness,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "optimality":       self.optimality,
            "use_cases":        list(self.use_cases),
            "strengths":        list(self.strengths),
            "limitations":      list(self.limitations),
            "pseudocode":       list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[Strategy, AlgoInfo] = {

    Strategy.BFS: AlgoInfo(
        key=Strategy.BFS, label="Breadth-First Search (BFS)", short="BFS",
        frontier=FifoFrontier, relaxes=False,
        pseudocode=bfs.PSEUDOCODE, event_lines=bfs.EVENT_LINES, narrate=bfs.narrate,
        tags=["unweighted", "shortest-path", "traversal"],
        description="Explores the neighbor nodes first, before moving to the next level neighbors.",
        mechanics=(
            "Uses a FIFO (First-In, First-Out) queue to track the frontier. It expands the shallowest "
            "nodes first, ensuring that it explores all nodes at level d before moving to level d+1."
        ),
        completeness="Complete (if branching factor b is finite).",
        complexity_time="O(b^d)",
        complexity_space="O(b^d) - all nodes in memory.",
        optimality="Optimal only if all step costs are equal (uniform cost).",
        use_cases=[
            "Finding the shortest path in unweighted graphs",
            'Social network "friend of a friend" search',
            "Web crawlers for level-by-level indexing",
            "GPS navigation systems (simple grids)",
        ],
        strengths=[
            "Guaranteed to find the shortest path (in terms of edges)",
            "Never gets stuck in infinite loops (if state tracking is used)",
        ],
        limitations=[
            "Extreme memory consumption for large branching factors",
            "Not optimal if paths have varying costs",
        ],
    ),

    Strategy.DFS: AlgoInfo(
        key=Strategy.DFS, label="Depth-First Search (DFS)", short="DFS",
        frontier=LifoFrontier, relaxes=False,
        pseudocode=dfs.PSEUDOCODE, event_lines=dfs.EVENT_LINES, narrate=dfs.narrate,
        tags=["unweighted", "traversal"],
        description="Explores as far as possible along each branch before backtracking.",
        mechanics=(
            "Uses a LIFO (Last-In, First-Out) stack to track the frontier. It proceeds to the deepest "
            "node in the current path until it reaches a goal or a leaf node, then backtracks."
        ),
        completeness="Not complete in infinite-depth spaces or graphs with cycles (without cycle detection).",
        complexity_time="O(b^m) where m is maximum depth.",
        complexity_space="O(bm) - linear memory relative to depth.",
        optimality="Not optimal - might find a much longer path than necessary.",
        use_cases=[
            "Solving puzzles like Mazes or Sudoku",
            "Topology sorting in build systems",
            "Finding connected components in a graph",
            "Pathfinding where memory is extremely limited",
        ],
        strengths=[
            "Very memory-efficient compared to BFS",
            "Fast for finding *any* solution if the solution is deep",
        ],
        limitations=[
            "Can get stuck in infinite paths",
            "Path found is rarely the shortest",
        ],
    ),

    Strategy.UCS: AlgoInfo(
        key=Strategy.UCS, label="Uniform-Cost Search (UCS)", short="UCS",
        frontier=CostFrontier, relaxes=True,
        pseudocode=ucs.PSEUDOCODE, event_lines=ucs.EVENT_LINES, narrate=ucs.narrate,
        tags=["weighted", "shortest-path"],
        description="Expands the lowest cumulative cost node first.",
        mechanics=(
            "A variant of BFS using a Priority Queue ordered by path cost g(n). It always expands the "
            "node with the lowest total cost from the start, effectively implementing Dijkstra's algorithm."
        ),
        completeness="Complete if step costs are ≥ ε > 0.",
        complexity_time="O(b^(C*/ε)) where C* is optimal cost.",
        complexity_space="O(b^(C*/ε))",
        optimality="Optimal for any non-negative step costs.",
        use_cases=[
            "Google Maps / GPS navigation with traffic (weighted edges)",
            "Network routing protocols (OSPF)",
            "Resource allocation in manufacturing",
            "Speech recognition (Viterbi decoding)",
        ],
        strengths=[
            "Always finds the lowest-cost path",
            "More efficient than BFS when edge weights vary",
        ],
        limitations=[
            "Slow if there are many low-cost paths that do not lead to the goal",
            "Memory intensive like BFS",
        ],
    ),

    Strategy.DIJKSTRA: AlgoInfo(
        key=Strategy.DIJKSTRA, label="Dijkstra's Algorithm", short="Dijkstra",
        frontier=CostFrontier, relaxes=True,
        pseudocode=dijkstra.PSEUDOCODE, event_lines=dijkstra.EVENT_LINES, narrate=dijkstra.narrate,
        tags=["weighted", "shortest-path"],
        description="Finds the shortest paths between nodes in a graph, which may represent road networks.",
        mechanics=(
            "Maintains a set of 'visited' nodes and a set of 'unvisited' nodes. It repeatedly selects the "
            "unvisited node with the smallest distance from the start, updates its neighbors' distances, "
            "and marks it as visited."
        ),
        completeness="Complete on graphs with non-negative edge weights.",
        complexity_time="O(V²), or O(E + V log V) with a Fibonacci Heap.",
        complexity_space="O(V) to store the distances to all vertices.",
        optimality="Always optimal for non-negative edge weights.",
        use_cases=[
            "Network Routing Protocols (OSPF)",
            "GPS and Digital Maps (Google Maps)",
            "IP Routing",
            "Finding the shortest path in social networking",
        ],
        strengths=[
            "Extremely efficient for single-source shortest path problems",
            "Mathematically robust and widely implemented",
        ],
        limitations=[
            "Cannot handle negative edge weights (unlike Bellman-Ford)",
            "Can be overkill for simple goal-oriented search (UCS is the search variant)",
        ],
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: Union[str, Strategy]) -> Optional[AlgoInfo]:
    """Return AlgoInfo by Strategy or its string value (case-insensitive), or None."""
    if isinstance(key, AlgoInfo):
        return key
    try:
        return REGISTRY.get(Strategy(key.lower() if isinstance(key, str) else key))
    except ValueError:
        return None


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered strategies in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "Strategy",
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
