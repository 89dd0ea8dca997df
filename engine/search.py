"""
search.py — Stepwise Search Engine
===================================
The one component with real algorithmic weight.  Given a Scenario and a
Strategy it produces an initial SearchState and advances it by exactly one
node expansion per `step()` call.

    engine = create(get_scenario("standard"), Strategy.UCS)
    while not engine.is_terminal:
        state = engine.step()          # re-render after every call

State machine:
    UNSTARTED  →  step()  →  RUNNING
    RUNNING    →  step()  →  RUNNING     (frontier non-empty, goal not expanded)
    RUNNING    →  step()  →  SOLVED      (goal removed from the frontier)
    RUNNING    →  step()  →  EXHAUSTED   (frontier emptied without the goal)
    SOLVED / EXHAUSTED are absorbing: step() returns the same snapshot.

Design decisions:
  - `advance()` is a pure function of (state, graph, algo).  It rebuilds
    the strategy's frontier from the snapshot, mutates only that local
    copy and a copied records dict, and returns a NEW SearchState.
  - The four strategies share this one loop.  They differ only in the
    Frontier class (FIFO / LIFO / cost heap) and the `relaxes` flag.
  - Validation happens once, in the constructor.  A failed construction
    raises; there is no half-built engine to misuse.
"""

from dataclasses import replace
from typing import Dict, List, Mapping, Optional, Union

from algorithms import AlgoInfo, Strategy, get_algorithm
from algorithms.state import Discovery, SearchState, SearchStatus
from errors import BrokenChain, InvalidScenario, StepLimitExceeded
from graph import Graph, Scenario
from logger import get_logger

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Pure transition
# ---------------------------------------------------------------------------
def advance(state: SearchState, graph: Graph, algo: AlgoInfo) -> SearchState:
    """
    One expansion.  Returns `state` itself (unchanged) once terminal.

    Steps:
      1. termination check      – frontier empty or current == goal
      2. selection              – algo.frontier decides which id leaves
      3. goal check             – reconstruct path + total cost, stop
      4. expansion              – discover / relax outgoing neighbours
      5. bookkeeping            – current, step_count, peak frontier size
    """
    if is_terminal(state):
        return state

    frontier = algo.frontier.from_snapshot(state.frontier, state.records)
    node = frontier.pop()

    if node == state.goal:
        path = reconstruct_path(state.records, state.start, state.goal)
        solved = replace(
            state,
            current=node,
            frontier=frontier.snapshot(),
            path=tuple(path),
            total_cost=state.records[node].cost,
            step_count=state.step_count + 1,
            discovered=(),
            relaxed=(),
            pseudocode_line=algo.line_for("goal"),
        )
        return replace(solved, explanation=algo.narrate("goal", node, solved))

    explored = state.explored + (node,)
    closed = set(explored)
    records: Dict[str, Discovery] = dict(state.records)
    base = records[node].cost
    discovered: List[str] = []
    relaxed: List[str] = []

    for edge in graph.edges_from(node):
        child = edge.target
        if child in closed:
            continue
        candidate = base + edge.weight
        if child not in frontier:
            frontier.push(child, candidate)
            records[child] = Discovery(candidate, node)
            discovered.append(child)
        elif algo.relaxes and candidate < records[child].cost:
            frontier.decrease(child, candidate)
            records[child] = Discovery(candidate, node)
            if child not in discovered and child not in relaxed:
                relaxed.append(child)

    remaining = frontier.snapshot()
    if not remaining:
        event = "exhausted"
    elif relaxed and not discovered:
        event = "relax"
    else:
        event = "expand"

    expanded = replace(
        state,
        current=node,
        frontier=remaining,
        explored=explored,
        records=records,
        step_count=state.step_count + 1,
        max_frontier_size=max(state.max_frontier_size, len(remaining)),
        discovered=tuple(discovered),
        relaxed=tuple(relaxed),
        pseudocode_line=algo.line_for(event),
    )
    return replace(expanded, explanation=algo.narrate(event, node, expanded))


def is_terminal(state: SearchState) -> bool:
    """current == goal, or nothing left to expand."""
    return state.current == state.goal or not state.frontier


def reconstruct_path(records: Mapping[str, Discovery], start: str, goal: str) -> List[str]:
    """
    Walk parent pointers goal → start and return the path start → goal.

    Raises BrokenChain when a node other than the start has no recorded
    parent, or when the walk revisits a node (a parent cycle).
    """
    path: List[str] = []
    seen = set()
    cur: Optional[str] = goal
    while True:
        if cur in seen:
            raise BrokenChain(cur, path)
        rec = records.get(cur)
        if rec is None:
            raise BrokenChain(cur, path)
        path.append(cur)
        seen.add(cur)
        if cur == start:
            break
        if rec.parent is None:
            raise BrokenChain(cur, path)
        cur = rec.parent
    path.reverse()
    return path


def check_scenario(scenario: Scenario, algo: AlgoInfo) -> None:
    """Raise InvalidScenario when `scenario` cannot be searched with `algo`."""
    scenario.validate()
    if algo.relaxes and scenario.graph.has_negative_edges():
        bad = [f"{e.source} → {e.target} ({e.weight})" for e in scenario.graph.edges if e.weight < 0]
        raise InvalidScenario(
            f"{algo.short} requires non-negative edge weights; negative: {', '.join(bad)}",
            [f"negative weight on {b}" for b in bad],
        )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class SearchEngine:
    """
    Owns one (scenario, strategy) search and its current SearchState.

    Attributes:
        scenario : The immutable Scenario being searched.
        algo     : AlgoInfo of the selected strategy.
        state    : Latest SearchState snapshot (read-only for callers).
    """

    def __init__(
        self,
        scenario: Scenario,
        strategy: Union[str, Strategy, AlgoInfo],
        state: Optional[SearchState] = None,
    ):
        algo = get_algorithm(strategy)
        if algo is None:
            raise ValueError(f"Unknown strategy: {strategy!r}")
        check_scenario(scenario, algo)

        self.scenario: Scenario  = scenario
        self.algo:     AlgoInfo  = algo

        if state is None:
            init = SearchState.initial(scenario.start, scenario.goal, pseudocode_line=algo.line_for("init"))
            state = replace(init, explanation=algo.narrate("init", None, init))
        elif (state.start, state.goal) != (scenario.start, scenario.goal):
            raise ValueError(
                f"Snapshot is for {state.start}→{state.goal}, "
                f"scenario '{scenario.key}' searches {scenario.start}→{scenario.goal}"
            )
        self.state: SearchState = state

        log.debug("engine ready: %s on '%s' (%s)", algo.short, scenario.key, scenario.graph)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def step(self) -> SearchState:
        """Advance one expansion.  A no-op returning the same snapshot once terminal."""
        before = self.state
        self.state = advance(before, self.scenario.graph, self.algo)
        if self.state is not before and self.state.is_terminal:
            log.info(
                "%s on '%s' %s after %d step(s)%s",
                self.algo.short, self.scenario.key, self.state.status.value, self.state.step_count,
                f": {'-'.join(self.state.path)} cost {self.state.total_cost}" if self.state.solved else "",
            )
        return self.state

    def run(self, max_steps: Optional[int] = None) -> SearchState:
        """
        Step until terminal.  With `max_steps`, raise StepLimitExceeded if
        the search has not terminated after that many further steps.
        """
        taken = 0
        while not self.is_terminal:
            if max_steps is not None and taken >= max_steps:
                raise StepLimitExceeded(max_steps, self.state)
            self.step()
            taken += 1
        return self.state

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def strategy(self) -> Strategy:
        return self.algo.key

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self.state)

    @property
    def status(self) -> SearchStatus:
        return self.state.status

    @property
    def max_frontier_size(self) -> int:
        return self.state.max_frontier_size

    def __repr__(self) -> str:
        return (
            f"SearchEngine({self.algo.short}, scenario={self.scenario.key}, "
            f"status={self.status.value}, steps={self.state.step_count})"
        )


def create(scenario: Scenario, strategy: Union[str, Strategy, AlgoInfo]) -> SearchEngine:
    """Build a fresh engine.  Raises InvalidScenario / ValueError on bad input."""
    return SearchEngine(scenario, strategy)
