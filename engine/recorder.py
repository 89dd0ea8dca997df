"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete search (every SearchState), then computes the metrics
the Analytics panel and the comparison view need.

Usage:
    rec = Recorder()
    rec.start("ucs", get_scenario("variable_cost"))
    metrics = rec.run_to_completion()   # steps the engine to termination
    rec.export()                        # serialisable snapshot for replay

Comparison:
    compare(rec1, rec2)                 → ComparisonResult (two runs)
    compare_strategies(scenario)        → {strategy: RunMetrics} (all four)

Optimality audit:
    Every run is checked against the cheapest path found by exhaustive
    enumeration of the scenario's simple paths.  The catalog graphs are
    tiny, so this is cheap, and it lets the UI show a learner whether
    the strategy's answer really was the best one.
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from algorithms import AlgoInfo, Strategy, list_algorithms
from algorithms.state import SearchState
from engine.search import SearchEngine
from engine.stepper import DEFAULT_MAX_STEPS
from graph import Scenario
from logger import get_logger

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:          str            = ""
    algo_label:        str            = ""
    scenario:          str            = ""
    status:            str            = ""
    nodes_explored:    int            = 0
    path:              List[str]      = field(default_factory=list)
    path_length:       int            = 0        # number of edges on the final path
    path_cost:         float          = 0
    optimal_cost:      Optional[float] = None    # cheapest cost by exhaustive enumeration
    is_optimal:        bool           = False
    total_steps:       int            = 0        # expansions performed
    max_frontier_size: int            = 0        # space peak
    wall_time_ms:      float          = 0.0
    path_found:        bool           = False
    step_limit_hit:    bool           = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_nodes:    str = ""   # which strategy expanded fewer nodes
    winner_frontier: str = ""   # which strategy needed less frontier space
    winner_path:     str = ""   # which strategy found the cheaper path


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        states  : Every SearchState of the run, initial snapshot first.
        metrics : Computed RunMetrics (available after run_to_completion).
        engine  : The underlying SearchEngine.
    """

    def __init__(self, max_steps: int = DEFAULT_MAX_STEPS):
        self.states:    List[SearchState]      = []
        self.metrics:   Optional[RunMetrics]   = None
        self.engine:    Optional[SearchEngine] = None
        self.max_steps: int                    = max_steps

        self._scenario: Optional[Scenario] = None
        self._algo:     Optional[AlgoInfo] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, strategy: Union[str, Strategy, AlgoInfo], scenario: Scenario) -> None:
        """Build a fresh engine for this run.  Raises on an invalid scenario / strategy."""
        self.engine    = SearchEngine(scenario, strategy)
        self._scenario = scenario
        self._algo     = self.engine.algo
        self.states    = [self.engine.state]
        self.metrics   = None

    def run_to_completion(self) -> RunMetrics:
        """Step to termination (or the cap), record every state, compute metrics."""
        if self.engine is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        limit_hit = False
        while not self.engine.is_terminal:
            if len(self.states) - 1 >= self.max_steps:
                limit_hit = True
                log.warning(
                    "%s on '%s' did not terminate within %d steps",
                    self._algo.short, self._scenario.key, self.max_steps,
                )
                break
            self.states.append(self.engine.step())
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms, limit_hit)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    @property
    def final_state(self) -> Optional[SearchState]:
        return self.states[-1] if self.states else None

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo.key.value if self._algo else "",
            "scenario": self._scenario.to_dict() if self._scenario else {},
            "metrics":  self.metrics.to_dict() if self.metrics else {},
            "states":   [s.to_dict() for s in self.states],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float, limit_hit: bool) -> RunMetrics:
        last = self.final_state
        scenario = self._scenario
        optimal = scenario.graph.min_path_cost(scenario.start, scenario.goal)
        path = list(last.path)
        found = last.solved

        return RunMetrics(
            algo_key=self._algo.key.value,
            algo_label=self._algo.label,
            scenario=scenario.key,
            status=last.status.value,
            nodes_explored=len(last.explored),
            path=path,
            path_length=len(path) - 1 if len(path) > 1 else 0,
            path_cost=last.total_cost if found else 0,
            optimal_cost=optimal,
            is_optimal=found and optimal is not None and last.total_cost == optimal,
            total_steps=last.step_count,
            max_frontier_size=last.max_frontier_size,
            wall_time_ms=round(wall_ms, 3),
            path_found=found,
            step_limit_hit=limit_hit,
        )


# ---------------------------------------------------------------------------
# Comparison helpers
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    # an unsolved run never wins on path cost
    l_cost = l.path_cost if l.path_found else float("inf")
    r_cost = r.path_cost if r.path_found else float("inf")

    return ComparisonResult(
        left=l,
        right=r,
        winner_nodes=winner(l.nodes_explored, r.nodes_explored),
        winner_frontier=winner(l.max_frontier_size, r.max_frontier_size),
        winner_path=winner(l_cost, r_cost),
    )


def compare_strategies(
    scenario: Scenario,
    strategies: Optional[Iterable[Union[str, Strategy]]] = None,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> Dict[str, RunMetrics]:
    """Run each strategy (default: all four) on `scenario`; key = strategy value."""
    keys = [a.key for a in list_algorithms()] if strategies is None else list(strategies)
    results: Dict[str, RunMetrics] = {}
    for key in keys:
        rec = Recorder(max_steps=max_steps)
        rec.start(key, scenario)
        metrics = rec.run_to_completion()
        results[metrics.algo_key] = metrics
    return results
