"""
dijkstra.py — Dijkstra's Algorithm
===================================
Expands the unvisited node with the smallest tentative distance, marks it
visited (its distance is now final) and relaxes its outgoing edges.

This is the goal-directed ("search") variant: it stops as soon as the goal
is selected instead of settling every vertex.  Expansion order therefore
matches UCS step for step; the two differ in how they are taught, not in
what they compute.

Correctness requires non-negative weights.  The engine refuses to build a
Dijkstra search on a graph with a negative edge.
"""

from typing import Dict, List, Optional

from algorithms.state import SearchState
from algorithms.ucs import describe_expansion


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, goal):",          # 0
    "    dist[source] ← 0",                        # 1
    "    unvisited ← {source}",                    # 2
    "    visited ← {}",                            # 3
    "    while unvisited is not empty:",           # 4
    "        u ← argmin dist[v] for v in unvisited",  # 5
    "        if u == goal: return path(u)",        # 6
    "        visited.add(u)",                      # 7
    "        for (v, w) in adj(u), v ∉ visited:",  # 8
    "            if v ∉ unvisited:",               # 9
    "                dist[v] ← dist[u] + w",       # 10
    "            elif dist[u] + w < dist[v]:",     # 11
    "                dist[v] ← dist[u] + w",       # 12
    "                prev[v] ← u",                 # 13
    "    return FAILURE",                          # 14
]

EVENT_LINES: Dict[str, int] = {
    "init":      1,
    "goal":      6,
    "expand":    10,
    "relax":     12,
    "exhausted": 14,
}


def narrate(event: str, node: Optional[str], state: SearchState) -> str:
    if event == "init":
        return (
            f"Initialise: dist['{state.start}'] = 0, every other distance is ∞. "
            f"'{state.start}' is the only unvisited node we know about."
        )
    if event == "goal":
        return (
            f"Select '{node}': the goal, with final distance {state.total_cost}. "
            f"Shortest path: {' → '.join(state.path)}."
        )
    text = describe_expansion(node, state) + f" dist['{node}'] is now FINAL."
    if event == "exhausted":
        text += f" No unvisited nodes remain: goal '{state.goal}' is NOT reachable."
    return text
