"""
ucs.py — Uniform-Cost Search
=============================
Priority discipline: the frontier is ordered by g(n), the cumulative path
cost from the start, and the cheapest node is expanded first.  Ties go to
the node that entered the frontier first.

A node already waiting in the frontier is relaxed when a cheaper way to
reach it turns up.  Explored nodes are final: with non-negative weights
nothing cheaper can reach them later.

Goal test happens when the goal is REMOVED from the frontier, not when it
is discovered.  Testing at discovery would return the first path found
rather than the cheapest.
"""

from typing import Dict, List, Optional

from algorithms.state import SearchState


PSEUDOCODE: List[str] = [
    "def UCS(graph, start, goal):",                        # 0
    "    frontier ← priority_queue([(0, start)])",         # 1
    "    explored ← {}",                                   # 2
    "    while frontier is not empty:",                    # 3
    "        node ← frontier.pop_min()          # lowest g(n)",  # 4
    "        if node == goal: return path(node)",          # 5
    "        explored.add(node)",                          # 6
    "        for (child, w) in adj(node):",                # 7
    "            g ← g(node) + w",                         # 8
    "            if child not in explored ∪ frontier:",    # 9
    "                frontier.push(child, g)",             # 10
    "            elif child in frontier and g < g(child):",  # 11
    "                frontier.decrease(child, g)",         # 12
    "    return FAILURE",                                  # 13
]

EVENT_LINES: Dict[str, int] = {
    "init":      1,
    "goal":      5,
    "expand":    10,
    "relax":     12,
    "exhausted": 13,
}


def describe_expansion(node: str, state: SearchState) -> str:
    cost = state.records[node].cost
    parts = [f"Pop '{node}' with g = {cost}, the cheapest node in the frontier."]
    if state.discovered:
        found = ", ".join(f"{n} (g={state.records[n].cost})" for n in state.discovered)
        parts.append(f"Discovered: {found}.")
    if state.relaxed:
        better = ", ".join(f"{n} → g={state.records[n].cost} via {node}" for n in state.relaxed)
        parts.append(f"Found cheaper paths: {better}.")
    if not state.discovered and not state.relaxed:
        parts.append("No new nodes and no cheaper paths.")
    return " ".join(parts)


def narrate(event: str, node: Optional[str], state: SearchState) -> str:
    if event == "init":
        return (
            f"Initialise: start node '{state.start}' enters the priority queue with g = 0. "
            f"UCS always expands the lowest-cost node next."
        )
    if event == "goal":
        return (
            f"Pop '{node}': the goal, with g = {state.total_cost}. No cheaper path can exist, "
            f"so the search stops: {' → '.join(state.path)}."
        )
    text = describe_expansion(node, state)
    if event == "exhausted":
        text += f" The priority queue is empty: goal '{state.goal}' is NOT reachable."
    return text
