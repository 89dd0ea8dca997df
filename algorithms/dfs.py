"""
dfs.py — Depth-First Search
============================
LIFO discipline: the frontier is a stack, so the most recently discovered
node is expanded next and the search dives down one branch before it
backtracks.

Children are pushed in edge order, which means the LAST listed child is
the first one explored.  Explored nodes are never pushed again, so DFS
terminates on every finite graph.
"""

from typing import Dict, List, Optional

from algorithms.state import SearchState


PSEUDOCODE: List[str] = [
    "def DFS(graph, start, goal):",                 # 0
    "    frontier ← stack([start])",                # 1
    "    explored ← {}",                            # 2
    "    while frontier is not empty:",             # 3
    "        node ← frontier.pop()",                # 4
    "        if node == goal: return path(node)",   # 5
    "        explored.add(node)",                   # 6
    "        for child in adj(node):",              # 7
    "            if child not in explored ∪ frontier:",  # 8
    "                parent[child] ← node",         # 9
    "                frontier.push(child)",         # 10
    "    return FAILURE",                           # 11
]

EVENT_LINES: Dict[str, int] = {
    "init":      1,
    "goal":      5,
    "expand":    10,
    "exhausted": 11,
}


def narrate(event: str, node: Optional[str], state: SearchState) -> str:
    if event == "init":
        return (
            f"Initialise: start node '{state.start}' is pushed onto the stack. "
            f"DFS will dive as deep as it can before backtracking."
        )
    if event == "goal":
        return (
            f"Pop '{node}': the goal! DFS returns the first path it stumbled on: "
            f"{' → '.join(state.path)} (cost {state.total_cost}). It is not necessarily the shortest."
        )
    added = ", ".join(state.discovered) or "nothing new (dead end, DFS backtracks)"
    text = f"Pop '{node}', the most recently discovered node (LIFO), and expand it. Pushed: {added}."
    if event == "exhausted":
        text += f" The stack is now empty: goal '{state.goal}' is NOT reachable."
    return text
