"""
bfs.py — Breadth-First Search
==============================
FIFO discipline: the frontier is a queue, so nodes are expanded in the
order they were discovered and the search sweeps the graph layer by layer.

BFS ignores edge weights when choosing what to expand.  It still records
g(n) for every discovered node (first discovery wins, no relaxation), so
the final path cost can be reported and compared against UCS.

Pseudocode lines are 0-indexed and match EVENT_LINES so the UI can
highlight the line that matches the last engine event.
"""

from typing import Dict, List, Optional

from algorithms.state import SearchState


PSEUDOCODE: List[str] = [
    "def BFS(graph, start, goal):",                 # 0
    "    frontier ← queue([start])",                # 1
    "    explored ← {}",                            # 2
    "    while frontier is not empty:",             # 3
    "        node ← frontier.dequeue()",            # 4
    "        if node == goal: return path(node)",   # 5
    "        explored.add(node)",                   # 6
    "        for child in adj(node):",              # 7
    "            if child not in explored ∪ frontier:",  # 8
    "                parent[child] ← node",         # 9
    "                frontier.enqueue(child)",      # 10
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
            f"Initialise: start node '{state.start}' is placed into the queue. "
            f"BFS explores layer by layer from here."
        )
    if event == "goal":
        return (
            f"Dequeue '{node}': the goal! The path with the fewest edges has "
            f"{len(state.path) - 1} edge(s): {' → '.join(state.path)} (cost {state.total_cost})."
        )
    added = ", ".join(state.discovered) or "nothing new"
    text = (
        f"Dequeue '{node}', the node discovered earliest (FIFO), and expand it. "
        f"Enqueued: {added}."
    )
    if event == "exhausted":
        text += f" The queue is now empty: goal '{state.goal}' is NOT reachable."
    return text
