"""
catalog.py — Built-in Scenarios
================================
The fixed example graphs the visualizer ships with.  Pure data: each
entry is loaded through Scenario.from_dict exactly like user data would be.

Coordinates are in a 600×250 viewBox.
"""

from typing import Dict, List, Optional, Union

from graph.scenario import Scenario, ScenarioType


def _n(node_id: str, x: float, y: float, label: Optional[str] = None) -> dict:
    return {"id": node_id, "label": label or node_id, "x": x, "y": y}


def _e(source: str, target: str, weight: float) -> dict:
    return {"source": source, "target": target, "weight": weight}


_DATA: List[dict] = [
    {
        "key": ScenarioType.STANDARD.value,
        "title": "Standard",
        "description": "A balanced graph to demonstrate basic algorithm behavior.",
        "nodes": [
            _n("S", 50, 100, "Start"), _n("A", 200, 50), _n("B", 200, 150),
            _n("C", 350, 50), _n("D", 350, 150), _n("G", 500, 100, "Goal"),
        ],
        "edges": [
            _e("S", "A", 2), _e("S", "B", 5), _e("A", "C", 3), _e("A", "D", 8),
            _e("B", "D", 4), _e("C", "G", 6), _e("D", "G", 2),
        ],
    },
    {
        "key": ScenarioType.DEEP_NARROW.value,
        "title": "Deep & Narrow",
        "description": "Deep tree where DFS might find a deep solution fast, while BFS explores layers.",
        "nodes": [
            _n("S", 50, 100, "Start"), _n("A", 150, 50), _n("A1", 250, 30), _n("A2", 350, 20),
            _n("B", 150, 150), _n("B1", 250, 170), _n("B2", 350, 180), _n("B3", 450, 190),
            _n("G", 550, 200, "Goal"),
        ],
        "edges": [
            _e("S", "A", 1), _e("A", "A1", 1), _e("A1", "A2", 1),
            _e("S", "B", 1), _e("B", "B1", 1), _e("B1", "B2", 1), _e("B2", "B3", 1), _e("B3", "G", 1),
        ],
    },
    {
        "key": ScenarioType.WIDE_SHALLOW.value,
        "title": "Wide & Shallow",
        "description": "High branching factor at root. BFS must visit many nodes at layer 1.",
        "nodes": [
            _n("S", 50, 125, "Start"), _n("A", 250, 25), _n("B", 250, 75), _n("C", 250, 125),
            _n("D", 250, 175), _n("E", 250, 225), _n("G", 450, 125, "Goal"),
        ],
        "edges": [
            _e("S", "A", 1), _e("S", "B", 1), _e("S", "C", 1), _e("S", "D", 1), _e("S", "E", 1),
            _e("A", "G", 10), _e("B", "G", 10), _e("C", "G", 10), _e("D", "G", 10), _e("E", "G", 1),
        ],
    },
    {
        "key": ScenarioType.UNIFORM_COST.value,
        "title": "Uniform Cost",
        "description": "All weights are 1. BFS and UCS should produce identical results.",
        "nodes": [
            _n("S", 50, 100, "Start"), _n("A", 200, 50), _n("B", 200, 150),
            _n("C", 350, 50), _n("D", 350, 150), _n("G", 500, 100, "Goal"),
        ],
        "edges": [
            _e("S", "A", 1), _e("S", "B", 1), _e("A", "C", 1),
            _e("B", "D", 1), _e("C", "G", 1), _e("D", "G", 1),
        ],
    },
    {
        "key": ScenarioType.VARIABLE_COST.value,
        "title": "Variable Cost",
        "description": "BFS will choose the 'shorter' path (S-A-G), but UCS finds the 'cheaper' path (S-B-C-D-G).",
        "nodes": [
            _n("S", 50, 100, "Start"), _n("A", 250, 40), _n("B", 150, 160),
            _n("C", 300, 180), _n("D", 450, 160), _n("G", 500, 80, "Goal"),
        ],
        "edges": [
            _e("S", "A", 10), _e("A", "G", 10), _e("S", "B", 1),
            _e("B", "C", 1), _e("C", "D", 1), _e("D", "G", 1),
        ],
    },
]


SCENARIOS: Dict[str, Scenario] = {d["key"]: Scenario.from_dict(d) for d in _DATA}

DEFAULT_SCENARIO = ScenarioType.STANDARD.value


def get_scenario(key: Union[str, ScenarioType]) -> Optional[Scenario]:
    """Return a catalog Scenario by key, or None."""
    if isinstance(key, ScenarioType):
        key = key.value
    return SCENARIOS.get(key)


def list_scenarios() -> List[Scenario]:
    """All catalog scenarios in display order."""
    return list(SCENARIOS.values())
