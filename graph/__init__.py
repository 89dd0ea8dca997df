"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import Scenario, ScenarioType, get_scenario, list_scenarios
"""

from graph.node     import Node
from graph.edge     import Edge
from graph.graph    import Graph
from graph.scenario import Scenario, ScenarioType, START_ID, GOAL_ID
from graph.catalog  import SCENARIOS, DEFAULT_SCENARIO, get_scenario, list_scenarios

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "Scenario",  "ScenarioType",
    "START_ID",  "GOAL_ID",
    "SCENARIOS", "DEFAULT_SCENARIO",
    "get_scenario", "list_scenarios",
]
