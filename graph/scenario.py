"""
scenario.py — Named Example Graph
==================================
A Scenario bundles a Graph with its fixed start ("S") and goal ("G") and
the one-line description shown above the canvas.

`validate()` is the only gatekeeper between catalog data and the engine:
SearchEngine calls it on construction and refuses to build when it fails.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from errors import InvalidScenario
from graph.graph import Graph

START_ID = "S"
GOAL_ID  = "G"


class ScenarioType(Enum):
    STANDARD      = "standard"
    DEEP_NARROW   = "deep_narrow"
    WIDE_SHALLOW  = "wide_shallow"
    UNIFORM_COST  = "uniform_cost"
    VARIABLE_COST = "variable_cost"


@dataclass(frozen=True)
class Scenario:
    """
    Attributes:
        key         : Catalog key (ScenarioType value string for catalog entries).
        title       : Display name, e.g. "Deep & Narrow".
        description : What the scenario is meant to demonstrate.
        graph       : Nodes + directed weighted edges.
        start, goal : Designated node ids.
    """

    key:         str
    title:       str
    description: str
    graph:       Graph
    start:       str = START_ID
    goal:        str = GOAL_ID

    def problems(self) -> List[str]:
        """Every reason this scenario cannot be searched (empty when valid)."""
        found = []
        for role, node_id in (("start", self.start), ("goal", self.goal)):
            if node_id not in self.graph.nodes:
                found.append(f"{role} node '{node_id}' is missing")
        if self.start == self.goal:
            found.append(f"start and goal are the same node '{self.start}'")
        for edge in self.graph.dangling_edges():
            found.append(f"edge {edge.source} → {edge.target} references an unknown node")
        return found

    def validate(self) -> None:
        problems = self.problems()
        if problems:
            raise InvalidScenario(
                f"Scenario '{self.key}' is invalid: {'; '.join(problems)}", problems
            )

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "key":         self.key,
            "title":       self.title,
            "description": self.description,
            "start":       self.start,
            "goal":        self.goal,
            **self.graph.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Scenario":
        return cls(
            key=data["key"],
            title=data.get("title", data["key"]),
            description=data.get("description", ""),
            graph=Graph.from_dict(data),
            start=data.get("start", START_ID),
            goal=data.get("goal", GOAL_ID),
        )

    def __repr__(self) -> str:
        return f"Scenario({self.key}, {self.graph!r})"
