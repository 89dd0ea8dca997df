"""
edge.py — Directed Weighted Edge
================================
`source` and `target` are node-id strings, not Node references, so edges
stay serialisable and a dangling reference can be reported instead of
blowing up at load time.

Weight defaults to 1.  BFS and DFS never read it; UCS and Dijkstra need
it to be non-negative (checked when the engine is built).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: float = 1.0

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge runs node_a → node_b."""
        return self.source == node_a and self.target == node_b

    # ------------------------------------------------------------------
    # Serialisation  ("from"/"to" accepted as aliases)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=str(data["source"] if "source" in data else data["from"]),
            target=str(data["target"] if "target" in data else data["to"]),
            weight=data.get("weight", 1.0),
        )

    def __repr__(self) -> str:
        return f"Edge({self.source} → {self.target}, w={self.weight})"
