"""
node.py — Graph Node
====================
A labelled point on the canvas.  Nodes are immutable once loaded: the
search engine keeps all of its bookkeeping in SearchState, never on the
node itself, so one scenario can back any number of concurrent runs.

Coordinates are display-only.  No algorithm reads them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Node:
    """
    Attributes:
        id    : Identifier, unique within a scenario ("S", "A", "G", …).
        label : Human-readable name shown on the canvas ("Start", "Goal", …).
        x, y  : Canvas coordinates in the 600×250 scenario viewBox.
    """

    id:    str
    label: str   = ""
    x:     float = 0.0
    y:     float = 0.0

    def __post_init__(self):
        if not self.label:
            object.__setattr__(self, "label", self.id)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            id=str(data["id"]),
            label=data.get("label") or str(data["id"]),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
        )

    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, pos=({self.x:.0f},{self.y:.0f}))"
