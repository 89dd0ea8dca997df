"""
graph.py — Graph Container
===========================
Single source of truth for a scenario's structure.  The engine and the
renderer both read from this object; neither writes to it once loaded.

Responsibilities:
  1. Building                             (add / create nodes & edges)
  2. Adjacency queries                    (edges_from, neighbours, …)
  3. Integrity queries                    (dangling edges, negative weights)
  4. Exhaustive path enumeration          (simple_paths / path_cost)
  5. Serialisation round-trip             (to_dict / from_dict)

Design decisions:
  - Nodes stored in a plain dict keyed by id for O(1) lookup.  Insertion
    order is kept, so iteration follows the catalog order.
  - Edges kept in a list in insertion order.  Expansion order (and with
    it every tie-break) follows this order, which makes runs reproducible.
  - A separate adjacency dict `_adj[node_id] → [edge_index]` is maintained
    incrementally so neighbour queries are O(degree), not O(E).
  - Duplicate node ids are refused on insert.  Edges to unknown ids are
    accepted here and reported by `dangling_edges()`, because whether that
    is fatal is the caller's decision.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from errors import InvalidScenario
from graph.edge import Edge
from graph.node import Node


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}
        edges : [Edge, …] in insertion order
        _adj  : {node_id: [index into edges, …]}  (outgoing only)
    """

    def __init__(self):
        self.nodes: Dict[str, Node]      = {}
        self.edges: List[Edge]           = []
        self._adj:  Dict[str, List[int]] = {}

    # ==================================================================
    # BUILDING
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise InvalidScenario(f"Duplicate node id '{node.id}'")
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, node_id: str, label: Optional[str] = None, x: float = 0.0, y: float = 0.0) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(id=node_id, label=label or node_id, x=x, y=y))

    def add_edge(self, edge: Edge) -> Edge:
        self.edges.append(edge)
        self._adj.setdefault(edge.source, []).append(len(self.edges) - 1)
        return edge

    def create_edge(self, source: str, target: str, weight: float = 1.0) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight))

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def edges_from(self, node_id: str) -> List[Edge]:
        """Outgoing edges of node_id, in insertion order."""
        return [self.edges[i] for i in self._adj.get(node_id, [])]

    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] for every outgoing edge."""
        return [(e.target, e) for e in self.edges_from(node_id)]

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge running a → b."""
        for edge in self.edges_from(a):
            if edge.target == b:
                return edge
        return None

    # ==================================================================
    # INTEGRITY
    # ==================================================================
    def dangling_edges(self) -> List[Edge]:
        """Edges whose source or target is not a known node id."""
        return [e for e in self.edges if e.source not in self.nodes or e.target not in self.nodes]

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges)

    def is_uniform_cost(self) -> bool:
        """True when every edge weighs exactly 1 (BFS ≡ UCS territory)."""
        return all(e.weight == 1 for e in self.edges)

    # ==================================================================
    # PATH ENUMERATION
    # ==================================================================
    def simple_paths(self, source: str, target: str) -> Iterator[List[str]]:
        """
        Yield every cycle-free path source → target (depth-first order).

        Exponential in general; the catalog graphs have at most a handful
        of paths, which is what the optimality audit relies on.
        """
        stack: List[Tuple[str, List[str]]] = [(source, [source])]
        while stack:
            node, path = stack.pop()
            if node == target:
                yield path
                continue
            for edge in reversed(self.edges_from(node)):
                if edge.target not in path:
                    stack.append((edge.target, path + [edge.target]))

    def path_cost(self, path: Sequence[str]) -> float:
        """Sum of weights along path (cheapest parallel edge per hop)."""
        total = 0
        for a, b in zip(path, path[1:]):
            weights = [e.weight for e in self.edges_from(a) if e.target == b]
            if not weights:
                raise ValueError(f"No edge {a} → {b}")
            total += min(weights)
        return total

    def min_path_cost(self, source: str, target: str) -> Optional[float]:
        """Cheapest simple-path cost by exhaustive enumeration, None if unreachable."""
        costs = [self.path_cost(p) for p in self.simple_paths(source, target)]
        return min(costs) if costs else None

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls()
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
