"""
canvas.py — SVG Graph Renderer
================================
Pure rendering function: Scenario + SearchState → SVG string.

The renderer consumes:
  • scenario   – the Scenario (node positions, weighted directed edges)
  • state      – the current SearchState snapshot (or None for a static graph)
  • algo       – AlgoInfo of the running strategy (frontier kind, g= labels)
  • config     – visual config (canvas size, colors, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  The caller passes in everything it needs and gets back
    a string.
  - A node's role is derived from the snapshot, most specific first:
    current > path > frontier > explored > unvisited.  Role → fill is a
    plain dict lookup.
  - Edges are always directed, so every edge gets an arrowhead and its
    weight as a label.  An edge on the final path is drawn thick.
  - Cost strategies annotate every discovered node with its `g=` value.
  - The frontier overlay sits in a fixed panel right of the graph.
"""

import math
from typing import Dict, List, Optional, Tuple

from algorithms import AlgoInfo
from algorithms.state import SearchState
from graph import Edge, Node, Scenario


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas; scenario coordinates live in the left 600×250, the overlay to its right
    width:  int = 820
    height: int = 260
    bg:     str = "#ffffff"

    # node role → (fill, stroke, label color)
    node_colors: Dict[str, Tuple[str, str, str]] = {
        "unvisited": ("#ffffff", "#cbd5e1", "#334155"),
        "explored":  ("#f1f5f9", "#94a3b8", "#64748b"),
        "frontier":  ("#fef3c7", "#f59e0b", "#92400e"),
        "path":      ("#22c55e", "#16a34a", "#ffffff"),
        "current":   ("#3b82f6", "#2563eb", "#ffffff"),
    }

    # edge colors
    edge_default:      str = "#e2e8f0"
    edge_path:         str = "#22c55e"
    edge_width:        int = 2
    edge_width_path:   int = 4
    edge_arrow_size:   int = 9
    edge_weight_color: str = "#64748b"
    edge_weight_bg:    str = "#ffffff"
    edge_weight_size:  int = 11

    # node
    node_radius:      int = 20
    node_label_size:  int = 12
    cost_label_color: str = "#2563eb"
    cost_label_size:  int = 10

    # overlay panel
    overlay_x:         int = 610
    overlay_y:         int = 10
    overlay_width:     int = 200
    overlay_bg:        str = "#f8fafc"
    overlay_border:    str = "#e2e8f0"
    overlay_header:    str = "#0f172a"
    overlay_text:      str = "#475569"
    overlay_font_size: int = 12
    overlay_rows:      int = 10


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    scenario: Scenario,
    state: Optional[SearchState] = None,
    algo: Optional[AlgoInfo] = None,
    config: CanvasConfig = CONFIG,
    show_overlays: bool = True,
) -> str:
    """
    Returns an SVG string.

    Args:
        scenario      : The scenario to draw.
        state         : Current snapshot (or None for the bare graph).
        algo          : Strategy being run; enables g= labels and the overlay title.
        config        : Visual config.
        show_overlays : If True, render the frontier panel.
    """
    graph = scenario.graph
    roles = node_roles(state)
    path_edges = _path_edges(state)
    show_cost = bool(algo and algo.weighted)

    svg_parts = [
        f'<svg width="100%" viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    # -- edges (draw first so nodes sit on top) --
    for edge in graph.edges:
        svg_parts.append(_render_edge(scenario, edge, (edge.source, edge.target) in path_edges, config))

    # -- nodes --
    for node in graph.nodes.values():
        cost = state.records[node.id].cost if show_cost and node.id in state.records else None
        svg_parts.append(_render_node(node, roles.get(node.id, "unvisited"), cost, config))

    # -- overlay --
    if show_overlays and state is not None and algo is not None:
        svg_parts.append(_render_frontier_panel(state, algo, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def node_roles(state: Optional[SearchState]) -> Dict[str, str]:
    """node id → role name, most specific role wins."""
    if state is None:
        return {}
    roles: Dict[str, str] = {}
    for nid in state.explored:
        roles[nid] = "explored"
    for nid in state.frontier:
        roles[nid] = "frontier"
    for nid in state.path:
        roles[nid] = "path"
    if state.current is not None:
        roles[state.current] = "current"
    return roles


def _path_edges(state: Optional[SearchState]) -> set:
    if state is None or len(state.path) < 2:
        return set()
    return set(zip(state.path, state.path[1:]))


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(node: Node, role: str, cost: Optional[float], config: CanvasConfig) -> str:
    fill, stroke, text = config.node_colors.get(role, config.node_colors["unvisited"])
    cx, cy, r = node.x, node.y, config.node_radius

    parts = [
        f'<g class="node node-{role}" data-id="{node.id}">',
        f'  <circle cx="{cx}" cy="{cy}" r="{r}" fill="{fill}" stroke="{stroke}" stroke-width="2"/>',
        f'  <text x="{cx}" y="{cy + 4}" text-anchor="middle" font-size="{config.node_label_size}" '
        f'font-family="sans-serif" font-weight="700" fill="{text}">{node.id}</text>',
    ]
    if node.label != node.id:
        parts.append(
            f'  <text x="{cx}" y="{cy + r + 14}" text-anchor="middle" font-size="10" '
            f'font-family="sans-serif" fill="{config.edge_weight_color}">{node.label}</text>'
        )
    if cost is not None:
        parts.append(
            f'  <text x="{cx}" y="{cy - r - 6}" text-anchor="middle" font-size="{config.cost_label_size}" '
            f'font-family="monospace" font-weight="700" fill="{config.cost_label_color}">g={_fmt(cost)}</text>'
        )
    parts.append("</g>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(scenario: Scenario, edge: Edge, on_path: bool, config: CanvasConfig) -> str:
    src = scenario.graph.get_node(edge.source)
    tgt = scenario.graph.get_node(edge.target)
    if not src or not tgt:
        return ""

    stroke = config.edge_path if on_path else config.edge_default
    width = config.edge_width_path if on_path else config.edge_width

    dx, dy = tgt.x - src.x, tgt.y - src.y
    dist = math.sqrt(dx * dx + dy * dy)
    if dist < 0.001:
        return ""  # degenerate edge

    # shorten the line by node_radius on both ends
    ux, uy = dx / dist, dy / dist
    r = config.node_radius
    x1, y1 = src.x + ux * r, src.y + uy * r
    x2, y2 = tgt.x - ux * r, tgt.y - uy * r

    mx, my = (src.x + tgt.x) / 2, (src.y + tgt.y) / 2
    parts = [
        f'<g class="edge{" edge-path" if on_path else ""}" data-source="{edge.source}" data-target="{edge.target}">',
        f'  <line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" stroke="{stroke}" stroke-width="{width}"/>',
        _render_arrow(x2, y2, ux, uy, stroke if on_path else "#94a3b8", config),
        f'  <rect x="{mx - 10:.1f}" y="{my - 8:.1f}" width="20" height="16" rx="3" fill="{config.edge_weight_bg}"/>',
        f'  <text x="{mx:.1f}" y="{my + 4:.1f}" text-anchor="middle" font-size="{config.edge_weight_size}" '
        f'font-family="sans-serif" font-weight="700" fill="{config.edge_weight_color}">{_fmt(edge.weight)}</text>',
        "</g>",
    ]
    return "\n".join(parts)


def _render_arrow(x: float, y: float, ux: float, uy: float, color: str, config: CanvasConfig) -> str:
    """Draw an arrowhead at (x, y) pointing in direction (ux, uy)."""
    size = config.edge_arrow_size
    px, py = -uy, ux
    p1_x = x - ux * size + px * (size * 0.5)
    p1_y = y - uy * size + py * (size * 0.5)
    p2_x = x - ux * size - px * (size * 0.5)
    p2_y = y - uy * size - py * (size * 0.5)
    return f'  <polygon points="{x:.1f},{y:.1f} {p1_x:.1f},{p1_y:.1f} {p2_x:.1f},{p2_y:.1f}" fill="{color}"/>'


# ---------------------------------------------------------------------------
# Frontier Overlay
# ---------------------------------------------------------------------------
def frontier_entries(state: SearchState, algo: AlgoInfo) -> List[str]:
    """Frontier rendered as text rows, next-to-leave first."""
    if algo.weighted:
        rows = sorted(
            ((state.records[n].cost, i, n) for i, n in enumerate(state.frontier)),
        )
        return [f"({_fmt(cost)}, {nid})" for cost, _, nid in rows]
    if algo.frontier.kind == "stack":
        return list(reversed(state.frontier))
    return list(state.frontier)


def _render_frontier_panel(state: SearchState, algo: AlgoInfo, config: CanvasConfig) -> str:
    rows = frontier_entries(state, algo)
    shown = rows[: config.overlay_rows]
    height = 40 + max(len(shown), 1) * 16 + (16 if len(rows) > len(shown) else 0)
    title = f"{algo.frontier.kind.title()} ({algo.short})"

    parts = [
        f'<g class="frontier-panel" transform="translate({config.overlay_x},{config.overlay_y})">',
        f'  <rect width="{config.overlay_width}" height="{height}" fill="{config.overlay_bg}" '
        f'stroke="{config.overlay_border}" rx="8"/>',
        f'  <text x="12" y="22" font-size="12" font-weight="700" fill="{config.overlay_header}" '
        f'font-family="sans-serif">{title}</text>',
    ]
    if not shown:
        parts.append(
            f'  <text x="16" y="44" font-size="{config.overlay_font_size}" font-style="italic" '
            f'fill="{config.overlay_text}">empty</text>'
        )
    for i, txt in enumerate(shown):
        parts.append(
            f'  <text x="16" y="{44 + i * 16}" font-size="{config.overlay_font_size}" '
            f'font-family="monospace" fill="{config.overlay_text}">{txt}</text>'
        )
    if len(rows) > len(shown):
        parts.append(
            f'  <text x="16" y="{44 + len(shown) * 16}" font-size="11" fill="#94a3b8">'
            f'… +{len(rows) - len(shown)} more</text>'
        )
    parts.append("</g>")
    return "\n".join(parts)


def _fmt(value: float) -> str:
    """2.0 → "2", 2.5 → "2.5"."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
