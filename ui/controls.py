"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls       – rewind/prev/play/next/end/speed
  • algorithm_selector      – BFS / DFS / UCS / Dijkstra
  • scenario_selector       – the built-in example graphs
  • analytics_panel         – explored count, frontier peak, path, cost, …
  • comparison_panel        – criteria matrix + measured metrics for every strategy
  • pseudocode_viewer       – with live line highlighting
  • explanation_panel       – Learning Mode "why this step happened"
  • algorithm_details_panel – description, mechanics, use cases, trade-offs
  • ask_panel               – free-form question for the explanation service

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import Dict, List, Optional

from algorithms import AlgoInfo
from algorithms.state import SearchState
from engine import RunMetrics
from graph import Scenario


def _esc(text) -> str:
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _cost(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    current_step: int = 0,
    total_steps: int = 0,
    speed: str = "medium",
    is_finished: bool = False,
) -> str:
    play_icon = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else "Play"

    speeds = [("slow", "Slow (teaching)"), ("medium", "Medium"), ("fast", "Fast (demo)"), ("turbo", "Turbo")]
    options = "".join(
        f'<option value="{key}" {"selected" if key == speed else ""}>{label}</option>'
        for key, label in speeds
    )

    return f"""
    <div class="panel playback-controls">
      <div class="button-row">
        <button id="btn-rewind" title="Rewind to start">⏮</button>
        <button id="btn-prev" title="Previous step">◀</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Next step">▶</button>
        <button id="btn-end" title="Jump to end">⏭</button>
        <button id="btn-reset" title="Reset">↺</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{current_step}</span> / <span id="total-steps">{total_steps}</span>
        {' <span class="finished-badge">FINISHED</span>' if is_finished else ''}
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">{options}</select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm / Scenario Selectors
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = "bfs") -> str:
    buttons = []
    for algo in algorithms:
        active = "active" if algo.key.value == selected_key else ""
        buttons.append(
            f'<button class="algo-btn {active}" data-algo="{algo.key.value}" '
            f'title="{_esc(algo.label)}">{algo.short}</button>'
        )
    return f"""
    <div class="panel algorithm-selector">
      {''.join(buttons)}
    </div>
    """


def scenario_selector(scenarios: List[Scenario], selected_key: str = "standard") -> str:
    options = []
    for sc in scenarios:
        sel = "selected" if sc.key == selected_key else ""
        options.append(f'<option value="{sc.key}" {sel}>{_esc(sc.title)}</option>')
    current = next((s for s in scenarios if s.key == selected_key), None)
    blurb = _esc(current.description) if current else ""
    return f"""
    <div class="panel scenario-selector">
      <label>Scenario:</label>
      <select id="scenario-selector">{''.join(options)}</select>
      <p class="hint">{blurb}</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(state: Optional[SearchState] = None, metrics: Optional[RunMetrics] = None) -> str:
    """Live numbers for the displayed snapshot; optimality once a full run is recorded."""
    if state is None:
        return """
        <div class="panel analytics-panel">
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    if state.solved:
        path_status = "✅ " + " → ".join(state.path)
        cost = _cost(state.total_cost)
    elif state.is_terminal:
        path_status = "❌ Not Found"
        cost = "—"
    else:
        path_status = "searching…"
        cost = "—"

    optimal_row = ""
    if metrics is not None and metrics.path_found and metrics.optimal_cost is not None:
        verdict = "✅ optimal" if metrics.is_optimal else f"❌ best is {_cost(metrics.optimal_cost)}"
        optimal_row = f"<tr><td>Optimality:</td><td><strong>{verdict}</strong></td></tr>"
    limit_row = ""
    if metrics is not None and metrics.step_limit_hit:
        limit_row = '<tr><td colspan="2" class="warning">⚠️ Step limit reached</td></tr>'

    return f"""
    <div class="panel analytics-panel">
      <table>
        <tr><td>Status:</td><td><strong>{state.status.value}</strong></td></tr>
        <tr><td>Nodes Explored:</td><td><strong>{len(state.explored)}</strong></td></tr>
        <tr><td>Frontier Size:</td><td><strong>{len(state.frontier)}</strong> (peak {state.max_frontier_size})</td></tr>
        <tr><td>Steps:</td><td><strong>{state.step_count}</strong></td></tr>
        <tr><td>Path Cost:</td><td><strong>{cost}</strong></td></tr>
        <tr><td>Path:</td><td><strong>{path_status}</strong></td></tr>
        {optimal_row}
        {limit_row}
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel
# ---------------------------------------------------------------------------
def _mark(text: str, word: str) -> str:
    return "✔" if word in text.lower() and "not" not in text.lower() else "✘"


def comparison_panel(algorithms: List[AlgoInfo], results: Optional[Dict[str, RunMetrics]] = None) -> str:
    """Criteria matrix for every strategy, plus measured metrics when `results` is given."""
    rows = []
    for algo in algorithms:
        rows.append(
            f"<tr><td><strong>{algo.short}</strong></td>"
            f"<td>{_mark(algo.completeness, 'complete')} {_esc(algo.completeness)}</td>"
            f"<td><code>{_esc(algo.complexity_time)}</code></td>"
            f"<td><code>{_esc(algo.complexity_space)}</code></td>"
            f"<td>{_mark(algo.optimality, 'optimal')} "
            f"{_esc(algo.optimality)}</td></tr>"
        )

    measured = ""
    if results:
        mrows = []
        for algo in algorithms:
            m = results.get(algo.key.value)
            if m is None:
                continue
            path = " → ".join(m.path) if m.path_found else "—"
            cost = _cost(m.path_cost) if m.path_found else "—"
            opt = "✔" if m.is_optimal else "✘"
            mrows.append(
                f"<tr><td><strong>{m.algo_label}</strong></td><td>{m.nodes_explored}</td>"
                f"<td>{m.max_frontier_size}</td><td>{path}</td><td>{cost}</td><td>{opt}</td></tr>"
            )
        measured = f"""
      <h4>Measured on this scenario</h4>
      <table class="comparison-table">
        <thead><tr><th>Algorithm</th><th>Explored</th><th>Peak Frontier</th><th>Path</th><th>Cost</th><th>Optimal</th></tr></thead>
        <tbody>{''.join(mrows)}</tbody>
      </table>"""

    return f"""
    <div class="panel comparison-panel">
      <h3>Criteria Comparison Matrix</h3>
      <table class="comparison-table">
        <thead><tr><th>Algorithm</th><th>Completeness</th><th>Time Complexity</th><th>Space Complexity</th><th>Optimality</th></tr></thead>
        <tbody>{''.join(rows)}</tbody>
      </table>{measured}
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], current_line: int = -1) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div class="placeholder">Select an algorithm to view pseudocode</div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = "highlight" if i == current_line else ""
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{_esc(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel (Learning Mode)
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        return ('<div class="explanation-text">▶ Click <strong>Run</strong> to see step-by-step '
                "explanations of what's happening at each stage.</div>")
    return f'<div class="explanation-text">{_esc(explanation)}</div>'


# ---------------------------------------------------------------------------
# Algorithm Details
# ---------------------------------------------------------------------------
def algorithm_details_panel(algo: AlgoInfo) -> str:
    def bullets(items: List[str]) -> str:
        return "".join(f"<li>{_esc(i)}</li>" for i in items)

    return f"""
    <div class="panel algorithm-details">
      <h3>{_esc(algo.label)}</h3>
      <p>{_esc(algo.description)}</p>
      <p class="mechanics">{_esc(algo.mechanics)}</p>
      <table>
        <tr><td>Frontier:</td><td>{algo.frontier.kind}</td></tr>
        <tr><td>Completeness:</td><td>{_esc(algo.completeness)}</td></tr>
        <tr><td>Time:</td><td><code>{_esc(algo.complexity_time)}</code></td></tr>
        <tr><td>Space:</td><td><code>{_esc(algo.complexity_space)}</code></td></tr>
        <tr><td>Optimality:</td><td>{_esc(algo.optimality)}</td></tr>
      </table>
      <h4>Use cases</h4><ul>{bullets(algo.use_cases)}</ul>
      <h4>Strengths</h4><ul class="strengths">{bullets(algo.strengths)}</ul>
      <h4>Limitations</h4><ul class="limitations">{bullets(algo.limitations)}</ul>
    </div>
    """


# ---------------------------------------------------------------------------
# Ask the Professor
# ---------------------------------------------------------------------------
def ask_panel(algo: AlgoInfo, answer: str = "") -> str:
    body = f'<div class="answer">{_esc(answer)}</div>' if answer else ""
    return f"""
    <div class="panel ask-panel">
      <h3>Ask about {algo.short}</h3>
      <textarea id="ask-topic" rows="2" placeholder="e.g. Why does {algo.short} need a {algo.frontier.kind}?"></textarea>
      <button id="btn-ask" class="btn-secondary">Ask</button>
      {body}
    </div>
    """
