"""
main.py — Search Algorithm Lab Flask App
==========================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/scenarios          – built-in example graphs
  GET  /api/algorithms         – strategy description cards
  POST /api/config/algo        – select strategy (resets the run)
  POST /api/config/scenario    – select scenario (resets the run)
  POST /api/config/speed       – playback preset
  POST /api/run                – start a run, positioned at step 0
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/step/end           – jump to the terminal snapshot
  POST /api/reset              – drop the current run
  GET  /api/state              – current snapshot + selection
  GET  /api/compare            – every strategy on the current scenario
  POST /api/explain            – ask the explanation service about a topic

State management:
  The Flask session holds the selection and a cursor into the run:
    • scenario / algo     – catalog key, strategy value
    • cursor              – index of the displayed snapshot (None = no run)
    • snapshot            – SearchState.to_dict() at the cursor
    • total_steps         – length of the full run, measured at /api/run
    • speed
  `next` resumes an engine from the stored snapshot; `prev` / `goto`
  replay from the initial state (the engine is deterministic and the
  graphs are tiny).  Engine-owned objects never leave a request.
"""

from flask import Flask, render_template_string, request, jsonify, session
import sys
import os

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import AlgoInfo, get_algorithm, list_algorithms
from algorithms.state import SearchState
from config import Settings
from engine import SearchEngine, Recorder, SPEED_PRESETS, compare_strategies
from errors import InvalidScenario, StepLimitExceeded
from graph import DEFAULT_SCENARIO, Scenario, get_scenario, list_scenarios
from logger import configure_logging, get_logger
from services import ExplainClient
from ui import (
    render_canvas,
    playback_controls,
    algorithm_selector,
    scenario_selector,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
    algorithm_details_panel,
    ask_panel,
)

log = get_logger("app")

DEFAULT_ALGO = "bfs"


def create_app(settings: Settings = None) -> Flask:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["SEARCHLAB"] = settings
    app.extensions["explain_client"] = ExplainClient.from_settings(settings)
    register_routes(app)
    log.debug("app created (max_steps=%d, llm=%s)", settings.max_steps, settings.llm_api_base)
    return app


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def current_scenario() -> Scenario:
    return get_scenario(session.get("scenario", DEFAULT_SCENARIO)) or get_scenario(DEFAULT_SCENARIO)


def current_algo() -> AlgoInfo:
    return get_algorithm(session.get("algo", DEFAULT_ALGO)) or get_algorithm(DEFAULT_ALGO)


def current_snapshot():
    data = session.get("snapshot")
    return SearchState.from_dict(data) if data else None


def save_cursor(idx, state, total=None):
    session["cursor"] = idx
    session["snapshot"] = state.to_dict() if state is not None else None
    if total is not None:
        session["total_steps"] = total


def clear_run():
    save_cursor(None, None, total=0)


def replay(scenario: Scenario, algo: AlgoInfo, idx: int) -> SearchState:
    """Snapshot after `idx` steps, rebuilt from the initial state."""
    engine = SearchEngine(scenario, algo)
    for _ in range(idx):
        engine.step()
    return engine.state


def view_payload(scenario: Scenario, algo: AlgoInfo, state, idx) -> dict:
    """Everything the page re-renders after a navigation call."""
    total = session.get("total_steps", 0)
    return {
        "svg":          render_canvas(scenario, state, algo),
        "pseudocode":   pseudocode_viewer(algo.pseudocode, state.pseudocode_line if state else -1),
        "explanation":  explanation_panel(state.explanation if state else ""),
        "analytics":    analytics_panel(state),
        "current_step": idx if idx is not None else 0,
        "total_steps":  total,
        "is_finished":  bool(state and state.is_terminal),
        "state":        state.to_dict() if state else None,
    }


def bad_request(message: str, **extra):
    body = {"error": message}
    body.update(extra)
    return jsonify(body), 400


def register_routes(app: Flask) -> None:
    settings: Settings = app.config["SEARCHLAB"]

    @app.errorhandler(InvalidScenario)
    def handle_invalid_scenario(exc):
        log.warning("rejected scenario: %s", exc)
        return bad_request(str(exc), problems=exc.problems)

    # -----------------------------------------------------------------------
    # Main UI Route
    # -----------------------------------------------------------------------
    @app.route("/")
    def index():
        scenario = current_scenario()
        algo = current_algo()
        state = current_snapshot()
        idx = session.get("cursor")

        html = render_template_string(INDEX_TEMPLATE,
            svg=render_canvas(scenario, state, algo),
            playback=playback_controls(
                current_step=idx or 0,
                total_steps=session.get("total_steps", 0),
                speed=session.get("speed", settings.speed),
                is_finished=bool(state and state.is_terminal),
            ),
            algo_selector=algorithm_selector(list_algorithms(), algo.key.value),
            scenario_selector=scenario_selector(list_scenarios(), scenario.key),
            analytics=analytics_panel(state),
            pseudocode=pseudocode_viewer(algo.pseudocode, state.pseudocode_line if state else -1),
            explanation=explanation_panel(state.explanation if state else ""),
            details=algorithm_details_panel(algo),
            ask=ask_panel(algo),
            speeds=SPEED_PRESETS,
        )
        return html

    # -----------------------------------------------------------------------
    # API: Catalog
    # -----------------------------------------------------------------------
    @app.route("/api/scenarios")
    def api_scenarios():
        return jsonify({"scenarios": [s.to_dict() for s in list_scenarios()]})

    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify({"algorithms": [a.card() for a in list_algorithms()]})

    # -----------------------------------------------------------------------
    # API: Config Changes
    # -----------------------------------------------------------------------
    @app.route("/api/config/algo", methods=["POST"])
    def api_config_algo():
        key = (request.get_json(silent=True) or {}).get("algo_key", "")
        algo = get_algorithm(key)
        if algo is None:
            return bad_request(f"Unknown algorithm: {key!r}")
        session["algo"] = algo.key.value
        clear_run()
        return jsonify({
            "algo_key":      algo.key.value,
            "algo_selector": algorithm_selector(list_algorithms(), algo.key.value),
            "pseudocode":    pseudocode_viewer(algo.pseudocode, -1),
            "details":       algorithm_details_panel(algo),
            "ask":           ask_panel(algo),
            "svg":           render_canvas(current_scenario()),
        })

    @app.route("/api/config/scenario", methods=["POST"])
    def api_config_scenario():
        key = (request.get_json(silent=True) or {}).get("scenario_key", "")
        scenario = get_scenario(key)
        if scenario is None:
            return bad_request(f"Unknown scenario: {key!r}")
        session["scenario"] = scenario.key
        clear_run()
        return jsonify({
            "scenario_key":      scenario.key,
            "scenario_selector": scenario_selector(list_scenarios(), scenario.key),
            "svg":               render_canvas(scenario),
        })

    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        speed = (request.get_json(silent=True) or {}).get("speed", "medium")
        if speed not in SPEED_PRESETS:
            return bad_request(f"Unknown speed: {speed!r}")
        session["speed"] = speed
        return jsonify({"speed": speed, "interval": SPEED_PRESETS[speed]})

    # -----------------------------------------------------------------------
    # API: Run Algorithm
    # -----------------------------------------------------------------------
    @app.route("/api/run", methods=["POST"])
    def api_run():
        scenario = current_scenario()
        algo = current_algo()

        rec = Recorder(max_steps=settings.max_steps)
        rec.start(algo, scenario)
        metrics = rec.run_to_completion()

        save_cursor(0, rec.states[0], total=len(rec.states) - 1)
        payload = view_payload(scenario, algo, rec.states[0], 0)
        payload["step_limit_hit"] = metrics.step_limit_hit
        return jsonify(payload)

    # -----------------------------------------------------------------------
    # API: Step Navigation
    # -----------------------------------------------------------------------
    @app.route("/api/step/next", methods=["POST"])
    def api_step_next():
        state = current_snapshot()
        if state is None:
            return bad_request("Run an algorithm first")
        if state.is_terminal:
            return bad_request("Already at last step")
        idx = session["cursor"]
        if idx >= settings.max_steps:
            return bad_request(str(StepLimitExceeded(settings.max_steps, state)))

        scenario, algo = current_scenario(), current_algo()
        engine = SearchEngine(scenario, algo, state=state)
        state = engine.step()
        save_cursor(idx + 1, state)
        return jsonify(view_payload(scenario, algo, state, idx + 1))

    @app.route("/api/step/prev", methods=["POST"])
    def api_step_prev():
        if current_snapshot() is None:
            return bad_request("Run an algorithm first")
        idx = session["cursor"]
        if idx <= 0:
            return bad_request("Already at first step")

        scenario, algo = current_scenario(), current_algo()
        state = replay(scenario, algo, idx - 1)
        save_cursor(idx - 1, state)
        return jsonify(view_payload(scenario, algo, state, idx - 1))

    @app.route("/api/step/goto", methods=["POST"])
    def api_step_goto():
        if current_snapshot() is None:
            return bad_request("Run an algorithm first")
        idx = (request.get_json(silent=True) or {}).get("index", 0)
        total = session.get("total_steps", 0)
        if not isinstance(idx, int) or isinstance(idx, bool) or not (0 <= idx <= total):
            return bad_request("Invalid step index", total_steps=total)

        scenario, algo = current_scenario(), current_algo()
        state = replay(scenario, algo, idx)
        save_cursor(idx, state)
        return jsonify(view_payload(scenario, algo, state, idx))

    @app.route("/api/step/end", methods=["POST"])
    def api_step_end():
        if current_snapshot() is None:
            return bad_request("Run an algorithm first")
        scenario, algo = current_scenario(), current_algo()
        idx = session.get("total_steps", 0)
        state = replay(scenario, algo, idx)
        save_cursor(idx, state)
        return jsonify(view_payload(scenario, algo, state, idx))

    @app.route("/api/reset", methods=["POST"])
    def api_reset():
        clear_run()
        scenario, algo = current_scenario(), current_algo()
        return jsonify(view_payload(scenario, algo, None, None))

    @app.route("/api/state")
    def api_state():
        state = current_snapshot()
        return jsonify({
            "scenario":    current_scenario().key,
            "algo":        current_algo().key.value,
            "speed":       session.get("speed", settings.speed),
            "cursor":      session.get("cursor"),
            "total_steps": session.get("total_steps", 0),
            "state":       state.to_dict() if state else None,
        })

    # -----------------------------------------------------------------------
    # API: Comparison
    # -----------------------------------------------------------------------
    @app.route("/api/compare")
    def api_compare():
        scenario = current_scenario()
        results = compare_strategies(scenario, max_steps=settings.max_steps)
        return jsonify({
            "scenario": scenario.key,
            "results":  {k: m.to_dict() for k, m in results.items()},
            "html":     comparison_panel(list_algorithms(), results),
        })

    # -----------------------------------------------------------------------
    # API: Explanation service
    # -----------------------------------------------------------------------
    @app.route("/api/explain", methods=["POST"])
    def api_explain():
        data = request.get_json(silent=True) or {}
        topic = (data.get("topic") or "").strip()
        if not topic:
            return bad_request("Ask a question first")
        algo = get_algorithm(data.get("algo_key") or session.get("algo", DEFAULT_ALGO))
        if algo is None:
            return bad_request(f"Unknown algorithm: {data.get('algo_key')!r}")

        client: ExplainClient = app.extensions["explain_client"]
        answer = client.ask(topic, algo, current_scenario())
        return jsonify({"answer": answer, "html": ask_panel(algo, answer)})


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Search Algorithm Lab</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg: #f8fafc;
      --bg-panel: #ffffff;
      --border: #e2e8f0;
      --text-primary: #0f172a;
      --text-secondary: #64748b;
      --accent: #3b82f6;
      --accent-path: #22c55e;
      --accent-frontier: #f59e0b;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
      background: var(--bg);
      color: var(--text-primary);
      display: flex;
      min-height: 100vh;
    }

    #sidebar {
      width: 320px;
      border-right: 1px solid var(--border);
      background: var(--bg-panel);
      padding: 20px 16px;
      overflow-y: auto;
    }

    #main { flex: 1; display: flex; flex-direction: column; padding: 20px; gap: 16px; }
    #canvas-container { background: var(--bg-panel); border: 1px solid var(--border); border-radius: 12px; padding: 12px; }
    #bottom-panel { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }

    .panel { background: var(--bg-panel); border: 1px solid var(--border); border-radius: 12px; padding: 16px; margin-bottom: 16px; }
    .panel h3, #bottom-panel h3 { font-size: 13px; text-transform: uppercase; letter-spacing: 0.5px; margin-bottom: 12px; }
    .panel h4 { font-size: 12px; margin: 12px 0 6px; color: var(--text-secondary); text-transform: uppercase; }

    button { background: var(--accent); color: #fff; border: none; padding: 8px 14px; border-radius: 8px; cursor: pointer; font-weight: 600; }
    button:hover { filter: brightness(1.1); }
    .btn-secondary { background: #e2e8f0; color: var(--text-primary); }
    .algo-btn { background: #f1f5f9; color: var(--text-primary); margin: 2px; }
    .algo-btn.active { background: var(--accent); color: #fff; }
    .button-row { display: flex; gap: 6px; margin-bottom: 10px; }

    select, textarea { width: 100%; padding: 8px; margin: 6px 0; border: 1px solid var(--border); border-radius: 8px; }
    label { display: block; font-size: 12px; color: var(--text-secondary); text-transform: uppercase; }
    .hint, .placeholder { font-size: 12px; color: var(--text-secondary); font-style: italic; }
    .step-info { font-family: monospace; font-size: 13px; margin: 8px 0; }
    .finished-badge { background: var(--accent-path); color: #fff; padding: 2px 8px; border-radius: 6px; font-size: 11px; }

    table { width: 100%; font-size: 13px; border-collapse: collapse; }
    table td, table th { padding: 6px 4px; text-align: left; border-bottom: 1px solid var(--border); }
    .warning { color: #b45309; }

    .code-block { font-family: monospace; font-size: 13px; line-height: 1.6; background: #0f172a; color: #e2e8f0; border-radius: 8px; padding: 12px; }
    .code-line { padding: 2px 8px; border-radius: 4px; white-space: pre; }
    .code-line.highlight { background: rgba(59, 130, 246, 0.35); border-left: 3px solid var(--accent); }
    .explanation-text { line-height: 1.7; font-size: 14px; color: var(--text-secondary); }
    .answer { white-space: pre-wrap; margin-top: 10px; font-size: 13px; line-height: 1.6; }
    .strengths li::marker { content: "✔ "; color: var(--accent-path); }
    .limitations li::marker { content: "✘ "; color: #ef4444; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo-selector">{{ algo_selector|safe }}</div>
    <div id="scenario">{{ scenario_selector|safe }}</div>
    <button id="btn-run">▶ Run</button>
    <div id="playback">{{ playback|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
    <button id="btn-compare" class="btn-secondary">Compare all strategies</button>
  </div>

  <div id="main">
    <div id="canvas-container"><div id="canvas-svg">{{ svg|safe }}</div></div>
    <div id="bottom-panel">
      <div class="panel"><h3>Pseudocode</h3><div id="pseudocode">{{ pseudocode|safe }}</div></div>
      <div class="panel"><h3>Step Explanation</h3><div id="explanation">{{ explanation|safe }}</div></div>
    </div>
    <div id="comparison"></div>
    <div id="details">{{ details|safe }}</div>
    <div id="ask">{{ ask|safe }}</div>
  </div>

  <script>
    const SPEEDS = {{ speeds|tojson }};
    let timer = null;

    async function call(url, data, method = 'POST') {
      const opts = { method, headers: { 'Content-Type': 'application/json' } };
      if (method === 'POST') opts.body = JSON.stringify(data || {});
      const res = await fetch(url, opts);
      return { ok: res.ok, body: await res.json() };
    }

    function setHTML(id, html) { if (html !== undefined) document.getElementById(id).innerHTML = html; }

    function render(v) {
      setHTML('canvas-svg', v.svg);
      setHTML('pseudocode', v.pseudocode);
      setHTML('explanation', v.explanation);
      setHTML('analytics', v.analytics);
      if (v.current_step !== undefined) {
        document.getElementById('current-step').textContent = v.current_step;
        document.getElementById('total-steps').textContent = v.total_steps;
      }
      if (v.is_finished) stop();
    }

    function stop() { if (timer) { clearInterval(timer); timer = null; } }

    async function step(url, data) {
      const r = await call(url, data);
      if (r.ok) render(r.body); else stop();
    }

    function bind() {
      document.querySelectorAll('.algo-btn').forEach(btn => btn.onclick = async () => {
        stop();
        const r = await call('/api/config/algo', { algo_key: btn.dataset.algo });
        if (!r.ok) return;
        setHTML('algo-selector', r.body.algo_selector);
        setHTML('pseudocode', r.body.pseudocode);
        setHTML('details', r.body.details);
        setHTML('ask', r.body.ask);
        setHTML('canvas-svg', r.body.svg);
        bind();
      });
      const sel = document.getElementById('scenario-selector');
      sel.onchange = async () => {
        stop();
        const r = await call('/api/config/scenario', { scenario_key: sel.value });
        if (!r.ok) return;
        setHTML('scenario', r.body.scenario_selector);
        setHTML('canvas-svg', r.body.svg);
        bind();
      };
      const ask = document.getElementById('btn-ask');
      if (ask) ask.onclick = async () => {
        const topic = document.getElementById('ask-topic').value;
        const r = await call('/api/explain', { topic });
        if (r.ok) { setHTML('ask', r.body.html); bind(); }
      };
    }

    document.getElementById('btn-run').onclick = () => { stop(); step('/api/run'); };
    document.getElementById('btn-next').onclick = () => step('/api/step/next');
    document.getElementById('btn-prev').onclick = () => step('/api/step/prev');
    document.getElementById('btn-rewind').onclick = () => step('/api/step/goto', { index: 0 });
    document.getElementById('btn-end').onclick = () => { stop(); step('/api/step/end'); };
    document.getElementById('btn-reset').onclick = () => { stop(); step('/api/reset'); };
    document.getElementById('btn-play').onclick = () => {
      if (timer) { stop(); return; }
      const speed = document.getElementById('speed-selector').value;
      timer = setInterval(() => step('/api/step/next'), (SPEEDS[speed] || 0.8) * 1000);
    };
    document.getElementById('speed-selector').onchange = (e) => call('/api/config/speed', { speed: e.target.value });
    document.getElementById('btn-compare').onclick = async () => {
      const r = await call('/api/compare', null, 'GET');
      if (r.ok) setHTML('comparison', r.body.html);
    };
    bind();
  </script>
</body>
</html>
"""


app = create_app()


if __name__ == "__main__":
    print("=" * 60)
    print("  Search Algorithm Lab")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="127.0.0.1", port=5000)
