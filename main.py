"""
main.py — Sorting & Pathfinding Visualizer Flask App
======================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  POST /api/sorting/input      – replace the array ({values} or {text})
  POST /api/sorting/start      – start a sort in the background
  GET  /api/sorting/state      – bars, status, log, svg (for polling)
  POST /api/grid/mode          – set the grid edit mode
  POST /api/grid/tap           – apply the mode to one cell
  POST /api/grid/clear         – reset the grid
  POST /api/grid/run           – start a search in the background
  GET  /api/grid/state         – grid, status, log, svg (for polling)

State management:
  One SortingEngine and one PathfindingEngine live at module level and
  share a single RunController, so only one run executes at a time
  across the whole app.  Runs execute on a worker thread; the page polls
  the state routes while `running` is true.

Configuration:
  Defaults live in app.config and can be overridden from the environment
  with the VISUALIZER_ prefix (VISUALIZER_LOG_LEVEL=DEBUG, …).
"""

import logging
from typing import List, Optional

from flask import Flask, jsonify, render_template_string, request

from algorithms import PATHFINDING, SORTING, get_algorithm, list_algorithms
from cells.bar import values_of
from cells.grid import GridMode
from engine import (
    DEFAULT_PATH_DELAY_MS,
    DEFAULT_SORT_DELAY_MS,
    Outcome,
    PathfindingEngine,
    RunController,
    SortingEngine,
)
from ui import (
    algorithm_selector,
    analytics_panel,
    log_panel,
    mode_selector,
    pseudocode_viewer,
    render_bars,
    render_grid,
    speed_selector,
    status_line,
)


logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_mapping(
    LOG_LEVEL="INFO",
    SORT_DELAY_MS=DEFAULT_SORT_DELAY_MS,
    PATH_DELAY_MS=DEFAULT_PATH_DELAY_MS,
    DEFAULT_INPUT="5,2,9,1,7",
)
app.config.from_prefixed_env("VISUALIZER")

# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def parse_values(text: str) -> List[int]:
    """Comma-separated integers; anything that is not an integer is dropped."""
    values = []
    for part in text.split(","):
        try:
            values.append(int(part.strip()))
        except ValueError:
            continue
    return values


def _delay_from(data: dict, default: int) -> Optional[int]:
    raw = data.get("delay_ms", default)
    try:
        return max(0, int(raw))
    except (TypeError, ValueError):
        return None


def _outcome(outcome: Outcome, **extra):
    return jsonify({"outcome": outcome.value, **extra})


def _metrics_dict(engine) -> dict:
    return engine.last_metrics.to_dict() if engine.last_metrics else {}


def _pseudocode_html(engine) -> str:
    info = engine.current_algo
    step = engine.current_step
    if info is None:
        return pseudocode_viewer([])
    return pseudocode_viewer(info.pseudocode, step.pseudocode_line if step else -1)


def _highlight(engine) -> dict:
    """Cells the latest Step changed, outlined in the grid svg."""
    step = engine.current_step
    return step.delta if step else {}


# ---------------------------------------------------------------------------
# Engines
# ---------------------------------------------------------------------------
controller  = RunController()
sorting     = SortingEngine(controller=controller)
pathfinding = PathfindingEngine(controller=controller)
sorting.set_input(parse_values(str(app.config["DEFAULT_INPUT"])))


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    sort_algos = list_algorithms(SORTING)
    grid_algos = list_algorithms(PATHFINDING)

    html = render_template_string(INDEX_TEMPLATE,
        default_input=app.config["DEFAULT_INPUT"],
        sort_selector=algorithm_selector(sort_algos, selected_key="bubble", element_id="sort-algo"),
        sort_speed=speed_selector(app.config["SORT_DELAY_MS"], element_id="sort-speed"),
        bars_svg=render_bars(sorting.bars),
        sort_status=status_line(sorting.status),
        sort_log=log_panel(sorting.log),
        grid_selector=algorithm_selector(grid_algos, selected_key="bfs", element_id="grid-algo"),
        grid_speed=speed_selector(app.config["PATH_DELAY_MS"], element_id="grid-speed"),
        modes=mode_selector(pathfinding.mode),
        grid_svg=render_grid(pathfinding.grid),
        grid_status=status_line(pathfinding.status),
        grid_log=log_panel(pathfinding.log),
    )
    return html


# ---------------------------------------------------------------------------
# API: Sorting
# ---------------------------------------------------------------------------
@app.route("/api/sorting/input", methods=["POST"])
def api_sorting_input():
    data = request.get_json(silent=True) or {}
    if "values" in data:
        raw = data["values"]
        if not isinstance(raw, list):
            return jsonify({"error": "values must be a list"}), 400
        values = []
        for v in raw:
            try:
                values.append(int(v))
            except (TypeError, ValueError):
                continue
    elif "text" in data:
        values = parse_values(str(data["text"]))
    else:
        return jsonify({"error": "Provide values or text"}), 400

    outcome = sorting.set_input(values)
    return _outcome(outcome, values=values_of(sorting.bars))


@app.route("/api/sorting/start", methods=["POST"])
def api_sorting_start():
    data = request.get_json(silent=True) or {}
    algo = data.get("algo", "bubble")
    info = get_algorithm(algo)
    if info is None or info.kind != SORTING:
        return jsonify({"error": f"Unknown sorting algorithm: {algo}"}), 400
    delay = _delay_from(data, app.config["SORT_DELAY_MS"])
    if delay is None:
        return jsonify({"error": "delay_ms must be an integer"}), 400

    outcome = sorting.start_sort(algo, step_delay_ms=delay, blocking=False)
    return _outcome(outcome, pseudocode=info.pseudocode)


@app.route("/api/sorting/state")
def api_sorting_state():
    return jsonify({
        "bars":     [b.to_dict() for b in sorting.bars],
        "running":  sorting.is_running,
        "status":   sorting.status,
        "log":      list(sorting.log),
        "svg":      render_bars(sorting.bars),
        "log_html": log_panel(sorting.log),
        "analytics": analytics_panel(sorting.last_metrics),
        "pseudocode": _pseudocode_html(sorting),
        "delay_ms": sorting.step_delay_ms,
        "metrics":  _metrics_dict(sorting),
    })


# ---------------------------------------------------------------------------
# API: Pathfinding grid
# ---------------------------------------------------------------------------
@app.route("/api/grid/mode", methods=["POST"])
def api_grid_mode():
    data = request.get_json(silent=True) or {}
    try:
        mode = GridMode(data.get("mode"))
    except ValueError:
        return jsonify({"error": f"Unknown mode: {data.get('mode')}"}), 400
    outcome = pathfinding.set_mode(mode)
    return _outcome(outcome, mode=pathfinding.mode.value)


@app.route("/api/grid/tap", methods=["POST"])
def api_grid_tap():
    data = request.get_json(silent=True) or {}
    try:
        row, col = int(data["row"]), int(data["col"])
    except (KeyError, TypeError, ValueError):
        return jsonify({"error": "row and col must be integers"}), 400
    outcome = pathfinding.on_cell_tapped(row, col)
    return _outcome(outcome, svg=render_grid(pathfinding.grid))


@app.route("/api/grid/clear", methods=["POST"])
def api_grid_clear():
    outcome = pathfinding.clear_grid()
    return _outcome(outcome, svg=render_grid(pathfinding.grid))


@app.route("/api/grid/run", methods=["POST"])
def api_grid_run():
    data = request.get_json(silent=True) or {}
    algo = data.get("algo", "bfs")
    info = get_algorithm(algo)
    if info is None or info.kind != PATHFINDING:
        return jsonify({"error": f"Unknown pathfinding algorithm: {algo}"}), 400
    delay = _delay_from(data, app.config["PATH_DELAY_MS"])
    if delay is None:
        return jsonify({"error": "delay_ms must be an integer"}), 400

    outcome = pathfinding.run_pathfinding(algo, step_delay_ms=delay, blocking=False)
    return _outcome(outcome, status=pathfinding.status, pseudocode=info.pseudocode)


@app.route("/api/grid/state")
def api_grid_state():
    return jsonify({
        "grid":     [[n.to_dict() for n in row] for row in pathfinding.grid],
        "mode":     pathfinding.mode.value,
        "running":  pathfinding.is_running,
        "status":   pathfinding.status,
        "log":      list(pathfinding.log),
        "svg":      render_grid(pathfinding.grid, highlight=_highlight(pathfinding)),
        "log_html": log_panel(pathfinding.log),
        "analytics": analytics_panel(pathfinding.last_metrics),
        "pseudocode": _pseudocode_html(pathfinding),
        "delay_ms": pathfinding.step_delay_ms,
        "metrics":  _metrics_dict(pathfinding),
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting & Pathfinding Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      gap: 24px;
      padding: 24px;
    }

    section {
      flex: 1;
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 16px;
    }

    h2 { margin-bottom: 12px; color: var(--accent-cyan); }
    .panel { display: flex; gap: 8px; margin: 8px 0; flex-wrap: wrap; }
    .mode-btn.active { border-color: var(--accent-cyan); }
    .status-line { margin: 8px 0; color: var(--text-secondary); min-height: 1.2em; }
    .log-panel { max-height: 240px; overflow-y: auto; font-family: monospace; font-size: 12px; }
    .log-panel ol { list-style: none; }
    .placeholder { color: var(--text-secondary); }
    .cell { cursor: pointer; }
    .code-block { font-family: monospace; font-size: 12px; margin-top: 8px; }
    .code-line.highlight { background: #1f6feb44; }

    button, select, input {
      background: var(--bg-dark);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 4px;
      padding: 4px 8px;
    }
  </style>
</head>
<body>
  <section id="sorting">
    <h2>Sorting</h2>
    <div class="panel">
      <input id="sort-input" value="{{ default_input }}">
      <button id="btn-set-input">Set Input</button>
    </div>
    {{ sort_selector|safe }}
    {{ sort_speed|safe }}
    <div id="bars">{{ bars_svg|safe }}</div>
    <div id="sort-status">{{ sort_status|safe }}</div>
    <div id="sort-log">{{ sort_log|safe }}</div>
    <div id="sort-analytics"></div>
    <div id="sort-code"></div>
  </section>

  <section id="pathfinding">
    <h2>Pathfinding</h2>
    {{ modes|safe }}
    {{ grid_selector|safe }}
    {{ grid_speed|safe }}
    <div id="grid">{{ grid_svg|safe }}</div>
    <div id="grid-status">{{ grid_status|safe }}</div>
    <div id="grid-log">{{ grid_log|safe }}</div>
    <div id="grid-analytics"></div>
    <div id="grid-code"></div>
  </section>

  <script>
    const post = (url, body) => fetch(url, {
      method: "POST",
      headers: {"Content-Type": "application/json"},
      body: JSON.stringify(body || {}),
    }).then(r => r.json());

    function poll(kind) {
      fetch(`/api/${kind}/state`).then(r => r.json()).then(s => {
        const prefix = kind === "sorting" ? "sort" : "grid";
        document.getElementById(kind === "sorting" ? "bars" : "grid").innerHTML = s.svg;
        document.getElementById(`${prefix}-status`).textContent = s.status;
        document.getElementById(`${prefix}-log`).innerHTML = s.log_html;
        document.getElementById(`${prefix}-analytics`).innerHTML = s.analytics;
        document.getElementById(`${prefix}-code`).innerHTML = s.pseudocode;
        if (s.running) setTimeout(() => poll(kind), 60);
      });
    }

    document.getElementById("btn-set-input").onclick = () =>
      post("/api/sorting/input", {text: document.getElementById("sort-input").value})
        .then(() => poll("sorting"));

    document.getElementById("sort-algo-run").onclick = () =>
      post("/api/sorting/start", {
        algo: document.getElementById("sort-algo").value,
        delay_ms: document.getElementById("sort-speed").value,
      }).then(() => poll("sorting"));

    document.getElementById("grid-algo-run").onclick = () =>
      post("/api/grid/run", {
        algo: document.getElementById("grid-algo").value,
        delay_ms: document.getElementById("grid-speed").value,
      }).then(() => poll("grid"));

    document.querySelectorAll(".mode-btn").forEach(btn => btn.onclick = () =>
      post("/api/grid/mode", {mode: btn.dataset.mode}).then(() => {
        document.querySelectorAll(".mode-btn").forEach(b => b.classList.remove("active"));
        btn.classList.add("active");
      }));

    document.getElementById("btn-clear-grid").onclick = () =>
      post("/api/grid/clear").then(() => poll("grid"));

    document.getElementById("grid").addEventListener("click", ev => {
      const cell = ev.target.closest(".cell");
      if (!cell) return;
      post("/api/grid/tap", {row: +cell.dataset.row, col: +cell.dataset.col})
        .then(() => poll("grid"));
    });
  </script>
</body>
</html>
"""


if __name__ == "__main__":
    logging.basicConfig(
        level=str(app.config["LOG_LEVEL"]).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "default delays: sorting %s ms, pathfinding %s ms",
        app.config["SORT_DELAY_MS"], app.config["PATH_DELAY_MS"],
    )
    print("=" * 60)
    print("  Sorting & Pathfinding Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000, use_reloader=False)
