"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • algorithm_selector  – dropdown of one kind of algorithm + run button
  • speed_selector      – named delay presets
  • mode_selector       – grid edit mode (start / end / barrier / none)
  • status_line         – current status text
  • log_panel           – newest-first run log
  • analytics_panel     – steps, comparisons, swaps, nodes visited, …
  • pseudocode_viewer   – with live line highlighting

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import List, Optional, Sequence

from algorithms import AlgoInfo
from cells.grid import GridMode
from engine.recorder import RunMetrics
from engine.stepper import SPEED_PRESETS


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "",
    element_id: str = "algo-selector",
) -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(
            f'<option value="{algo.key}" {sel} title="{escape(_algo_summary(algo))}">'
            f'{algo.label} — {algo.complexity_time}</option>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <select id="{element_id}">
        {''.join(options)}
      </select>
      <button id="{element_id}-run" class="btn-primary">▶ Run</button>
    </div>
    """


def _algo_summary(algo: AlgoInfo) -> str:
    notes = [algo.description, f"space {algo.complexity_space}"]
    if algo.stable:
        notes.append("stable")
    if algo.shortest_path:
        notes.append("shortest path")
    return " · ".join(n for n in notes if n)


# ---------------------------------------------------------------------------
# Speed Selector
# ---------------------------------------------------------------------------
def speed_selector(selected_ms: int, element_id: str = "speed-selector") -> str:
    options = []
    for name, ms in SPEED_PRESETS.items():
        sel = 'selected' if ms == selected_ms else ''
        options.append(f'<option value="{ms}" {sel}>{name.capitalize()} ({ms} ms)</option>')
    return f"""
    <label>Speed:
      <select id="{element_id}">{''.join(options)}</select>
    </label>
    """


# ---------------------------------------------------------------------------
# Grid Mode Selector
# ---------------------------------------------------------------------------
_MODE_LABELS = {
    GridMode.SET_START:    "Set Start",
    GridMode.SET_END:      "Set End",
    GridMode.DRAW_BARRIER: "Draw Barrier",
    GridMode.NONE:         "None",
}


def mode_selector(active: GridMode = GridMode.NONE) -> str:
    buttons = []
    for mode, label in _MODE_LABELS.items():
        cls = 'active' if mode is active else ''
        buttons.append(f'<button class="mode-btn {cls}" data-mode="{mode.value}">{label}</button>')
    return f"""
    <div class="panel mode-selector">
      {''.join(buttons)}
      <button id="btn-clear-grid" class="btn-secondary">Clear</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Status & Log
# ---------------------------------------------------------------------------
def status_line(status: str = "") -> str:
    return f'<div class="status-line">{escape(status)}</div>'


def log_panel(log: Sequence[str], limit: int = 200) -> str:
    """`log` is newest-first; it is rendered in that order."""
    if not log:
        return '<div class="log-panel"><p class="placeholder">No log yet.</p></div>'
    items = ''.join(f'<li>{escape(line)}</li>' for line in log[:limit])
    more = f'<li class="more">… +{len(log) - limit} older</li>' if len(log) > limit else ''
    return f'<div class="log-panel"><ol>{items}{more}</ol></div>'


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    rows = [
        ("Total Steps", metrics.total_steps),
        ("Log Lines",   metrics.log_lines),
    ]
    if metrics.comparisons or metrics.swaps:
        rows += [("Comparisons", metrics.comparisons), ("Swaps", metrics.swaps)]
    if metrics.nodes_visited:
        path = f"{metrics.path_length} moves" if metrics.path_found else "Not found"
        rows += [("Cells Visited", metrics.nodes_visited), ("Path", path)]
    rows.append(("Wall Time", f"{metrics.wall_time_ms:.2f} ms"))

    body = ''.join(f'<tr><td>{k}:</td><td><strong>{v}</strong></td></tr>' for k, v in rows)
    return f"""
    <div class="panel analytics-panel">
      <h3>{escape(metrics.algo_label)}</h3>
      <table>{body}</table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], current_line: int = -1) -> str:
    if not pseudocode_lines:
        return '<div class="code-block"></div>'

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """
