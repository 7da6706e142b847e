"""
canvas.py — SVG Renderers
==========================
Pure rendering functions: published snapshot → SVG string.

  • render_bars  – one vertical bar per element, height ∝ value
  • render_grid  – one square per cell, coloured by role then visit state

Design decisions:
  - NO mutation.  These functions are stateless — the caller passes in a
    snapshot and gets back a string.
  - Colouring is a dict lookup: annotation value → hex color.
  - A cell's role wins over its visit state (START / END / BARRIER are
    never painted Visited or Path anyway).
"""

from typing import Dict, Optional, Sequence

from cells.bar import Bar
from cells.node import Node, NodeRole


# ---------------------------------------------------------------------------
# Visual Config: color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 640
    height: int = 320
    bg:     str = "#0d1117"

    # bar colors (BarState value → fill)
    bar_colors: Dict[str, str] = {
        "default":   "#8b949e",   # grey
        "comparing": "#f59e0b",   # amber
        "swapping":  "#ef4444",   # red
        "pivot":     "#a855f7",   # purple
        "sorted":    "#10b981",   # emerald green
    }

    # cell colors (NodeRole / NodeVis value → fill)
    cell_colors: Dict[str, str] = {
        "normal":  "#1c2128",     # dark grey
        "start":   "#3b82f6",     # blue
        "end":     "#ef4444",     # red
        "barrier": "#000000",     # black
        "visited": "#f9a8d4",     # pink
        "path":    "#facc15",     # yellow
    }

    # bars
    bar_gap:          int = 4
    bar_label_color:  str = "#e6edf3"
    bar_label_size:   int = 12

    # grid
    cell_size:        int = 32
    cell_gap:         int = 2
    cell_stroke:      str = "#30363d"
    cell_highlight:   str = "#e6edf3"   # outline of cells the latest Step changed


CONFIG = CanvasConfig()


def _svg_open(width: int, height: int, config: CanvasConfig) -> str:
    return (
        f'<svg width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    )


# ---------------------------------------------------------------------------
# Bars
# ---------------------------------------------------------------------------
def render_bars(bars: Sequence[Bar], config: CanvasConfig = CONFIG) -> str:
    """
    Returns an SVG string.  Heights are scaled to the largest |value| so
    negative inputs still draw (as short bars at the baseline).
    """
    w, h = config.width, config.height
    parts = [_svg_open(w, h, config), f'<rect width="{w}" height="{h}" fill="{config.bg}"/>']

    if bars:
        slot   = w / len(bars)
        bar_w  = max(1.0, slot - config.bar_gap)
        peak   = max(abs(b.value) for b in bars) or 1
        usable = h - 24   # room for the value label

        for i, bar in enumerate(bars):
            bar_h = max(2.0, usable * abs(bar.value) / peak)
            x = i * slot + config.bar_gap / 2
            y = h - bar_h
            fill = config.bar_colors.get(bar.state.value, config.bar_colors["default"])
            parts.append(
                f'<g class="bar" data-index="{i}" data-id="{bar.id}" data-state="{bar.state.value}">'
                f'<rect x="{x:.1f}" y="{y:.1f}" width="{bar_w:.1f}" height="{bar_h:.1f}" fill="{fill}" rx="2"/>'
                f'<text x="{x + bar_w / 2:.1f}" y="{y - 6:.1f}" text-anchor="middle" '
                f'font-size="{config.bar_label_size}" fill="{config.bar_label_color}">{bar.value}</text>'
                f'</g>'
            )

    parts.append("</svg>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------
def cell_color(node: Node, config: CanvasConfig = CONFIG) -> str:
    if node.role is not NodeRole.NORMAL:
        return config.cell_colors[node.role.value]
    return config.cell_colors.get(node.vis.value, config.cell_colors["normal"])


def render_grid(
    grid: Sequence[Sequence[Node]],
    config: CanvasConfig = CONFIG,
    highlight: Optional[Dict] = None,
) -> str:
    """
    Returns an SVG string.

    Args:
        grid      : Published grid snapshot (rows of Nodes).
        config    : Visual config.
        highlight : Optional {(row, col): annotation} delta from the latest
                    Step; those cells get a brighter outline.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    pitch = config.cell_size + config.cell_gap
    w = cols * pitch + config.cell_gap
    h = rows * pitch + config.cell_gap
    highlight = highlight or {}

    parts = [_svg_open(w, h, config), f'<rect width="{w}" height="{h}" fill="{config.bg}"/>']
    for row in grid:
        for node in row:
            x = config.cell_gap + node.col * pitch
            y = config.cell_gap + node.row * pitch
            stroke = config.cell_highlight if (node.row, node.col) in highlight else config.cell_stroke
            parts.append(
                f'<rect class="cell" data-row="{node.row}" data-col="{node.col}" '
                f'data-role="{node.role.value}" data-vis="{node.vis.value}" '
                f'x="{x}" y="{y}" width="{config.cell_size}" height="{config.cell_size}" '
                f'fill="{cell_color(node, config)}" stroke="{stroke}" stroke-width="1"/>'
            )

    parts.append("</svg>")
    return "\n".join(parts)
