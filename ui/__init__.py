"""
ui/
---
Presentation layer.

    from ui import render_bars, render_grid
    from ui import algorithm_selector, mode_selector, log_panel, …
"""

from ui.canvas import render_bars, render_grid, cell_color, CanvasConfig

from ui.controls import (
    algorithm_selector,
    speed_selector,
    mode_selector,
    status_line,
    log_panel,
    analytics_panel,
    pseudocode_viewer,
)

__all__ = [
    "render_bars",
    "render_grid",
    "cell_color",
    "CanvasConfig",
    "algorithm_selector",
    "speed_selector",
    "mode_selector",
    "status_line",
    "log_panel",
    "analytics_panel",
    "pseudocode_viewer",
]
