"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_canvas, CanvasConfig, node_roles, frontier_entries

from ui.controls import (
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

__all__ = [
    "render_canvas",
    "CanvasConfig",
    "node_roles",
    "frontier_entries",
    "playback_controls",
    "algorithm_selector",
    "scenario_selector",
    "analytics_panel",
    "comparison_panel",
    "pseudocode_viewer",
    "explanation_panel",
    "algorithm_details_panel",
    "ask_panel",
]
