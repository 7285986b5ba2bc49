"""
Visualization utilities.

- Grid snapshots and species densities
- Population trajectories
- Animated graphical renderer
- ANSI text renderer
"""

from watorsim.viz.fields import (
    CMAP_OCEAN,
    plot_world,
    plot_density,
    plot_population,
    plot_trajectory_comparison,
    plot_world_summary,
    save_figure,
)
from watorsim.viz.text import render_text, print_frame, clear_screen

__all__ = [
    "CMAP_OCEAN",
    "plot_world",
    "plot_density",
    "plot_population",
    "plot_trajectory_comparison",
    "plot_world_summary",
    "save_figure",
    "render_text",
    "print_frame",
    "clear_screen",
]
