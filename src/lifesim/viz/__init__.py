"""
Visualization utilities.

- Cell heatmaps (single generation or a strip of generations)
- Population curves
"""

from lifesim.viz.grid import (
    CMAP_CELLS,
    plot_cells,
    plot_grid,
    plot_generations,
    plot_population,
    save_figure,
)

__all__ = [
    "CMAP_CELLS",
    "plot_cells",
    "plot_grid",
    "plot_generations",
    "plot_population",
    "save_figure",
]
