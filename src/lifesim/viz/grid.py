"""
2D visualization of generations.

Provides:
- Cell heatmaps of a single generation
- Generation strips (several snapshots side by side)
- Population curves over time

Everything here consumes the engine's read interface only.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from lifesim.core.grid import Grid


# Dead cells: warm white (blanc-cassé); live cells: dark purple
CMAP_CELLS = ListedColormap([(0.993, 0.978, 0.925), (0.267, 0.004, 0.329)], name="cells")


def plot_cells(
    cells: np.ndarray,
    title: str = "",
    ax: Axes | None = None,
    gridlines: bool = False,
    figsize: tuple[float, float] = (6, 6),
) -> tuple[Figure, Axes]:
    """
    Plot a 2D boolean cell array.

    Row 0 is drawn at the top, matching (row, col) indexing.

    Args:
        cells: 2D boolean array
        title: Plot title
        ax: Existing axes to plot on (creates new figure if None)
        gridlines: Draw thin lines between cells
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.imshow(
        np.asarray(cells, dtype=np.uint8),
        origin="upper",
        cmap=CMAP_CELLS,
        vmin=0,
        vmax=1,
        interpolation="nearest",
        aspect="equal",
    )

    if gridlines:
        rows, cols = np.shape(cells)
        ax.set_xticks(np.arange(-0.5, cols, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, rows, 1), minor=True)
        ax.grid(which="minor", color="0.8", linewidth=0.5)
        ax.tick_params(which="minor", length=0)

    ax.set_title(title)
    ax.set_xlabel("col")
    ax.set_ylabel("row")

    return fig, ax


def plot_grid(
    grid: "Grid",
    title: str | None = None,
    ax: Axes | None = None,
    **kwargs,
) -> tuple[Figure, Axes]:
    """Plot the current generation of a grid."""
    if title is None:
        title = f"Generation {grid.generation} (population {grid.population()})"
    return plot_cells(grid.to_array(), title=title, ax=ax, **kwargs)


def plot_generations(
    states: Sequence[np.ndarray],
    titles: Sequence[str] | None = None,
    figsize_per_panel: float = 3.0,
) -> Figure:
    """
    Plot several generations side by side.

    Args:
        states: 2D cell arrays, e.g. LifeRunner.history
        titles: Optional panel titles (defaults to "t=<i>")

    Returns:
        Figure with one subplot per state
    """
    n = len(states)
    if n == 0:
        raise ValueError("No generations to plot")
    if titles is None:
        titles = [f"t={i}" for i in range(n)]

    fig, axes = plt.subplots(1, n, figsize=(figsize_per_panel * n, figsize_per_panel))
    axes = np.atleast_1d(axes)

    for ax, state, title in zip(axes, states, titles):
        plot_cells(state, title=title, ax=ax, gridlines=True)

    fig.tight_layout()
    return fig


def plot_population(
    history: Sequence[int],
    title: str = "Population",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 4),
    **plot_kwargs,
) -> tuple[Figure, Axes]:
    """Plot population against generation number."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.plot(np.arange(len(history)), history, **plot_kwargs)
    ax.set_title(title)
    ax.set_xlabel("generation")
    ax.set_ylabel("live cells")
    ax.grid(True, alpha=0.3)

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
