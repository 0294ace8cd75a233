"""
Structural measurements on generations.

IMPORTANT: This is NOT seen by the engine. Everything here works on the
read interface (to_array / population) and derives quantities from it.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    from lifesim.core.grid import Grid


def population_density(grid: "Grid") -> float:
    """Fraction of cells that are alive."""
    rows, cols = grid.dimensions()
    return grid.population() / (rows * cols)


def detect_cycle(states: Sequence[np.ndarray]) -> int | None:
    """
    Find the smallest period p such that states[-1] == states[-1 - p].

    Args:
        states: Generations in order (e.g. LifeRunner.history)

    Returns:
        The period, or None if the last state has not occurred before
    """
    if not states:
        return None
    last = states[-1]
    for period in range(1, len(states)):
        if np.array_equal(states[-1 - period], last):
            return period
    return None


def bounding_box(grid: "Grid") -> tuple[int, int, int, int] | None:
    """
    Extent of live cells as (row_min, col_min, row_max, col_max), inclusive.

    Measured on the unwrapped buffer, so a pattern straddling an edge
    reports the full span. Returns None for an empty grid.
    """
    rr, cc = np.nonzero(grid.to_array())
    if rr.size == 0:
        return None
    return int(rr.min()), int(cc.min()), int(rr.max()), int(cc.max())


def shift_equivalent(a: np.ndarray, b: np.ndarray) -> tuple[int, int] | None:
    """
    Toroidal translation (drow, dcol) that maps a onto b.

    Used to check that spaceships keep their shape while moving.
    Returns (0, 0) when a == b and None when no translation matches.
    """
    if a.shape != b.shape:
        raise ValueError(f"Shapes differ: {a.shape} vs {b.shape}")
    if np.count_nonzero(a) != np.count_nonzero(b):
        return None

    rows, cols = a.shape
    for drow in range(rows):
        for dcol in range(cols):
            if np.array_equal(np.roll(a, (drow, dcol), axis=(0, 1)), b):
                return drow, dcol
    return None
