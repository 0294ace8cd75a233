"""
Seed functions: pluggable initial-state rules for Grid construction.

A seed is a callable (index) -> bool evaluated once per row-major index.
The engine never draws random numbers itself; randomness enters only here,
through an explicit numpy Generator.
"""

from __future__ import annotations
from typing import Iterable, Sequence

import numpy as np

from lifesim.core.grid import SeedFn


def all_dead() -> SeedFn:
    """Seed producing an empty grid."""
    return lambda index: False


def random_seed(
    density: float = 0.5,
    rng: np.random.Generator | None = None,
) -> SeedFn:
    """
    Seed where each cell is alive independently with probability `density`.

    Args:
        density: Probability a cell starts alive (default: fair coin)
        rng: Random generator (fresh default_rng() if None)

    Returns:
        Seed callable drawing one sample per index
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0, 1], got {density}")
    if rng is None:
        rng = np.random.default_rng()

    def seed(index: int) -> bool:
        return bool(rng.random() < density)

    return seed


def from_sequence(values: Sequence[bool]) -> SeedFn:
    """Seed that reads cell `index` from a flat row-major sequence."""
    values = list(values)
    return lambda index: bool(values[index])


def from_live_cells(
    live: Iterable[tuple[int, int]],
    cols: int,
    rows: int | None = None,
) -> SeedFn:
    """
    Seed that is alive exactly at the given (row, col) coordinates.

    Coordinates wrap toroidally, like Grid.is_alive: the column always,
    the row too when the grid height is given.

    Args:
        live: Coordinates of live cells
        cols: Grid width, needed to decode row-major indices
        rows: Grid height (rows are not wrapped if None)
    """
    alive = set()
    for row, col in live:
        if rows is not None:
            row %= rows
        alive.add(row * cols + col % cols)
    return lambda index: index in alive
