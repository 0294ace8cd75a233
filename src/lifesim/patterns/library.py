"""
Pattern library: well-known Life configurations used as seeds.

Patterns are plain data. They never touch a Grid directly; place_pattern()
turns one into a seed array that the Grid constructor accepts.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Pattern:
    """A named configuration of live cells."""

    name: str
    cells: np.ndarray  # 2D boolean array, row-major
    period: int = 1  # Generations until the shape repeats (1 = still life)
    displacement: tuple[int, int] = (0, 0)  # (drow, dcol) moved per period

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols) of the pattern's bounding box."""
        return self.cells.shape

    @property
    def population(self) -> int:
        return int(np.count_nonzero(self.cells))

    def live_cells(self, row: int = 0, col: int = 0) -> set[tuple[int, int]]:
        """Coordinates of live cells, offset by (row, col)."""
        rr, cc = np.nonzero(self.cells)
        return {(int(r) + row, int(c) + col) for r, c in zip(rr, cc)}


def _pattern(name: str, rows: list[str], **kwargs) -> Pattern:
    """Build a pattern from rows of '#' (alive) and '.' (dead)."""
    cells = np.array([[ch == "#" for ch in line] for line in rows], dtype=bool)
    cells.setflags(write=False)
    return Pattern(name=name, cells=cells, **kwargs)


# Still lifes
BLOCK = _pattern("block", ["##", "##"])
BEEHIVE = _pattern("beehive", [".##.", "#..#", ".##."])

# Oscillators
BLINKER = _pattern("blinker", ["###"], period=2)
TOAD = _pattern("toad", [".###", "###."], period=2)

# Spaceships: the glider moves one cell down and right every 4 generations
GLIDER = _pattern("glider", [".#.", "..#", "###"], period=4, displacement=(1, 1))

_LIBRARY = {p.name: p for p in (BLOCK, BEEHIVE, BLINKER, TOAD, GLIDER)}


def list_patterns() -> list[str]:
    """Names of all library patterns."""
    return sorted(_LIBRARY)


def get_pattern(name: str) -> Pattern:
    """Look up a library pattern by name."""
    try:
        return _LIBRARY[name]
    except KeyError:
        raise KeyError(
            f"Unknown pattern {name!r}; available: {', '.join(list_patterns())}"
        ) from None


def place_pattern(
    pattern: Pattern,
    rows: int,
    cols: int,
    row: int = 0,
    col: int = 0,
) -> np.ndarray:
    """
    Stamp a pattern onto an otherwise empty (rows, cols) seed array.

    The pattern's top-left corner lands at (row, col); cells past the edge
    wrap around, consistent with the engine's torus.

    Args:
        pattern: Pattern to place
        rows, cols: Target grid dimensions
        row, col: Offset of the pattern's top-left corner

    Returns:
        Boolean array of shape (rows, cols), usable as a Grid seed
    """
    p_rows, p_cols = pattern.shape
    if p_rows > rows or p_cols > cols:
        raise ValueError(
            f"Pattern {pattern.name!r} ({p_rows}x{p_cols}) does not fit "
            f"in a {rows}x{cols} grid"
        )

    seed = np.zeros((rows, cols), dtype=bool)
    for r, c in pattern.live_cells(row, col):
        seed[r % rows, c % cols] = True
    return seed
