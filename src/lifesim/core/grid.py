"""
Grid: the toroidal cell matrix that forms the Life engine.

The grid stores ONLY the engine primitive:
- A dense row-major boolean buffer of shape (rows, cols)

Opposite edges are adjacent (periodic boundary), so every cell has exactly
8 Moore neighbours, even on degenerate 1×1 or 1×N grids where some of
those neighbours are the same physical cell.

Seeding is injected at construction time; the engine itself is fully
deterministic.
"""

from __future__ import annotations
import operator
from typing import Callable, Iterator, Sequence, Union

import numpy as np


# Neighbour offsets (drow, dcol) for the full Moore neighbourhood
MOORE_OFFSETS = (
    (-1, -1),  # NW
    (-1, 0),   # N
    (-1, 1),   # NE
    (0, 1),    # E
    (1, 1),    # SE
    (1, 0),    # S
    (1, -1),   # SW
    (0, -1),   # W
)

SeedFn = Callable[[int], bool]
Seed = Union[SeedFn, Sequence[bool], np.ndarray, None]


class InvalidDimensions(ValueError):
    """Raised when a grid is constructed with a zero-area shape."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Grid dimensions must be positive integers, got rows={rows}, cols={cols}"
        )


def _validate_dimensions(rows: int, cols: int) -> tuple[int, int]:
    try:
        n_rows, n_cols = operator.index(rows), operator.index(cols)
    except TypeError:
        raise InvalidDimensions(rows, cols) from None
    if n_rows <= 0 or n_cols <= 0:
        raise InvalidDimensions(rows, cols)
    return n_rows, n_cols


def _build_cells(rows: int, cols: int, seed: Seed) -> np.ndarray:
    """Evaluate a seed into a fresh (rows, cols) boolean buffer."""
    n_cells = rows * cols

    if seed is None:
        return np.zeros((rows, cols), dtype=bool)

    if callable(seed):
        flat = np.fromiter(
            (bool(seed(i)) for i in range(n_cells)),
            dtype=bool,
            count=n_cells,
        )
        return flat.reshape(rows, cols)

    values = np.array(seed, dtype=bool)
    if values.shape == (rows, cols):
        return values
    if values.ndim == 1 and values.size == n_cells:
        return values.reshape(rows, cols)

    raise ValueError(
        f"Seed of shape {values.shape} does not match grid {rows}x{cols}"
    )


class Grid:
    """
    A Game of Life generation on a torus.

    IMPORTANT: the cell buffer is owned exclusively by the grid.
    Reads return copies; only advance() replaces the buffer.
    """

    def __init__(self, rows: int, cols: int, seed: Seed = None):
        """
        Create a grid.

        Args:
            rows, cols: Grid dimensions (both >= 1)
            seed: Initial state. Either a callable (index) -> bool evaluated
                  once per row-major index, a flat sequence of rows*cols
                  values, a (rows, cols) array, or None for all dead.

        Raises:
            InvalidDimensions: if rows or cols is zero or not an integer
        """
        self._rows, self._cols = _validate_dimensions(rows, cols)
        self._cells = _build_cells(self._rows, self._cols, seed)

        # Number of completed advance() calls
        self.generation = 0

    @classmethod
    def from_array(cls, array: np.ndarray | Sequence[Sequence[bool]]) -> Grid:
        """Create a grid whose dimensions and cells come from a 2D array."""
        values = np.array(array, dtype=bool)
        if values.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {values.ndim}D")
        rows, cols = values.shape
        return cls(rows, cols, values)

    # ═══════════════════════════════════════════════════════════════
    # READ INTERFACE
    # ═══════════════════════════════════════════════════════════════

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """Return (rows, cols) grid dimensions."""
        return self._rows, self._cols

    def dimensions(self) -> tuple[int, int]:
        """Return (rows, cols) grid dimensions."""
        return self.shape

    def index(self, row: int, col: int) -> int:
        """Row-major index of (row, col)."""
        return row * self._cols + col

    def row_col(self, index: int) -> tuple[int, int]:
        """Decode a row-major index into (row, col)."""
        return divmod(index, self._cols)

    def is_alive(self, row: int, col: int) -> bool:
        """Whether the cell at (row, col) is alive. Coordinates wrap."""
        return bool(self._cells[row % self._rows, col % self._cols])

    def cells(self) -> list[bool]:
        """Bulk read of every cell, flat and row-major."""
        return self._cells.ravel().tolist()

    def to_array(self) -> np.ndarray:
        """Copy of the cell buffer as a (rows, cols) boolean array."""
        return self._cells.copy()

    def population(self) -> int:
        """Number of live cells."""
        return int(np.count_nonzero(self._cells))

    def iter_cells(self) -> Iterator[tuple[int, int]]:
        """Iterate over all (row, col) coordinates in row-major order."""
        for row in range(self._rows):
            for col in range(self._cols):
                yield row, col

    # ═══════════════════════════════════════════════════════════════
    # NEIGHBOURHOOD
    # ═══════════════════════════════════════════════════════════════

    def neighbor_coords(self, row: int, col: int) -> list[tuple[int, int]]:
        """
        The 8 toroidally-wrapped Moore neighbours of (row, col).

        Returned in MOORE_OFFSETS order. On small grids the same physical
        cell can appear more than once; that is the torus, not a bug.
        """
        rows, cols = self._rows, self._cols
        return [
            ((row + dr) % rows, (col + dc) % cols)
            for dr, dc in MOORE_OFFSETS
        ]

    def live_neighbor_count(self, row: int, col: int) -> int:
        """Count live neighbours of a single cell in the current generation."""
        return sum(
            1 for r, c in self.neighbor_coords(row, col) if self._cells[r, c]
        )

    def neighbor_counts(self) -> np.ndarray:
        """
        Live-neighbour count for every cell at once.

        Each Moore offset is applied as a periodic shift of the whole
        buffer, so the result matches live_neighbor_count() cell by cell.
        """
        source = self._cells.astype(np.uint8)
        counts = np.zeros(self.shape, dtype=np.uint8)
        for dr, dc in MOORE_OFFSETS:
            # np.roll moves a[i] to i + shift; we want a[i + d] at i
            counts += np.roll(source, (-dr, -dc), axis=(0, 1))
        return counts

    # ═══════════════════════════════════════════════════════════════
    # STATE TRANSITION
    # ═══════════════════════════════════════════════════════════════

    def advance(self) -> Grid:
        """
        Advance the grid by exactly one generation.

        Rules, applied against the pre-step snapshot:
        - dead with exactly 3 live neighbours → alive
        - alive with fewer than 2 or more than 3 → dead
        - everything else unchanged

        The next generation is built in a new buffer and swapped in only
        once complete.

        Returns:
            self, for chaining
        """
        current = self._cells
        counts = self.neighbor_counts()

        born = ~current & (counts == 3)
        survives = current & ((counts == 2) | (counts == 3))

        self._cells = born | survives
        self.generation += 1
        return self

    def step(self, n: int = 1) -> Grid:
        """Advance n generations."""
        if n < 0:
            raise ValueError(f"Cannot step a negative number of generations: {n}")
        for _ in range(n):
            self.advance()
        return self

    # ═══════════════════════════════════════════════════════════════

    def copy(self) -> Grid:
        """Create an independent copy of this grid (generation included)."""
        result = Grid(self._rows, self._cols, self._cells)
        result.generation = self.generation
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._cells, other._cells)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Grid(rows={self._rows}, cols={self._cols}, "
            f"generation={self.generation}, population={self.population()})"
        )
