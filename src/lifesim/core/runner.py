"""
Runner: drives a Grid over many generations, the way a host loop would.

The runner only uses the engine's public interfaces (advance + reads)
and collects statistics along the way. It adds no rules of its own.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from lifesim.core.grid import Grid


@dataclass
class RunnerConfig:
    """Configuration for the generation runner."""

    record_history: bool = False  # Keep a 2D snapshot of every generation
    stop_on_extinction: bool = False  # Halt once every cell is dead
    stop_on_cycle: bool = False  # Halt once a repeated state is seen


@dataclass(eq=False)
class LifeRunner:
    """
    Steps a grid and records population statistics.

    Cycle detection keys each generation by its raw bytes, so it finds
    exact repeats (still lifes, oscillators) but not translations.
    """

    grid: "Grid"
    config: RunnerConfig = field(default_factory=RunnerConfig)

    population_history: list[int] = field(default_factory=list, init=False)
    history: list[np.ndarray] = field(default_factory=list, init=False)
    cycle_period: int | None = field(default=None, init=False)

    # generation at which each state was first seen
    _seen: dict[bytes, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        """Record the initial generation."""
        self._observe()

    def run(self, n_generations: int) -> dict:
        """
        Advance up to n generations.

        Args:
            n_generations: Maximum number of generations to run

        Returns:
            Statistics dictionary
        """
        if n_generations < 0:
            raise ValueError(f"n_generations must be >= 0, got {n_generations}")

        generations_run = 0
        for _ in range(n_generations):
            if self._should_stop():
                break
            self.grid.advance()
            generations_run += 1
            self._observe()

        return {
            "n_generations": n_generations,
            "generations_run": generations_run,
            "generation": self.grid.generation,
            "population": self.grid.population(),
            "min_population": min(self.population_history),
            "max_population": max(self.population_history),
            "extinct": self.grid.population() == 0,
            "cycle_period": self.cycle_period,
        }

    def _observe(self):
        """Record statistics for the grid's current generation."""
        cells = self.grid.to_array()
        self.population_history.append(int(cells.sum()))

        if self.config.record_history:
            self.history.append(cells)

        if self.cycle_period is not None:
            return
        key = cells.tobytes()
        if key in self._seen:
            self.cycle_period = self.grid.generation - self._seen[key]
            self._seen.clear()
        else:
            self._seen[key] = self.grid.generation

    def _should_stop(self) -> bool:
        if self.config.stop_on_extinction and self.population_history[-1] == 0:
            return True
        if self.config.stop_on_cycle and self.cycle_period is not None:
            return True
        return False
