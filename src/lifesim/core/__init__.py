"""
Core engine primitives.

This layer knows NOTHING about rendering or where randomness comes from.
It only knows:
- A fixed-size toroidal grid of boolean cells
- The 8-cell Moore neighbourhood, wrapped at the edges
- The birth/survival rule (B3/S23) applied to a whole generation at once

Seeds plug in the initial state; the runner drives many generations.
"""

from lifesim.core.grid import Grid, InvalidDimensions, MOORE_OFFSETS
from lifesim.core.seeds import all_dead, random_seed, from_sequence, from_live_cells
from lifesim.core.runner import LifeRunner, RunnerConfig

__all__ = [
    "Grid",
    "InvalidDimensions",
    "MOORE_OFFSETS",
    "all_dead",
    "random_seed",
    "from_sequence",
    "from_live_cells",
    "LifeRunner",
    "RunnerConfig",
]
