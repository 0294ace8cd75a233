"""
lifesim: Conway's Game of Life on a toroidal grid

A small, deterministic engine for the B3/S23 cellular automaton.

Core concepts:
- A grid is a fixed-size row-major array of boolean cells
- Opposite edges touch: every cell has exactly 8 wrapped neighbours
- A dead cell with 3 live neighbours is born
- A live cell with fewer than 2 or more than 3 live neighbours dies
- Each generation is computed entirely from the previous one

Randomness only enters through the seed passed at construction.
"""

__version__ = "0.1.0"
