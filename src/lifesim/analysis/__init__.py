"""
Analysis layer: derived quantities for inspecting runs.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- population_density: fraction of live cells
- detect_cycle: period of a repeating sequence of generations
- bounding_box: extent of the live region
- shift_equivalent: toroidal translation between two generations
"""

from lifesim.analysis.structure import (
    population_density,
    detect_cycle,
    bounding_box,
    shift_equivalent,
)

__all__ = [
    "population_density",
    "detect_cycle",
    "bounding_box",
    "shift_equivalent",
]
