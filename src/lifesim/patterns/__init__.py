"""
Patterns: well-known configurations used to seed the engine.

- Still lifes: BLOCK, BEEHIVE
- Oscillators: BLINKER, TOAD
- Spaceships: GLIDER
"""

from lifesim.patterns.library import (
    Pattern,
    BLOCK,
    BEEHIVE,
    BLINKER,
    TOAD,
    GLIDER,
    get_pattern,
    list_patterns,
    place_pattern,
)

__all__ = [
    "Pattern",
    "BLOCK",
    "BEEHIVE",
    "BLINKER",
    "TOAD",
    "GLIDER",
    "get_pattern",
    "list_patterns",
    "place_pattern",
]
