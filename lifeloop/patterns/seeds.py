"""Seed pattern definitions for initial board states.

Patterns are small boolean numpy arrays indexed [row, col]. They can be
placed on a board with ``Board.seed_pattern`` or turned into coordinate
sets with ``pattern_points`` for configuration and seeding.
"""

from typing import Dict, FrozenSet, Tuple

import numpy as np

Point = Tuple[int, int]


# Stable 2x2 still life
BLOCK = np.array([
    [True, True],
    [True, True]
], dtype=bool)

# Horizontal period-2 oscillator
BLINKER = np.array([[True, True, True]], dtype=bool)

# Glider travelling down and to the right (south-east)
GLIDER = np.array([
    [False, True, False],
    [False, False, True],
    [True, True, True]
], dtype=bool)

# Two mirrored T-tetrominoes five columns apart; the default CLI seed
GLIDER_PAIR = np.array([
    [False, True, False, False, False, False, True, False],
    [True, True, False, False, False, False, True, True],
    [False, True, False, False, False, False, True, False]
], dtype=bool)

PATTERNS: Dict[str, np.ndarray] = {
    'block': BLOCK,
    'blinker': BLINKER,
    'glider': GLIDER,
    'glider_pair': GLIDER_PAIR,
}


def get_pattern(name: str) -> np.ndarray:
    """Get a copy of a named pattern.

    Args:
        name: One of 'block', 'blinker', 'glider', 'glider_pair'

    Returns:
        2D boolean numpy array

    Raises:
        KeyError: If the pattern name is unknown
    """
    if name not in PATTERNS:
        raise KeyError(f"Unknown pattern '{name}' (available: {', '.join(sorted(PATTERNS))})")
    return PATTERNS[name].copy()


def pattern_points(pattern: np.ndarray, x: int = 0, y: int = 0) -> FrozenSet[Point]:
    """Convert a pattern to the set of live (x, y) coordinates.

    Args:
        pattern: 2D boolean array
        x: Column offset of the pattern's left edge
        y: Row offset of the pattern's top edge

    Returns:
        Frozen set of 0-based interior coordinates
    """
    rows, cols = np.nonzero(pattern)
    return frozenset((x + int(col), y + int(row)) for row, col in zip(rows, cols))


def glider_pair_seed(width: int, height: int) -> FrozenSet[Point]:
    """Default seed: the glider pair anchored at the centre of the board."""
    return pattern_points(GLIDER_PAIR, width // 2, height // 2)
