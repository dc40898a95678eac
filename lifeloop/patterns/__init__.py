"""
Seed patterns for initial board states.
"""

from .seeds import (
    BLINKER, BLOCK, GLIDER, GLIDER_PAIR, PATTERNS,
    get_pattern, glider_pair_seed, pattern_points,
)

__all__ = [
    'BLINKER',
    'BLOCK',
    'GLIDER',
    'GLIDER_PAIR',
    'PATTERNS',
    'get_pattern',
    'glider_pair_seed',
    'pattern_points',
]
