"""
Core automaton engine: cells, fingerprinting, bounded history and the board.
"""

from .board import Board, BoardState
from .cell import Cell, next_state
from .fingerprint import FNV1Hasher, default_hasher
from .history import RingBuffer

__all__ = [
    'Board',
    'BoardState',
    'Cell',
    'next_state',
    'FNV1Hasher',
    'default_hasher',
    'RingBuffer',
]
