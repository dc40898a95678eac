"""
lifeloop: Conway's Game of Life with repeated-state halting

A bounded board with a dead border ring advances generation by generation
and stops as soon as its fingerprint matches one held in a fixed-size
lookback window.
"""

from .config import SimulationConfig, load_config
from .core import Board, BoardState, Cell, FNV1Hasher, RingBuffer
from .exceptions import (
    ConfigurationError, LifeLoopError, SimulationHaltedError, TouchCountUnderflowError,
)
from .simulation import SimulationResult, run_simulation

__version__ = "0.1.0"

__all__ = [
    'Board',
    'BoardState',
    'Cell',
    'FNV1Hasher',
    'RingBuffer',
    'SimulationConfig',
    'SimulationResult',
    'load_config',
    'run_simulation',
    'ConfigurationError',
    'LifeLoopError',
    'SimulationHaltedError',
    'TouchCountUnderflowError',
]
