"""Simulation driver: advances a board until it halts and prints every generation."""

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from .config import SimulationConfig
from .core.board import Board

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 38


@dataclass
class SimulationResult:
    """Outcome of a simulation run."""
    generations: int        # Generations advanced
    halted: bool            # True if a repeated state stopped the run
    final_fingerprint: int  # Digest of the last board printed
    live_cells: int         # Live cells on the last board printed


def build_board(config: SimulationConfig) -> Board:
    """Create a board from config and seed it."""
    config.validate()
    board = Board(config.width, config.height, config.history_capacity)
    board.seed(config.resolved_seed())
    return board


def print_board(board: Board, out: TextIO) -> None:
    """Write the rendered board followed by the separator line."""
    for row in board.render():
        print(row, file=out)
    print(SEPARATOR, file=out)


def run_simulation(board: Board, out: Optional[TextIO] = None,
                   max_generations: Optional[int] = None) -> SimulationResult:
    """Print the board, then advance and print it until it halts.

    Args:
        board: Seeded board in the RUNNING state
        out: Text stream for the rendered generations (defaults to stdout)
        max_generations: Optional cap; None runs until a repeated state is found

    Returns:
        SimulationResult describing where the run stopped
    """
    if out is None:
        out = sys.stdout

    logger.info(f"Starting simulation on {board.width}x{board.height} board, "
                f"{board.live_count()} live cells, lookback {board.history.capacity}")

    print_board(board, out)

    while not board.is_halted:
        if max_generations is not None and board.generation >= max_generations:
            logger.warning(f"Stopped after {board.generation} generations without detecting a repeat")
            break

        board.advance_generation()
        print_board(board, out)

    result = SimulationResult(
        generations=board.generation,
        halted=board.is_halted,
        final_fingerprint=board.fingerprint(),
        live_cells=board.live_count(),
    )

    if result.halted:
        logger.info(f"Halted at generation {result.generations} with {result.live_cells} live cells")

    return result


def run_from_config(config: SimulationConfig, out: Optional[TextIO] = None) -> SimulationResult:
    """Build, seed and run a board described by config."""
    board = build_board(config)
    return run_simulation(board, out=out, max_generations=config.max_generations)
