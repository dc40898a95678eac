"""Command-line entry point.

Runs with no arguments: a 25x25 board seeded with the glider pair, a
100-generation lookback window, printing each generation until a repeated
state is found.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import SimulationConfig, load_config
from .exceptions import LifeLoopError
from .simulation import run_from_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lifeloop",
        description="Conway's Game of Life that stops when the board repeats a recent state",
    )
    parser.add_argument("--config", help="YAML file with width, height, history_capacity, max_generations, seed")
    parser.add_argument("--width", type=int, help="Grid interior columns (default 25)")
    parser.add_argument("--height", type=int, help="Grid interior rows (default 25)")
    parser.add_argument("--history-capacity", type=int, help="Number of past states checked for repeats (default 100)")
    parser.add_argument("--max-generations", type=int, help="Stop after this many generations even without a repeat")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level for stderr diagnostics")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Diagnostics go to stderr; stdout carries only the board
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = load_config(args.config) if args.config else SimulationConfig()
        config = config.with_overrides(
            width=args.width,
            height=args.height,
            history_capacity=args.history_capacity,
            max_generations=args.max_generations,
        ).validate()

        result = run_from_config(config)
    except LifeLoopError as e:
        logger.error(f"Simulation failed: {e}")
        return 1

    logger.info(f"Finished after {result.generations} generations (halted={result.halted})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
