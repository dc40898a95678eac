"""Bordered Game of Life board with built-in cycle detection.

The board owns a (W+2) x (H+2) grid of cells. The extra ring of border cells
is always dead, so neighbour access from any interior cell never needs a
bounds check. Each generation runs in two phases:

1. Touch phase: every live interior cell touches its 3x3 neighbourhood and
   then retracts the touch on itself.
2. Commit phase: the fingerprint of the current board is recorded in history,
   then every interior cell settles its next state from its touch count.

After a generation the new fingerprint is looked up in history. A hit means
the board has returned to a state seen within the lookback window and the
board halts.
"""

import logging
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from ..exceptions import ConfigurationError, SimulationHaltedError
from .cell import Cell
from .fingerprint import FNV1Hasher, default_hasher
from .history import RingBuffer

logger = logging.getLogger(__name__)

LIVE_GLYPH = "*"
DEAD_GLYPH = " "


class BoardState(Enum):
    """High-level board lifecycle."""
    RUNNING = "running"
    HALTED = "halted"


class Board:
    """Game of Life board with a dead border and bounded state history.

    Attributes:
        width: Interior width in cells
        height: Interior height in cells
        cells: Row-major bordered grid, cells[y][x] with x in 0..W+1
        history: Ring buffer of past fingerprints
        generation: Generations advanced since construction
        state: RUNNING until a repeated state is seen, then HALTED
    """

    def __init__(self, width: int, height: int, history_capacity: int = 100,
                 hasher: Optional[FNV1Hasher] = None):
        """Initialize an all-dead board.

        Args:
            width: Interior width (cells)
            height: Interior height (cells)
            history_capacity: Number of past fingerprints kept for cycle detection
            hasher: Fingerprint function (defaults to the 64-bit FNV-1 hasher)

        Raises:
            ConfigurationError: If dimensions or capacity are not positive
        """
        if width < 1 or height < 1:
            raise ConfigurationError("size", f"board dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [[Cell() for _ in range(width + 2)] for _ in range(height + 2)]
        self.history: RingBuffer[int] = RingBuffer(history_capacity)
        self.hasher = hasher if hasher is not None else default_hasher
        self.generation = 0
        self.state = BoardState.RUNNING

        logger.debug(f"Created board {width}x{height} with history capacity {history_capacity}")

    @property
    def size(self) -> Tuple[int, int]:
        """Interior (width, height)."""
        return (self.width, self.height)

    @property
    def is_halted(self) -> bool:
        return self.state is BoardState.HALTED

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} board")

    def get(self, x: int, y: int) -> bool:
        """Get interior cell state at 0-based coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        return self.cells[y + 1][x + 1].is_alive()

    def seed(self, points: Iterable[Tuple[int, int]]) -> None:
        """Mark interior cells alive.

        Args:
            points: 0-based interior (x, y) coordinates

        Raises:
            IndexError: If any coordinate is out of bounds
        """
        points = list(points)
        # Nothing is marked until every point is known to fit
        for x, y in points:
            self._check_bounds(x, y)

        for x, y in points:
            self.cells[y + 1][x + 1].set_alive(True)

        logger.debug(f"Seeded {len(points)} live cells")

    def seed_pattern(self, pattern: np.ndarray, x: int, y: int) -> None:
        """Load a boolean pattern with its top-left corner at interior (x, y).

        Args:
            pattern: 2D boolean array representing the pattern
            x: Top-left x-coordinate for placement
            y: Top-left y-coordinate for placement

        Raises:
            IndexError: If a live pattern cell falls outside the interior
        """
        rows, cols = np.nonzero(pattern)
        self.seed((x + int(col), y + int(row)) for row, col in zip(rows, cols))

    def touch_neighbors(self) -> None:
        """Touch phase: count live neighbours into every cell's touch counter."""
        cells = self.cells
        for y in range(1, self.height + 1):
            for x in range(1, self.width + 1):
                if cells[y][x].is_alive():
                    for ny in range(y - 1, y + 2):
                        row = cells[ny]
                        for nx in range(x - 1, x + 2):
                            row[nx].touch()
                    # A cell is not its own neighbour
                    cells[y][x].untouch(x - 1, y - 1)

    def commit_and_record(self) -> None:
        """Commit phase: record the pre-commit fingerprint, then settle every cell."""
        self.history.enqueue(self.fingerprint())

        last_row = self.height + 1
        last_col = self.width + 1
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                if y == 0 or y == last_row or x == 0 or x == last_col:
                    cell.clear()
                else:
                    cell.commit()

    def advance_generation(self) -> BoardState:
        """Advance one generation and update the halt state.

        Returns:
            The board state after this generation

        Raises:
            SimulationHaltedError: If the board has already halted
        """
        if self.is_halted:
            raise SimulationHaltedError(self.generation)

        self.touch_neighbors()
        self.commit_and_record()
        self.generation += 1

        if self.is_repeat_of_history():
            self.state = BoardState.HALTED
            logger.info(f"Repeated state detected at generation {self.generation}; board halted")
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Generation {self.generation}: {self.live_count()} live cells")

        return self.state

    def fingerprint(self) -> int:
        """Digest of the current interior liveness."""
        return self.hasher.hash(self.cells)

    def is_repeat_of_history(self) -> bool:
        """Check whether the current state's fingerprint is already in history."""
        return self.history.contains(self.fingerprint())

    def render(self) -> Iterator[str]:
        """Yield one bracketed text row per grid line, border included."""
        for row in self.cells:
            yield "[" + "".join(LIVE_GLYPH if cell.alive else DEAD_GLYPH for cell in row) + "]"

    def live_count(self) -> int:
        """Count live interior cells."""
        return int(np.sum(self.to_array()))

    def to_array(self) -> np.ndarray:
        """Get the interior liveness as a (height, width) boolean array."""
        return np.array(
            [[cell.alive for cell in row[1:-1]] for row in self.cells[1:-1]],
            dtype=bool,
        )

    def touch_counts(self) -> np.ndarray:
        """Get every cell's pending touch count, border included."""
        return np.array([[cell.touch_count for cell in row] for row in self.cells], dtype=np.int64)

    def border_is_clear(self) -> bool:
        """Check that every border cell is dead with no pending touches."""
        border = [self.cells[0], self.cells[-1]]
        border.append([row[0] for row in self.cells[1:-1]])
        border.append([row[-1] for row in self.cells[1:-1]])
        return all(not cell.alive and cell.touch_count == 0 for line in border for cell in line)

    def __str__(self) -> str:
        """Rendered board, one row per line."""
        return "\n".join(self.render())

    def __repr__(self) -> str:
        return (f"Board({self.width}x{self.height}, generation={self.generation}, "
                f"alive={self.live_count()}, state={self.state.value})")
