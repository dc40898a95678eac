"""
Touch-counting cell for Conway's Game of Life.

Each live cell "touches" every cell in its 3x3 neighbourhood and then
retracts the touch on itself, so a cell's touch count equals its number of
live neighbours. The standard rules then reduce to a single comparison.
"""

from typing import Optional

from ..exceptions import TouchCountUnderflowError


# Standard Conway rules expressed as touch counts
BIRTH_TOUCHES: int = 3     # Any cell with 3 live neighbours is alive next generation
SURVIVAL_TOUCHES: int = 2  # A cell with 2 live neighbours keeps its state


def next_state(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to a (state, neighbour count) pair.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbours (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if live_neighbors == BIRTH_TOUCHES:
        return True
    if live_neighbors == SURVIVAL_TOUCHES:
        return alive
    return False


class Cell:
    """Single grid cell holding its liveness and a transient touch counter.

    Attributes:
        alive: Current state (True=alive, False=dead)
        touch_count: Live neighbours counted during the current touch phase
    """

    __slots__ = ("alive", "touch_count")

    def __init__(self, alive: bool = False):
        self.alive = alive
        self.touch_count = 0

    def touch(self) -> None:
        """Record one live cell in this cell's neighbourhood."""
        self.touch_count += 1

    def untouch(self, x: Optional[int] = None, y: Optional[int] = None) -> None:
        """Retract one touch (the self-touch of a live cell).

        Args:
            x: Optional column, only used in the error message
            y: Optional row, only used in the error message

        Raises:
            TouchCountUnderflowError: If the count is already zero
        """
        if self.touch_count == 0:
            raise TouchCountUnderflowError(x, y)
        self.touch_count -= 1

    def commit(self) -> None:
        """Settle the next state from the touch count and reset the counter."""
        self.alive = next_state(self.alive, self.touch_count)
        self.touch_count = 0

    def clear(self) -> None:
        """Force the cell dead and drop any pending touches."""
        self.alive = False
        self.touch_count = 0

    def is_alive(self) -> bool:
        return self.alive

    def set_alive(self, alive: bool) -> None:
        """Override the state directly (initial seeding only)."""
        self.alive = bool(alive)

    def __repr__(self) -> str:
        return f"Cell(alive={self.alive}, touch_count={self.touch_count})"
