"""Fixed-capacity ring buffer used as the board's lookback window.

Stores the most recent values in insertion order and evicts the oldest once
full. Membership is a linear scan of the backing slots, which is all cycle
detection needs for a window of a few hundred fingerprints.

Capacity bounds how far back a repeat can be recognised: a cycle longer than
the buffer is never detected and the simulation keeps running.
"""

import logging
from typing import Generic, Iterator, List, Optional, TypeVar

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """FIFO ring buffer with O(1) enqueue and O(capacity) membership.

    Unwritten and dequeued slots hold ``fill_value``. The default fill value
    is ``None``, which can never equal an integer fingerprint.
    """

    def __init__(self, capacity: int, fill_value: Optional[T] = None):
        """Initialize an empty buffer.

        Args:
            capacity: Number of slots (must be at least 1)
            fill_value: Marker stored in slots holding no value

        Raises:
            ConfigurationError: If capacity is less than 1
        """
        if capacity < 1:
            raise ConfigurationError("capacity", f"ring buffer capacity must be at least 1, got {capacity}")

        self._capacity = capacity
        self._fill_value = fill_value
        self._slots: List[Optional[T]] = [fill_value] * capacity
        self._write = 0   # next slot to write
        self._read = 0    # oldest valid slot
        self._size = 0    # valid entries, never above capacity

        logger.debug(f"Created ring buffer with capacity {capacity}")

    @property
    def capacity(self) -> int:
        """Maximum number of retained values."""
        return self._capacity

    def enqueue(self, value: T) -> None:
        """Append a value, overwriting the oldest one when full.

        Args:
            value: Value to store
        """
        if self._size < self._capacity:
            self._size += 1
        else:
            # Full: the slot about to be written is the oldest entry
            self._read = (self._read + 1) % self._capacity

        self._slots[self._write] = value
        self._write = (self._write + 1) % self._capacity

    def dequeue(self) -> Optional[T]:
        """Remove and return the oldest value.

        Returns:
            The oldest value, or None if the buffer is empty
        """
        if self._size == 0:
            return None

        value = self._slots[self._read]
        self._slots[self._read] = self._fill_value
        self._read = (self._read + 1) % self._capacity
        self._size -= 1
        return value

    def contains(self, value: T) -> bool:
        """Check whether any slot holds ``value``."""
        return value in self._slots

    def is_full(self) -> bool:
        return self._size == self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Drop every value and reset both cursors."""
        self._slots = [self._fill_value] * self._capacity
        self._write = 0
        self._read = 0
        self._size = 0

    def __contains__(self, value: object) -> bool:
        return value in self._slots

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate valid values from oldest to newest."""
        for offset in range(self._size):
            yield self._slots[(self._read + offset) % self._capacity]

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self._capacity}, size={self._size})"
