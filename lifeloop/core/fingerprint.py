"""Board fingerprinting with an FNV-1 style multiply-and-xor hash.

Produces a fixed-width integer digest of a board's interior so past states
can be remembered cheaply. The digest depends only on which interior cells
are alive and where they sit; the dead border is never visited.

Iteration is row-major over bordered coordinates (x, y both starting at 1).
Each step multiplies the running digest by the FNV prime, truncates to the
hash width, and xors in ``(2x) * (2y)`` for a live cell or ``0`` for a dead one.
"""

import logging
from typing import Sequence

import numpy as np

from ..exceptions import ConfigurationError
from .cell import Cell

logger = logging.getLogger(__name__)


class FNV1Hasher:
    """Deterministic FNV-1 style hasher over board interiors.

    Attributes:
        bits: Digest width (32 or 64)
        offset_basis: Initial digest value
        prime: Multiplier applied before each cell is mixed in
        mask: Truncation mask for the digest width
    """

    OFFSET_BASIS_32 = 2166136261
    OFFSET_BASIS_64 = 14695981039346656037
    FNV_PRIME_32 = 16777619
    FNV_PRIME_64 = 1099511628211

    def __init__(self, bits: int = 64):
        """Initialize the hasher.

        Args:
            bits: Digest width, 32 or 64

        Raises:
            ConfigurationError: If bits is not a supported width
        """
        if bits == 64:
            self.offset_basis = self.OFFSET_BASIS_64
            self.prime = self.FNV_PRIME_64
        elif bits == 32:
            self.offset_basis = self.OFFSET_BASIS_32
            self.prime = self.FNV_PRIME_32
        else:
            raise ConfigurationError("bits", f"unsupported hash width {bits} (expected 32 or 64)")

        self.bits = bits
        self.mask = (1 << bits) - 1

    def _mix(self, digest: int, x: int, y: int, alive: bool) -> int:
        """Fold one cell at bordered coordinates (x, y) into the digest."""
        term = ((x + x) * (y + y)) & self.mask if alive else 0
        return ((digest * self.prime) & self.mask) ^ term

    def hash(self, cells: Sequence[Sequence[Cell]]) -> int:
        """Fingerprint a bordered cell grid.

        Args:
            cells: Row-major grid of (H+2) rows by (W+2) cells, border included

        Returns:
            Unsigned digest of the interior liveness
        """
        digest = self.offset_basis
        for y in range(1, len(cells) - 1):
            row = cells[y]
            for x in range(1, len(row) - 1):
                digest = self._mix(digest, x, y, row[x].alive)
        return digest

    def hash_array(self, alive: np.ndarray) -> int:
        """Fingerprint an interior snapshot given as a 2D boolean array.

        Args:
            alive: Boolean array of shape (H, W), border excluded

        Returns:
            The digest a board with the same interior would produce
        """
        if alive.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {alive.shape}")

        digest = self.offset_basis
        height, width = alive.shape
        for row in range(height):
            for col in range(width):
                digest = self._mix(digest, col + 1, row + 1, bool(alive[row, col]))
        return digest

    def __repr__(self) -> str:
        return f"FNV1Hasher(bits={self.bits})"


# Singleton instance for convenience
default_hasher = FNV1Hasher()
