"""HilbertSpace — maps indices to and from cells of an N×N grid along a Hilbert curve.

Points close on the curve stay close in 2D, which makes the index usable as
a locality-preserving key for spatial lookups, tile caches and load
balancing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hilbertspace.errors import InvalidOrderError, NotPowerOfTwoError, OutOfRangeError
from hilbertspace.quadrant import from_vertical, rotate_quadrant, to_vertical
from hilbertspace.registry import curve

logger = logging.getLogger(__name__)


@curve(name="hilbert", description="2D Hilbert curve over an N×N grid, N a power of two")
@dataclass(frozen=True)
class HilbertSpace:
    """Hilbert curve of order n.

    With vertical_compatible the curve is rotated 90° and reflected, so it
    reads as a backwards "C" instead of a "U". Grids in that orientation can
    be stacked on top of each other without breaking locality at the seam.
    """

    n: int
    vertical_compatible: bool = False

    def __post_init__(self) -> None:
        if self.n <= 0:
            raise InvalidOrderError(f"Curve order must be positive, got {self.n}", self.n)
        if (self.n & (self.n - 1)) != 0:
            raise NotPowerOfTwoError(f"Curve order must be a power of two, got {self.n}", self.n)
        logger.debug("Created Hilbert space n=%d vertical_compatible=%s", self.n, self.vertical_compatible)

    def dimensions(self) -> tuple[int, int]:
        return self.n, self.n

    def map(self, t: int) -> tuple[int, int]:
        """Index t in [0, n²-1] → (x, y) in [0, n-1]²."""
        if t < 0 or t >= self.n * self.n:
            raise OutOfRangeError(f"Index {t} outside [0, {self.n * self.n - 1}]", t)

        x = y = 0
        i = 1
        while i < self.n:
            rx = (t & 2) != 0
            ry = (t & 1) != 0
            if rx:
                ry = not ry

            x, y = rotate_quadrant(i, x, y, rx, ry)
            if rx:
                x += i
            if ry:
                y += i

            t //= 4
            i *= 2

        if self.vertical_compatible:
            x, y = to_vertical(self.n, x, y)
        return x, y

    def map_inverse(self, x: int, y: int) -> int:
        """(x, y) in [0, n-1]² → index in [0, n²-1]."""
        if not (0 <= x < self.n and 0 <= y < self.n):
            raise OutOfRangeError(f"Coordinate ({x}, {y}) outside [0, {self.n - 1}]²", (x, y))

        if self.vertical_compatible:
            x, y = from_vertical(self.n, x, y)

        t = 0
        i = self.n // 2
        while i > 0:
            rx = (x & i) > 0
            ry = (y & i) > 0
            t += i * i * ((3 if rx else 0) ^ (1 if ry else 0))
            x, y = rotate_quadrant(i, x, y, rx, ry)
            i //= 2
        return t


def new_hilbert_space(n: int, vertical_compatible: bool = False) -> HilbertSpace:
    return HilbertSpace(n, vertical_compatible)
