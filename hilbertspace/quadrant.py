"""Leaf-node coordinate transforms. No curve imports."""

from __future__ import annotations


def rotate_quadrant(n: int, x: int, y: int, rx: bool, ry: bool) -> tuple[int, int]:
    """Rotate and flip a point within a quadrant of side n.

    Lower quadrants (ry false) are transposed, and the lower-right one is
    also reflected on both axes first. Upper quadrants are left alone.
    """
    if not ry:
        if rx:
            x = n - 1 - x
            y = n - 1 - y
        x, y = y, x
    return x, y


def to_vertical(n: int, x: int, y: int) -> tuple[int, int]:
    """Turn the "U" orientation into a backwards "C" so grids stack vertically."""
    # 90° counter-clockwise
    x, y = y, n - 1 - x
    # reflect across the horizontal axis
    y = n - 1 - y
    return x, y


def from_vertical(n: int, x: int, y: int) -> tuple[int, int]:
    """Inverse of to_vertical."""
    y = n - 1 - y
    x, y = n - 1 - y, x
    return x, y
