"""Shared test fixtures."""

from __future__ import annotations

import pytest

from hilbertspace.hilbert import HilbertSpace


# Orders small enough to check exhaustively
ORDERS = [1, 2, 4, 8, 16]

ORIENTATIONS = [False, True]

# Order-4 standard curve, index → cell, traced by hand
ORDER_4_PATH = [
    (0, 0), (1, 0), (1, 1), (0, 1),
    (0, 2), (0, 3), (1, 3), (1, 2),
    (2, 2), (2, 3), (3, 3), (3, 2),
    (3, 1), (2, 1), (2, 0), (3, 0),
]


@pytest.fixture
def space4() -> HilbertSpace:
    return HilbertSpace(4)


@pytest.fixture
def vertical4() -> HilbertSpace:
    return HilbertSpace(4, vertical_compatible=True)
