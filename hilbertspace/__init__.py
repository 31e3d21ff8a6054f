"""Locality-preserving mapping between 1D indices and 2D grid cells."""

from hilbertspace.errors import (
    ErrorKind,
    HilbertSpaceError,
    InvalidOrderError,
    NotPowerOfTwoError,
    OutOfRangeError,
)
from hilbertspace.hilbert import HilbertSpace, new_hilbert_space
from hilbertspace.quadrant import rotate_quadrant
from hilbertspace.registry import CurveRegistry, CurveSpec, SpaceFillingCurve, curve, get_registry

__all__ = [
    "ErrorKind",
    "HilbertSpaceError",
    "InvalidOrderError",
    "NotPowerOfTwoError",
    "OutOfRangeError",
    "HilbertSpace",
    "new_hilbert_space",
    "rotate_quadrant",
    "CurveRegistry",
    "CurveSpec",
    "SpaceFillingCurve",
    "curve",
    "get_registry",
]
