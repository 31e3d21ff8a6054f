"""Error kinds raised by curve construction and mapping."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    INVALID_ORDER = "invalid_order"
    NOT_POWER_OF_TWO = "not_power_of_two"
    OUT_OF_RANGE = "out_of_range"


class HilbertSpaceError(ValueError):
    """Base class for all curve errors. `kind` identifies which one."""

    kind: ErrorKind

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidOrderError(HilbertSpaceError):
    kind = ErrorKind.INVALID_ORDER


class NotPowerOfTwoError(HilbertSpaceError):
    kind = ErrorKind.NOT_POWER_OF_TWO


class OutOfRangeError(HilbertSpaceError):
    kind = ErrorKind.OUT_OF_RANGE
