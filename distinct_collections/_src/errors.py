"""Exception types raised by distinct collections."""
from __future__ import annotations
from typing import Any, Optional

__all__ = ["DistinctArrayError", "DuplicateKeyError", "OutOfRangeError"]


class DistinctArrayError(Exception):
    """Base class for errors raised by distinct collections."""


class OutOfRangeError(DistinctArrayError, IndexError):
    """Raised when a positional read or write falls outside the array."""

    def __init__(self, index: int, size: int, message: Optional[str] = None) -> None:
        if message is None:
            message = f"index {index} is out of range for a distinct array of size {size}"
        super().__init__(message)
        self.index = index
        self.size = size


class DuplicateKeyError(DistinctArrayError, ValueError):
    """
    Raised when a mutation would store two values with equal keys.

    ``index`` is the position already holding the key, or ``None`` when
    the collision is between values passed to the same call.
    """

    def __init__(self, key: Any, value: Any, index: Optional[int] = None) -> None:
        if index is None:
            message = f"key {key!r} of {value!r} appears more than once in the given values"
        else:
            message = f"key {key!r} of {value!r} already exists at index {index}"
        super().__init__(message)
        self.key = key
        self.value = value
        self.index = index
