from __future__ import annotations
import sys
from typing import Any, Final, Generic, Optional, TypeVar, overload

if sys.version_info < (3, 9):
    from typing import Iterator
else:
    from collections.abc import Iterator

from .comparable import KeyFunction
from .distinct_sequence import DistinctSequence

__all__ = ["DistinctArrayView"]

T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="DistinctArrayView")


class DistinctArrayView(DistinctSequence[T_co], Generic[T_co]):
    """A read-only window onto a distinct sequence that follows its mutations."""
    _sequence: Final[DistinctSequence[T_co]]

    __slots__ = {
        "_sequence":
            "The viewed distinct sequence.",
    }

    def __init__(self: Self, sequence: DistinctSequence[T_co], /) -> None:
        if not isinstance(sequence, DistinctSequence):
            raise TypeError(f"{type(self).__name__} expected a distinct sequence, got {sequence!r}")
        self._sequence = sequence

    @overload
    def __getitem__(self: Self, index: int, /) -> T_co: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> list[T_co]: ...

    def __getitem__(self, index, /):
        return self._sequence[index]

    def __iter__(self: Self, /) -> Iterator[T_co]:
        return iter(self._sequence)

    def __len__(self: Self, /) -> int:
        return len(self._sequence)

    def __lookup__(self: Self, value: Any, /) -> Optional[int]:
        return self._sequence.__lookup__(value)

    def __repr__(self: Self, /) -> str:
        return f"{self._sequence!r}.view()"

    def __reversed__(self: Self, /) -> Iterator[T_co]:
        return reversed(self._sequence)

    @property
    def key(self: Self, /) -> Optional[KeyFunction]:
        return self._sequence.key
