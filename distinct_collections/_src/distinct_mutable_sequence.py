from __future__ import annotations
import sys
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar, Union, overload

if sys.version_info < (3, 9):
    from typing import Iterable
else:
    from collections.abc import Iterable

from .comparable import Before
from .distinct_sequence import DistinctSequence

__all__ = ["DistinctMutableSequence"]

Self = TypeVar("Self", bound="DistinctMutableSequence")
T = TypeVar("T")


class DistinctMutableSequence(DistinctSequence[T], ABC, Generic[T]):
    """
    Mutable interface of a distinct sequence.

    Unlike ``list``, ``remove`` and ``unordered_remove`` take a position
    and return ``None`` on a miss instead of raising. Value-based removal
    is spelled ``delete``, ``unordered_delete`` or ``discard``.
    """

    __slots__ = ()

    @abstractmethod
    def __delitem__(self: Self, index: Union[int, slice], /) -> None:
        raise NotImplementedError("__delitem__ is a required method for distinct mutable sequences")

    def __iadd__(self: Self, other: Iterable[T], /) -> Self:
        if not isinstance(other, Iterable):
            return NotImplemented
        self.extend(other)
        return self

    @overload
    def __setitem__(self: Self, index: int, value: T, /) -> None: ...

    @overload
    def __setitem__(self: Self, index: slice, value: Iterable[T], /) -> None: ...

    @abstractmethod
    def __setitem__(self, index, value, /):
        raise NotImplementedError("__setitem__ is a required method for distinct mutable sequences")

    def append(self: Self, value: T, /) -> None:
        self.push(value)

    @abstractmethod
    def clear(self: Self, /) -> None:
        raise NotImplementedError("clear is a required method for distinct mutable sequences")

    def delete(self: Self, value: Any, /) -> None:
        """Removes ``value`` if present, preserving the order of the rest."""
        i = None if value is None else self.__lookup__(value)
        if i is not None:
            self.remove(i)

    def discard(self: Self, value: Any, /) -> None:
        self.delete(value)

    def extend(self: Self, iterable: Iterable[T], /) -> None:
        if isinstance(iterable, Iterable):
            self.push(*iterable)
        else:
            raise TypeError(f"expected iterable, got {iterable!r}")

    @abstractmethod
    def insert(self: Self, index: int, value: T, /) -> None:
        raise NotImplementedError("insert is a required method for distinct mutable sequences")

    @abstractmethod
    def pop(self: Self, /) -> Optional[T]:
        raise NotImplementedError("pop is a required method for distinct mutable sequences")

    @abstractmethod
    def push(self: Self, /, *values: T) -> int:
        raise NotImplementedError("push is a required method for distinct mutable sequences")

    @abstractmethod
    def remove(self: Self, index: int, /) -> Optional[T]:
        raise NotImplementedError("remove is a required method for distinct mutable sequences")

    @abstractmethod
    def reverse(self: Self, /) -> None:
        raise NotImplementedError("reverse is a required method for distinct mutable sequences")

    @abstractmethod
    def shift(self: Self, /) -> Optional[T]:
        raise NotImplementedError("shift is a required method for distinct mutable sequences")

    @abstractmethod
    def sort(self: Self, before: Optional[Before] = None, /, *, reverse: bool = False) -> Self:
        raise NotImplementedError("sort is a required method for distinct mutable sequences")

    def unordered_delete(self: Self, value: Any, /) -> None:
        """Removes ``value`` if present by moving the last element into its place."""
        i = None if value is None else self.__lookup__(value)
        if i is not None:
            self.unordered_remove(i)

    @abstractmethod
    def unordered_remove(self: Self, index: int, /) -> Optional[T]:
        raise NotImplementedError("unordered_remove is a required method for distinct mutable sequences")

    @abstractmethod
    def unshift(self: Self, /, *values: T) -> int:
        raise NotImplementedError("unshift is a required method for distinct mutable sequences")
