from __future__ import annotations
import operator
import sys
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar, overload

if sys.version_info < (3, 9):
    from typing import Callable, Iterable, Iterator, Sequence
else:
    from collections.abc import Callable, Iterable, Iterator, Sequence

from .comparable import KeyFunction

__all__ = ["DistinctSequence"]

Self = TypeVar("Self", bound="DistinctSequence")
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")


def as_index(index: Any, name: str, /) -> int:
    try:
        return operator.index(index)
    except TypeError:
        raise TypeError(f"could not interpret the {name} as an integer, got {index!r}") from None


def results(iterable: Iterable[Any], callback: Callable[..., U], with_index: bool, /) -> Iterator[tuple[Any, U]]:
    # Pairs every element with callback(element) or callback(element, position).
    if with_index:
        for i, x in enumerate(iterable):
            yield x, callback(x, i)
    else:
        for x in iterable:
            yield x, callback(x)


class DistinctSequence(Sequence[T_co], ABC, Generic[T_co]):
    """
    Read-only interface of an ordered sequence whose elements have
    distinct keys.

    Subclasses provide positional access, the length, iteration and
    ``__lookup__``, a constant time key lookup. Everything else, from
    membership to ``reduce``, is derived from those.
    """

    __slots__ = ()

    def __contains__(self: Self, value: Any, /) -> bool:
        return value is not None and self.__lookup__(value) is not None

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, (DistinctSequence, list)):
            return len(self) == len(other) and all(x == y for x, y in zip(self, other))
        else:
            return NotImplemented

    @overload
    def __getitem__(self: Self, index: int, /) -> T_co: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> list[T_co]: ...

    @abstractmethod
    def __getitem__(self, index, /):
        raise NotImplementedError("__getitem__ is a required method for distinct sequences")

    @abstractmethod
    def __iter__(self: Self, /) -> Iterator[T_co]:
        raise NotImplementedError("__iter__ is a required method for distinct sequences")

    @abstractmethod
    def __len__(self: Self, /) -> int:
        raise NotImplementedError("__len__ is a required method for distinct sequences")

    @abstractmethod
    def __lookup__(self: Self, value: Any, /) -> Optional[int]:
        """Returns the position holding the key of ``value``, or ``None``."""
        raise NotImplementedError("__lookup__ is a required method for distinct sequences")

    def count(self: Self, value: Any, /) -> int:
        return 1 if value in self else 0

    def every(self: Self, callback: Callable[..., Any], /, *, with_index: bool = False) -> bool:
        """
        Returns whether ``callback`` is truthy for every element. ``True`` when empty.

        With ``with_index=True`` the callbacks of ``every``, ``filter``,
        ``find``, ``find_index``, ``for_each``, ``map``, ``map_filtered`` and
        ``some`` are called as ``callback(element, position)``.
        """
        return all(y for _, y in results(self, callback, with_index))

    def filter(self: Self, callback: Callable[..., Any], /, *, with_index: bool = False) -> list[T_co]:
        return [x for x, y in results(self, callback, with_index) if y]

    def find(self: Self, predicate: Callable[..., Any], /, *, with_index: bool = False) -> Optional[T_co]:
        """Returns the first element satisfying ``predicate``, or ``None``."""
        for x, y in results(self, predicate, with_index):
            if y:
                return x
        return None

    def find_index(self: Self, predicate: Callable[..., Any], /, *, with_index: bool = False) -> int:
        """Returns the position of the first element satisfying ``predicate``, or ``-1``."""
        for i, (_, y) in enumerate(results(self, predicate, with_index)):
            if y:
                return i
        return -1

    def for_each(self: Self, callback: Callable[..., Any], /, *, with_index: bool = False) -> None:
        for _ in results(self, callback, with_index):
            pass

    def has(self: Self, value: Any, /) -> bool:
        return value in self

    def includes(self: Self, value: Any, /, from_index: Optional[int] = None) -> bool:
        return self.index_of(value, from_index) != -1

    def index(self: Self, value: Any, /, start: int = 0, stop: Optional[int] = None) -> int:
        start = as_index(start, "start")
        if stop is not None:
            stop = as_index(stop, "stop")
        i = None if value is None else self.__lookup__(value)
        if i is None or i not in range(len(self))[start:stop]:
            raise ValueError(f"{value!r} is not in the distinct sequence")
        return i

    def index_of(self: Self, value: Any, /, from_index: Optional[int] = None) -> int:
        """
        Returns the position of ``value``, or ``-1`` if it is absent or
        found before ``from_index``.
        """
        if value is None:
            return -1
        i = self.__lookup__(value)
        if i is None:
            return -1
        elif from_index is not None and i < as_index(from_index, "from_index"):
            return -1
        else:
            return i

    def map(self: Self, callback: Callable[..., U], /, *, with_index: bool = False) -> list[U]:
        return [y for _, y in results(self, callback, with_index)]

    def map_filtered(self: Self, callback: Callable[..., Optional[U]], /, *, with_index: bool = False) -> list[U]:
        """
        Maps every element and drops the ``None`` results.

        The result is a plain list, so it may contain duplicates.
        """
        return [y for _, y in results(self, callback, with_index) if y is not None]

    def reduce(self: Self, callback: Callable[..., U], initial: U, /, *, with_index: bool = False) -> U:
        """
        Folds the elements into ``initial`` with ``callback(accumulator, element)``,
        or ``callback(accumulator, element, position)`` with ``with_index=True``.
        """
        accumulator = initial
        for i, x in enumerate(self):
            if with_index:
                accumulator = callback(accumulator, x, i)
            else:
                accumulator = callback(accumulator, x)
        return accumulator

    def size(self: Self, /) -> int:
        return len(self)

    def some(self: Self, callback: Callable[..., Any], /, *, with_index: bool = False) -> bool:
        """Returns whether ``callback`` is truthy for any element. ``False`` when empty."""
        return any(y for _, y in results(self, callback, with_index))

    @property
    @abstractmethod
    def key(self: Self, /) -> Optional[KeyFunction]:
        raise NotImplementedError("key is a required property for distinct sequences")
