from __future__ import annotations
import logging
import sys
from copy import deepcopy
from functools import cmp_to_key
from typing import Any, Generic, Optional, Type, TypeVar, Union, overload

if sys.version_info < (3, 9):
    from typing import AbstractSet, Hashable, Iterable, Iterator
else:
    from collections.abc import Hashable, Iterable, Iterator, Set as AbstractSet

from .comparable import Before, KeyFunction, SupportsLessThan
from .distinct_array_view import DistinctArrayView
from .distinct_mutable_sequence import DistinctMutableSequence
from .distinct_sequence import as_index
from .errors import DuplicateKeyError, OutOfRangeError

__all__ = ["DistinctArray"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

Self = TypeVar("Self", bound="DistinctArray")

reprs_seen: set[int] = set()


def before_key(before: Before, /) -> Any:
    def compare(a: SupportsLessThan, b: SupportsLessThan, /) -> int:
        if before(a, b):
            return -1
        elif before(b, a):
            return 1
        else:
            return 0
    return cmp_to_key(compare)


class DistinctArray(DistinctMutableSequence[T], Generic[T]):
    """
    An array whose elements have distinct keys.

    Elements are kept in a list, and a dict maps the key of every element
    to its position, giving constant time ``in``, ``index`` and
    ``index_of``. Every mutation checks positions and keys before touching
    either structure, so a failed call leaves the array as it was.

    The key of an element is ``key(element)``, or the element itself when
    no key function is given. ``None`` cannot be stored: it is what
    ``pop``, ``shift``, ``remove`` and ``find`` return when there is
    nothing to return.

    Example:
        >>> arr = DistinctArray([3, 1, 2])
        >>> arr.push(4)
        4
        >>> arr.unordered_remove(0)
        3
        >>> arr
        DistinctArray([4, 1, 2])
        >>> arr.sort().index_of(4)
        2
    """
    _indices: dict[Hashable, int]
    _key: Optional[KeyFunction]
    _values: list[T]

    __slots__ = {
        "_indices":
            "Maps the key of every element to its position in _values.",
        "_key":
            "The key function, or None to use elements as their own keys.",
        "_values":
            "The elements in order.",
    }

    def __init__(self: Self, iterable: Optional[Iterable[T]] = None, /, *, key: Optional[KeyFunction] = None) -> None:
        if key is not None and not callable(key):
            raise TypeError(f"{type(self).__name__} expected a callable key or None, got {key!r}")
        self._indices = {}
        self._key = key
        self._values = []
        if iterable is None:
            return
        elif isinstance(iterable, Iterable):
            self.push(*iterable)
            logger.debug("Built %s with %d elements", type(self).__name__, len(self._values))
        else:
            raise TypeError(f"{type(self).__name__} expected an iterable or None, got {iterable!r}")

    def __copy__(self: Self, /) -> Self:
        result = type(self).__new__(type(self))
        result._indices = self._indices.copy()
        result._key = self._key
        result._values = self._values.copy()
        return result

    def __deepcopy__(self: Self, memo: dict[int, Any], /) -> Self:
        result = type(self).__new__(type(self))
        # Registered before copying elements, which may refer back to self.
        memo[id(self)] = result
        result._indices = {}
        result._key = self._key
        result._values = []
        result.push(*[deepcopy(x, memo) for x in self._values])
        return result

    def __delitem__(self: Self, index: Union[int, slice], /) -> None:
        if isinstance(index, slice):
            range_ = range(len(self._values))[index]
            if len(range_) == 0:
                return
            keys = [self._key_of(self._values[i]) for i in range_]
            del self._values[index]
            for key in keys:
                del self._indices[key]
            self._reindex(min(range_))
            logger.debug("Deleted %d elements from %s", len(keys), type(self).__name__)
            return
        index = as_index(index, "index")
        if not 0 <= index < len(self._values):
            raise OutOfRangeError(index, len(self._values))
        self.remove(index)

    @overload
    def __getitem__(self: Self, index: int, /) -> T: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> list[T]: ...

    def __getitem__(self, index, /):
        if isinstance(index, slice):
            return self._values[index]
        index = as_index(index, "index")
        if not 0 <= index < len(self._values):
            raise OutOfRangeError(index, len(self._values))
        return self._values[index]

    def __iter__(self: Self, /) -> Iterator[T]:
        return iter(self._values)

    def __len__(self: Self, /) -> int:
        return len(self._values)

    def __lookup__(self: Self, value: Any, /) -> Optional[int]:
        if value is None:
            return None
        return self._indices.get(self._key_of(value))

    def __repr__(self: Self, /) -> str:
        if id(self) in reprs_seen:
            return "..."
        key = "" if self._key is None else f"key={self._key!r}"
        if len(self._values) == 0:
            return f"{type(self).__name__}({key})"
        reprs_seen.add(id(self))
        try:
            data = ", ".join([repr(x) for x in self._values])
            if key:
                return f"{type(self).__name__}([{data}], {key})"
            return f"{type(self).__name__}([{data}])"
        finally:
            reprs_seen.remove(id(self))

    def __reversed__(self: Self, /) -> Iterator[T]:
        return reversed(self._values)

    @overload
    def __setitem__(self: Self, index: int, value: T, /) -> None: ...

    @overload
    def __setitem__(self: Self, index: slice, value: Iterable[T], /) -> None: ...

    def __setitem__(self, index, value, /):
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slice assignment")
        index = as_index(index, "index")
        len_ = len(self._values)
        if not 0 <= index <= len_:
            raise OutOfRangeError(index, len_)
        key = self._key_of(value)
        i = self._indices.get(key)
        if i is not None and i != index:
            raise self._duplicate(key, value, i)
        if index == len_:
            self._values.append(value)
        else:
            old_key = self._key_of(self._values[index])
            del self._indices[old_key]
            self._values[index] = value
        self._indices[key] = index

    def _duplicate(self: Self, key: Hashable, value: T, index: Optional[int], /) -> DuplicateKeyError:
        logger.debug("Rejected duplicate key %r in %s", key, type(self).__name__)
        return DuplicateKeyError(key, value, index)

    def _key_of(self: Self, value: Any, /) -> Hashable:
        if value is None:
            raise TypeError(f"{type(self).__name__} cannot store None")
        elif self._key is None:
            return value
        else:
            return self._key(value)

    def _pending_keys(self: Self, values: tuple[T, ...], /) -> list[Hashable]:
        # Every key is computed and checked before anything is stored.
        keys: list[Hashable] = []
        seen: set[Hashable] = set()
        for value in values:
            key = self._key_of(value)
            if key in self._indices:
                raise self._duplicate(key, value, self._indices[key])
            elif key in seen:
                raise self._duplicate(key, value, None)
            seen.add(key)
            keys.append(key)
        return keys

    def _reindex(self: Self, start: int = 0, /) -> None:
        indices = self._indices
        values = self._values
        for i in range(start, len(values)):
            indices[self._key_of(values[i])] = i

    def clear(self: Self, /) -> None:
        self._values.clear()
        self._indices.clear()

    def copy(self: Self, /) -> Self:
        return self.__copy__()

    @classmethod
    def from_iterable(cls: Type[Self], iterable: Iterable[T], /, key: Optional[KeyFunction] = None) -> Self:
        """Builds an array from ``iterable``, raising ``DuplicateKeyError`` on repeated keys."""
        return cls(iterable, key=key)

    @classmethod
    def from_set(cls: Type[Self], set_: AbstractSet[T], /) -> Self:
        if not isinstance(set_, AbstractSet):
            raise TypeError(f"{cls.__name__}.from_set expected a set, got {set_!r}")
        return cls(set_)

    def insert(self: Self, index: int, value: T, /) -> None:
        index = as_index(index, "index")
        len_ = len(self._values)
        if not 0 <= index <= len_:
            raise OutOfRangeError(index, len_)
        key = self._key_of(value)
        i = self._indices.get(key)
        if i == index:
            return
        elif i is not None:
            raise self._duplicate(key, value, i)
        self._values.insert(index, value)
        self._indices[key] = index
        self._reindex(index + 1)

    def pop(self: Self, /) -> Optional[T]:
        if len(self._values) == 0:
            return None
        key = self._key_of(self._values[-1])
        del self._indices[key]
        return self._values.pop()

    def push(self: Self, /, *values: T) -> int:
        """Appends ``values`` in order and returns the new length."""
        keys = self._pending_keys(values)
        start = len(self._values)
        self._values.extend(values)
        for i, key in enumerate(keys, start):
            self._indices[key] = i
        return len(self._values)

    def remove(self: Self, index: int, /) -> Optional[T]:
        """Removes and returns the element at ``index``, or returns ``None`` if out of range."""
        index = as_index(index, "index")
        if not 0 <= index < len(self._values):
            return None
        value = self._values[index]
        key = self._key_of(value)
        del self._values[index]
        del self._indices[key]
        self._reindex(index)
        return value

    def reverse(self: Self, /) -> None:
        self._values.reverse()
        self._reindex()
        logger.debug("Reversed %s with %d elements", type(self).__name__, len(self._values))

    def shift(self: Self, /) -> Optional[T]:
        if len(self._values) == 0:
            return None
        return self.remove(0)

    def sort(self: Self, before: Optional[Before] = None, /, *, reverse: bool = False) -> Self:
        """
        Sorts the array in place and returns it.

        ``before(a, b)`` must return ``True`` when ``a`` comes before ``b``.
        Without it elements are compared with ``<``. Ties may be reordered.
        """
        if before is None:
            values = sorted(self._values, reverse=reverse)
        elif callable(before):
            values = sorted(self._values, key=before_key(before), reverse=reverse)
        else:
            raise TypeError(f"{type(self).__name__}.sort expected a callable or None, got {before!r}")
        self._values[:] = values
        self._reindex()
        logger.debug("Sorted %s with %d elements", type(self).__name__, len(values))
        return self

    def unordered_remove(self: Self, index: int, /) -> Optional[T]:
        """
        Removes and returns the element at ``index`` by moving the last
        element into its place, or returns ``None`` if out of range.
        """
        index = as_index(index, "index")
        values = self._values
        if not 0 <= index < len(values):
            return None
        value = values[index]
        key = self._key_of(value)
        if index + 1 == len(values):
            values.pop()
        else:
            last_key = self._key_of(values[-1])
            values[index] = values.pop()
            self._indices[last_key] = index
        del self._indices[key]
        return value

    def unshift(self: Self, /, *values: T) -> int:
        """Prepends ``values`` so they end up in the given order, and returns the new length."""
        keys = self._pending_keys(values)
        if len(keys) == 0:
            return len(self._values)
        self._values[:0] = values
        for i, key in enumerate(keys):
            self._indices[key] = i
        self._reindex(len(keys))
        return len(self._values)

    def view(self: Self, /) -> DistinctArrayView[T]:
        """Returns a read-only view that follows later mutations."""
        return DistinctArrayView(self)

    @property
    def key(self: Self, /) -> Optional[KeyFunction]:
        return self._key
