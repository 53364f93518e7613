import sys
from typing import Any, Protocol, TypeVar, runtime_checkable

if sys.version_info < (3, 9):
    from typing import Callable, Hashable
else:
    from collections.abc import Callable, Hashable

__all__ = ["Before", "KeyFunction", "SupportsLessThan"]

Self = TypeVar("Self", bound="SupportsLessThan")


@runtime_checkable
class SupportsLessThan(Protocol):

    def __lt__(self: Self, other: Any, /) -> bool: ...


# key(value) -> hashable key
KeyFunction = Callable[[Any], Hashable]

# before(a, b) -> True when a must come before b
Before = Callable[[Any, Any], bool]
