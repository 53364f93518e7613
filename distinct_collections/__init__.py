"""
Array-like collections whose elements are kept distinct. A
DistinctArray supports reads and writes by position, insertion and
removal, iteration, search and transformation like a list, while a key
index gives set-like uniqueness and constant time membership and
position lookups. Keys default to the elements themselves or can be
derived with a key function, and abstract base classes are provided for
custom implementations.
"""
import logging

from . import abc
from ._src.distinct_array import DistinctArray
from ._src.distinct_array_view import DistinctArrayView
from ._src.errors import DistinctArrayError, DuplicateKeyError, OutOfRangeError

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DistinctArray",
    "DistinctArrayView",
    "DistinctArrayError",
    "DuplicateKeyError",
    "OutOfRangeError",
]
