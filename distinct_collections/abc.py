from ._src.distinct_sequence import DistinctSequence
from ._src.distinct_mutable_sequence import DistinctMutableSequence

__all__ = [
    "DistinctSequence",
    "DistinctMutableSequence",
]
