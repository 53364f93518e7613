"""Shared fixtures for the distinct collection tests."""

from __future__ import annotations

import pytest

from distinct_collections import DistinctArray


def _check_consistent(arr: DistinctArray) -> None:
    values = arr._values
    indices = arr._indices
    assert len(indices) == len(values)
    for i, value in enumerate(values):
        key = value if arr.key is None else arr.key(value)
        assert indices[key] == i


@pytest.fixture
def assert_consistent():
    """Asserts that the key index and the element list agree in both directions."""
    return _check_consistent
