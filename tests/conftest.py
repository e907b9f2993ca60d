"""
conftest.py - pytest fixtures for dyna_sort tests.
"""

import random
from dataclasses import dataclass
from datetime import datetime

import pytest


@dataclass(frozen=True)
class Pair:
    first: int
    second: int


@pytest.fixture
def rng():
    """Seeded random generator so shuffled inputs are reproducible."""
    return random.Random(20240101)


@pytest.fixture
def shuffle(rng):
    """Return a shuffled copy of a list."""
    def _shuffle(items):
        copy = list(items)
        rng.shuffle(copy)
        return copy
    return _shuffle


@pytest.fixture
def pairs():
    """Records ordered by (first, second)."""
    return [Pair(f, s) for f in (1, 2) for s in (1, 2, 3)]


@pytest.fixture
def dates():
    """(oldest, middle, newest)."""
    return (datetime(2015, 1, 1), datetime(2020, 1, 1), datetime(2025, 1, 1))
