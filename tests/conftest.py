"""Pytest configuration and fixtures for featuretree tests."""

import random

import pytest

from featuretree import Interval, set_debug


@pytest.fixture(autouse=True)
def reset_debug():
    """Keep debug output off between tests."""
    set_debug(False)
    yield
    set_debug(False)


@pytest.fixture
def example_intervals():
    """Three intervals: two overlapping, one isolated point."""
    return [
        Interval(1, 5, "a"),
        Interval(4, 10, "b"),
        Interval(12, 12, "c"),
    ]


@pytest.fixture
def exon_records():
    """Feature records laid out like exons on two chromosomes."""
    return [
        ("chr1", 100, 200, "GENE1:exon1"),
        ("chr1", 300, 400, "GENE1:exon2"),
        ("chr1", 350, 500, "GENE2:exon1"),
        ("chr2", 50, 150, "GENE3:exon1"),
        ("chr2", 1000, 1000, "GENE4:exon1"),
    ]


@pytest.fixture
def random_intervals():
    """Factory for reproducible random integer intervals with unique payloads."""
    def _make(count, seed, max_start=1000, max_length=100):
        rng = random.Random(seed)
        intervals = []
        for i in range(count):
            low = rng.randint(0, max_start)
            high = low + rng.randint(0, max_length)
            intervals.append(Interval(low, high, i))
        return intervals
    return _make
