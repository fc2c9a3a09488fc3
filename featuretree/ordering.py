"""
Ordering policies for intervals.

The tree keeps the intervals crossing each node's median in two lists,
one sorted by ascending low endpoint and one by descending high
endpoint. The policies are values handed to the build, not global state.
"""

import functools
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .interval import Interval


@dataclass(frozen=True)
class Ordering:
    """A named, stateless total order over intervals."""
    name: str
    key: Callable[[Interval], Any]
    reverse: bool = False

    def sort(self, intervals: Iterable[Interval]) -> list[Interval]:
        return sorted(intervals, key=self.key, reverse=self.reverse)

    @classmethod
    def from_comparator(cls, name: str, cmp: Callable[[Interval, Interval], int]) -> 'Ordering':
        """Wrap a three-way comparator (negative, zero, positive) as an Ordering."""
        return cls(name=name, key=functools.cmp_to_key(cmp))


def _low_key(interval: Interval):
    return (interval.low, interval.high)


def _high_key(interval: Interval):
    return (interval.high, interval.low)


# Ties on low are broken by high so the order is reproducible
LOW_ASCENDING = Ordering(name="low-ascending", key=_low_key)

# Ties on high are broken by low
HIGH_DESCENDING = Ordering(name="high-descending", key=_high_key, reverse=True)
