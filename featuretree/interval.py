"""
Interval entity for featuretree.

An Interval is a closed numeric range [low, high] carrying a payload.
It has no intrinsic ordering; see ordering.py for the policies used
to sort intervals inside the tree.
"""

from typing import Any, Generic, TypeVar

# T is the payload type
T = TypeVar('T')


class InvalidIntervalError(ValueError):
    """Raised for malformed intervals or query ranges."""


class Interval(Generic[T]):
    """Immutable closed interval [low, high] with an attached value."""
    __slots__ = ['low', 'high', 'value']

    def __init__(self, low, high, value: T = None):
        if low is None or high is None:
            raise InvalidIntervalError(f"Interval endpoints must not be None: ({low}, {high})")
        if low > high:
            raise InvalidIntervalError(f"low ({low}) must be <= high ({high})")
        object.__setattr__(self, 'low', low)
        object.__setattr__(self, 'high', high)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"Interval is immutable, cannot set '{name}'")

    def __delattr__(self, name: str):
        raise AttributeError(f"Interval is immutable, cannot delete '{name}'")

    def __repr__(self) -> str:
        return f"Interval({self.low!r}, {self.high!r}, {self.value!r})"

    # --- Predicates ---

    def contains_point(self, x) -> bool:
        return self.low <= x <= self.high

    def contains(self, low, high) -> bool:
        """True if this interval fully encloses [low, high]."""
        return self.low <= low and self.high >= high

    def within(self, low, high) -> bool:
        """True if this interval lies inside [low, high]."""
        return self.low >= low and self.high <= high


def as_interval(item) -> Interval:
    """
    Coerce an Interval or a (low, high[, value]) tuple into an Interval.

    Raises InvalidIntervalError for anything else.
    """
    if isinstance(item, Interval):
        return item
    if isinstance(item, (tuple, list)) and len(item) in (2, 3):
        return Interval(*item)
    raise InvalidIntervalError(f"Cannot interpret {item!r} as an interval")
