"""
Per-chromosome feature index.

Groups feature records by sequence name and builds one IntervalTree per
chromosome. This is the lookup surface annotation code uses: hand it
variant coordinates, get back the payloads of the overlapping features.
"""

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from .config import IndexConfig
from .debug import debug_print
from .interval import Interval, InvalidIntervalError
from .interval_tree import IntervalTree

T = TypeVar('T')


class FeatureIndex(Generic[T]):
    """
    Single point of access for a labeled set of interval trees.

    Coordinates are closed [start, end]. Queries against a chromosome
    that has no features return an empty list.
    """

    def __init__(self, records: Iterable = (), config: Optional[IndexConfig] = None):
        self.config = config or IndexConfig()

        # chrom -> intervals, in input order
        grouped: dict[str, list[Interval[T]]] = {}
        for record in records:
            chrom, interval = self._parse_record(record)
            grouped.setdefault(chrom, []).append(interval)

        self._trees: dict[str, IntervalTree[T]] = {
            chrom: IntervalTree(intervals, config=self.config)
            for chrom, intervals in grouped.items()
        }
        debug_print(
            "INDEX",
            f"Indexed {len(self)} features on {len(self._trees)} chromosomes",
            enabled=self.config.debug
        )

    @classmethod
    def build(cls, records: Iterable, config: Optional[IndexConfig] = None) -> 'FeatureIndex[T]':
        """Build an index from (chrom, start, end, payload) records."""
        return cls(records, config)

    @staticmethod
    def _parse_record(record) -> tuple[str, Interval]:
        try:
            chrom, start, end, payload = record
        except (TypeError, ValueError):
            raise InvalidIntervalError(f"Expected (chrom, start, end, payload), got {record!r}")
        if chrom is None:
            raise InvalidIntervalError(f"Feature record without chromosome: {record!r}")
        return chrom, Interval(start, end, payload)

    # --- Lookup ---

    def query_point(self, chrom: str, pos) -> list[T]:
        tree = self._trees.get(chrom)
        if tree is None:
            return []
        return tree.query_point(pos)

    def query_range(self, chrom: str, start, end, delta=0) -> list[T]:
        """
        Payloads of features overlapping [start, end] on chrom.

        A positive delta widens the query by that many positions on each
        side. A non-negative start is never widened below 0.
        """
        if start > end:
            raise InvalidIntervalError(f"Query start ({start}) must be <= end ({end})")
        if delta < 0:
            raise ValueError(f"delta must not be negative, got {delta}")
        tree = self._trees.get(chrom)
        if tree is None:
            return []
        if delta:
            start = max(0, start - delta) if start >= 0 else start - delta
            end = end + delta
        return tree.query_range(start, end)

    def tree(self, chrom: str) -> Optional[IntervalTree[T]]:
        return self._trees.get(chrom)

    def chromosomes(self) -> list[str]:
        return sorted(self._trees)

    # --- Container protocol ---

    def __contains__(self, chrom: Any) -> bool:
        return chrom in self._trees

    def __len__(self) -> int:
        return sum(len(tree) for tree in self._trees.values())

    def __iter__(self) -> Iterator[tuple[str, Interval[T]]]:
        for chrom in self.chromosomes():
            for interval in self._trees[chrom]:
                yield chrom, interval
