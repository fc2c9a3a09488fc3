"""
Centered interval tree.

Built once from a static collection of intervals and queried repeatedly.
Every node splits its input at the median endpoint: intervals entirely
left of the median go to the left child, intervals entirely right of it
go to the right child, and the ones crossing the median stay in the node,
kept in two lists sorted by low (ascending) and high (descending) so a
query can stop scanning at the first interval that misses.
"""

from concurrent.futures import ThreadPoolExecutor, Future
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from .config import IndexConfig
from .debug import debug_print
from .interval import Interval, InvalidIntervalError, as_interval
from .ordering import Ordering, LOW_ASCENDING, HIGH_DESCENDING

# T is the payload type carried by the intervals
T = TypeVar('T')


class Node(Generic[T]):
    """One median partition of the tree."""
    __slots__ = ['median', 'left', 'right', 'by_low', 'by_high']

    def __init__(
        self,
        median: Any,
        by_low: list[Interval[T]],
        by_high: list[Interval[T]],
        left: Optional['Node[T]'] = None,
        right: Optional['Node[T]'] = None,
    ):
        self.median = median
        self.by_low: list[Interval[T]] = by_low    # crossing intervals, low ascending
        self.by_high: list[Interval[T]] = by_high  # same intervals, high descending
        self.left: Optional['Node[T]'] = left      # intervals with high < median
        self.right: Optional['Node[T]'] = right    # intervals with low > median

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"Node(median={self.median!r}, crossing={len(self.by_low)})"


def find_median(endpoints: list):
    """
    Median of an already sorted list of endpoints.

    For an even count the two central values are averaged. Integer
    coordinates use integer division truncated toward zero, anything
    else uses true division.
    """
    if not endpoints:
        raise ValueError("Cannot take the median of an empty endpoint list")
    mid = len(endpoints) // 2
    if len(endpoints) % 2 == 1:
        return endpoints[mid]

    a, b = endpoints[mid - 1], endpoints[mid]
    if isinstance(a, int) and isinstance(b, int):
        total = a + b
        return total // 2 if total >= 0 else -(-total // 2)
    return (a + b) / 2


def build_node(
    intervals: list[Interval[T]],
    low_order: Ordering,
    high_order: Ordering,
    executor: Optional[ThreadPoolExecutor] = None,
    fork_depth: int = 0,
) -> Node[T]:
    """
    Recursively build the subtree indexing a non-empty list of intervals.

    While fork_depth is positive and an executor is given, the left
    partition is built on a worker thread and joined before the node is
    returned.
    """
    endpoints = []
    for interval in intervals:
        endpoints.append(interval.low)
        endpoints.append(interval.high)
    endpoints.sort()
    median = find_median(endpoints)

    lefts: list[Interval[T]] = []
    rights: list[Interval[T]] = []
    crossing: list[Interval[T]] = []
    for interval in intervals:
        if interval.high < median:
            lefts.append(interval)
        elif interval.low > median:
            rights.append(interval)
        else:
            crossing.append(interval)

    left: Optional[Node[T]] = None
    right: Optional[Node[T]] = None
    left_future: Optional[Future] = None
    next_depth = fork_depth - 1 if executor is not None and fork_depth > 0 else 0

    if lefts:
        if executor is not None and fork_depth > 0:
            left_future = executor.submit(
                build_node, lefts, low_order, high_order, executor, next_depth
            )
        else:
            left = build_node(lefts, low_order, high_order, executor, next_depth)
    if rights:
        right = build_node(rights, low_order, high_order, executor, next_depth)
    if left_future is not None:
        left = left_future.result()

    return Node(
        median,
        low_order.sort(crossing),
        high_order.sort(crossing),
        left,
        right,
    )


class IntervalTree(Generic[T]):
    """
    Static interval tree answering stabbing and overlap queries.

    An empty input collection gives an empty tree whose queries all
    return empty lists.
    """

    def __init__(
        self,
        intervals: Iterable = (),
        low_order: Ordering = LOW_ASCENDING,
        high_order: Ordering = HIGH_DESCENDING,
        config: Optional[IndexConfig] = None,
    ):
        self.low_order = low_order
        self.high_order = high_order
        self.config = config or IndexConfig()

        # A bad item aborts the build before any node exists
        items: list[Interval[T]] = [as_interval(item) for item in intervals]
        self._size = len(items)
        self.root: Optional[Node[T]] = self._build(items)

        debug_print(
            "TREE",
            f"Built tree from {self._size} intervals: height={self.height()} nodes={self.node_count()}",
            enabled=self.config.debug
        )
        if self.config.verify:
            self.verify_integrity()

    @classmethod
    def build(
        cls,
        intervals: Iterable,
        low_order: Ordering = LOW_ASCENDING,
        high_order: Ordering = HIGH_DESCENDING,
        config: Optional[IndexConfig] = None,
    ) -> 'IntervalTree[T]':
        """Build a tree from Interval objects or (low, high[, value]) tuples."""
        return cls(intervals, low_order, high_order, config)

    def _build(self, items: list[Interval[T]]) -> Optional[Node[T]]:
        if not items:
            return None
        depth = self.config.parallel_depth
        if depth == 0:
            return build_node(items, self.low_order, self.high_order)
        with ThreadPoolExecutor(
            max_workers=self.config.max_workers,
            thread_name_prefix="TreeBuilder"
        ) as executor:
            return build_node(items, self.low_order, self.high_order, executor, depth)

    # --- Container protocol ---

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def is_empty(self) -> bool:
        return self.root is None

    def __iter__(self) -> Iterator[Interval[T]]:
        """Yield every interval, left subtree first, then the node, then the right."""
        def _walk(node):
            if not node:
                return
            yield from _walk(node.left)
            yield from node.by_low
            yield from _walk(node.right)
        return _walk(self.root)

    def __repr__(self) -> str:
        return f"IntervalTree(size={self._size}, height={self.height()})"

    # --- Search Methods ---

    def search_point(self, x) -> list[Interval[T]]:
        """Finds intervals with low <= x <= high."""
        found: list[Interval[T]] = []

        def _search(node):
            if not node:
                return
            if x == node.median:
                # Children lie strictly on one side of the median
                found.extend(node.by_low)
            elif x < node.median:
                for interval in node.by_low:
                    if interval.low > x:
                        break
                    found.append(interval)
                _search(node.left)
            else:
                for interval in node.by_high:
                    if interval.high < x:
                        break
                    found.append(interval)
                _search(node.right)

        _search(self.root)
        return found

    def search_range(self, low, high) -> list[Interval[T]]:
        """Finds intervals that have any overlap with [low, high]."""
        if low > high:
            raise InvalidIntervalError(f"Query low ({low}) must be <= high ({high})")
        if low == high:
            return self.search_point(low)

        found: list[Interval[T]] = []

        def _search(node):
            if not node:
                return
            if high < node.median:
                for interval in node.by_low:
                    if interval.low > high:
                        break
                    found.append(interval)
                _search(node.left)
            elif low > node.median:
                for interval in node.by_high:
                    if interval.high < low:
                        break
                    found.append(interval)
                _search(node.right)
            else:
                # Median inside the query: all crossing intervals match and
                # both children may reach into the query's tails
                found.extend(node.by_low)
                _search(node.left)
                _search(node.right)

        _search(self.root)
        return found

    def find_containing(self, low, high) -> list[Interval[T]]:
        """Finds intervals that fully enclose the range [low, high]."""
        if low > high:
            raise InvalidIntervalError(f"Query low ({low}) must be <= high ({high})")
        return [iv for iv in self.search_point(low) if iv.contains(low, high)]

    def find_contained(self, low, high) -> list[Interval[T]]:
        """Finds intervals that lie inside the range [low, high]."""
        return [iv for iv in self.search_range(low, high) if iv.within(low, high)]

    def query_point(self, x) -> list[T]:
        """Payloads of all intervals containing x."""
        return [iv.value for iv in self.search_point(x)]

    def query_range(self, low, high) -> list[T]:
        """Payloads of all intervals overlapping [low, high]."""
        return [iv.value for iv in self.search_range(low, high)]

    # --- Shape ---

    def height(self) -> int:
        def _height(node):
            if not node:
                return 0
            return 1 + max(_height(node.left), _height(node.right))
        return _height(self.root)

    def node_count(self) -> int:
        def _count(node):
            if not node:
                return 0
            return 1 + _count(node.left) + _count(node.right)
        return _count(self.root)

    def span(self) -> Optional[tuple]:
        """(smallest low, largest high) over all intervals, or None when empty."""
        if self.root is None:
            return None
        lows = []
        highs = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.by_low:
                lows.append(node.by_low[0].low)
                highs.append(node.by_high[0].high)
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        return min(lows), max(highs)

    # --- Debug Tool ---

    def verify_integrity(self):
        """Crashes if a node's partition or sorted-list properties are violated."""
        def _walk(node):
            # Returns (interval count, min low, max high) of the subtree
            if not node:
                return 0, None, None

            if sorted(map(id, node.by_low)) != sorted(map(id, node.by_high)):
                raise RuntimeError(f"Crossing lists differ at median {node.median}")

            for interval in node.by_low:
                if not interval.contains_point(node.median):
                    raise RuntimeError(f"Crossing Violation at median {node.median}: {interval!r}")

            for a, b in zip(node.by_low, node.by_low[1:]):
                if a.low > b.low:
                    raise RuntimeError(f"Low Order Violation at median {node.median}")
            for a, b in zip(node.by_high, node.by_high[1:]):
                if a.high < b.high:
                    raise RuntimeError(f"High Order Violation at median {node.median}")

            left_n, left_min, left_max = _walk(node.left)
            right_n, right_min, right_max = _walk(node.right)

            if node.left is not None and not left_max < node.median:
                raise RuntimeError(f"Left Partition Violation at median {node.median}")
            if node.right is not None and not right_min > node.median:
                raise RuntimeError(f"Right Partition Violation at median {node.median}")

            count = left_n + len(node.by_low) + right_n
            if count == 0:
                raise RuntimeError(f"Empty Node at median {node.median}")

            lows = [v for v in (left_min, right_min) if v is not None]
            highs = [v for v in (left_max, right_max) if v is not None]
            if node.by_low:
                lows.append(node.by_low[0].low)
                highs.append(node.by_high[0].high)
            return count, min(lows), max(highs)

        total, _, _ = _walk(self.root)
        if total != self._size:
            raise RuntimeError(f"Size Violation: tree holds {total} intervals, expected {self._size}")
