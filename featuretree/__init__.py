"""
featuretree - static interval indexing for genomic features

This package provides:
- Interval entity with input validation (interval.py)
- Ordering policies for the sorted crossing lists (ordering.py)
- Centered interval tree with point and range queries (interval_tree.py)
- Per-chromosome feature index built on the tree (feature_index.py)
- Configuration parsing (config.py)
- Debug output (debug.py)
"""

from .interval import Interval, InvalidIntervalError
from .ordering import Ordering, LOW_ASCENDING, HIGH_DESCENDING
from .interval_tree import IntervalTree, Node, build_node, find_median
from .feature_index import FeatureIndex
from .config import Config, IndexConfig
from .debug import set_debug

__all__ = [
    'Interval',
    'InvalidIntervalError',
    'Ordering',
    'LOW_ASCENDING',
    'HIGH_DESCENDING',
    'IntervalTree',
    'Node',
    'build_node',
    'find_median',
    'FeatureIndex',
    'Config',
    'IndexConfig',
    'set_debug',
]
