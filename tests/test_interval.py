"""Unit tests for Interval class."""

import pytest

from featuretree import Interval, InvalidIntervalError
from featuretree.interval import as_interval


class TestIntervalCreation:
    """Tests for Interval construction and validation."""

    def test_create_interval(self):
        iv = Interval(100, 200, "exon1")
        assert iv.low == 100
        assert iv.high == 200
        assert iv.value == "exon1"

    def test_value_defaults_to_none(self):
        assert Interval(1, 2).value is None

    def test_point_interval(self):
        """Test zero-length interval (single position)."""
        iv = Interval(100, 100)
        assert iv.low == iv.high == 100
        assert iv.contains_point(100)

    def test_low_greater_than_high(self):
        with pytest.raises(InvalidIntervalError, match=r"low \(200\) must be <= high \(100\)"):
            Interval(200, 100)

    def test_invalid_interval_is_value_error(self):
        with pytest.raises(ValueError):
            Interval(5, 1)

    def test_none_endpoint(self):
        with pytest.raises(InvalidIntervalError):
            Interval(None, 5)

    def test_float_endpoints(self):
        iv = Interval(1.5, 2.25)
        assert iv.contains_point(2.0)
        assert not iv.contains_point(2.5)

    def test_repr(self):
        assert repr(Interval(1, 5, "a")) == "Interval(1, 5, 'a')"


class TestIntervalImmutability:
    """Intervals cannot be changed after creation."""

    def test_cannot_set_endpoint(self):
        iv = Interval(1, 5)
        with pytest.raises(AttributeError):
            iv.low = 10
        assert iv.low == 1

    def test_cannot_delete_value(self):
        iv = Interval(1, 5, "a")
        with pytest.raises(AttributeError):
            del iv.value

    def test_no_value_equality(self):
        """Equality is identity; two equal ranges stay distinct entries."""
        assert Interval(1, 5, "a") != Interval(1, 5, "a")


class TestIntervalPredicates:
    """Tests for point and range predicates."""

    def test_contains_point_inclusive(self):
        iv = Interval(10, 20)
        assert iv.contains_point(10)
        assert iv.contains_point(20)
        assert not iv.contains_point(21)

    def test_contains_range(self):
        iv = Interval(10, 20)
        assert iv.contains(10, 20)
        assert iv.contains(12, 15)
        assert not iv.contains(9, 15)

    def test_within(self):
        iv = Interval(10, 20)
        assert iv.within(0, 30)
        assert iv.within(10, 20)
        assert not iv.within(11, 30)


class TestAsInterval:
    """Tests for coercing tuples into intervals."""

    def test_interval_passes_through(self):
        iv = Interval(1, 2)
        assert as_interval(iv) is iv

    def test_pair(self):
        iv = as_interval((3, 4))
        assert (iv.low, iv.high, iv.value) == (3, 4, None)

    def test_triple(self):
        iv = as_interval((3, 4, "x"))
        assert iv.value == "x"

    @pytest.mark.parametrize("item", [(1,), (1, 2, 3, 4), "ab", 5])
    def test_malformed(self, item):
        with pytest.raises(InvalidIntervalError):
            as_interval(item)
