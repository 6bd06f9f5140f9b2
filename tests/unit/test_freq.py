import math
from collections import Counter
from fractions import Fraction

import numpy as np
import pytest
from numstats import CouldNotConvert, EmptyCollection, FrequencyStats, FrequencyTable, Sample

class Histogram(FrequencyStats):
    """A caller-owned tally that opts in to FrequencyStats."""

    def __init__(self, values):
        self.counter = Counter(values)

    def __iter__(self):
        return iter(self.counter.items())

def test_weighted_scenario():
    table = FrequencyTable([(1, 2), (3, 1)])
    assert table.count() == 2
    assert table.total_count() == 3
    assert table.sum() == 5
    assert table.mean() == pytest.approx(5 / 3)
    assert table.variance() == pytest.approx(8 / 9)
    assert table.min() == 1
    assert table.max() == 3
    assert table.range() == 2

def test_matches_expanded_sequence():
    table = FrequencyTable([(1, 2), (3, 1)])
    flat = Sample([1, 1, 3])
    assert table.mean() == pytest.approx(flat.mean())
    assert table.variance() == pytest.approx(flat.variance())
    assert table.std_dev() == pytest.approx(flat.std_dev())
    assert table.expand() == flat

def test_fraction_weights_are_exact():
    table = FrequencyTable([(Fraction(1), 2), (Fraction(3), 1)])
    assert table.mean() == Fraction(5, 3)
    assert table.variance() == Fraction(8, 9)
    assert float(table.std_dev()) == pytest.approx(math.sqrt(8 / 9))

def test_integral_mean_stays_integral():
    table = FrequencyTable([(2, 3), (4, 3)])
    assert table.mean() == 3
    assert isinstance(table.mean(), int)

def test_empty_table():
    table = FrequencyTable()
    assert table.count() == 0
    assert table.total_count() == 0
    assert table.sum() == 0
    assert table.checked_mean() is None
    assert table.checked_variance() is None
    for operation in (
        table.non_zero_count,
        table.non_zero_total_count_into_item,
        table.mean,
        table.variance,
        table.std_dev,
        table.min,
        table.max,
        table.range,
    ):
        with pytest.raises(EmptyCollection):
            operation()

def test_buckets_without_items():
    table = FrequencyTable([(5, 0), (7, 0)])
    assert table.non_zero_count() == 2
    assert table.total_count() == 0
    assert table.sum() == 0
    with pytest.raises(EmptyCollection):
        table.mean()
    # extremes look at values only
    assert table.min() == 5
    assert table.range() == 2

def test_extremes_ignore_weights():
    table = FrequencyTable([(10, 1), (-2, 100), (4, 7)])
    assert table.min() == -2
    assert table.max() == 10

def test_total_count_does_not_fit_narrow_type():
    table = FrequencyTable([(np.int8(1), 100), (np.int8(2), 100)])
    with pytest.raises(CouldNotConvert) as excinfo:
        table.non_zero_total_count_into_item()
    assert excinfo.value == CouldNotConvert(from_=int, to=np.int8)
    assert table.checked_mean() is None
    with pytest.raises(CouldNotConvert):
        table.variance()

def test_bucket_count_does_not_fit_narrow_type():
    table = FrequencyTable([(np.int8(1), 200)])
    with pytest.raises(CouldNotConvert):
        table.sum()

def test_counts_are_validated():
    with pytest.raises(ValueError):
        FrequencyTable([(1.0, -1)])
    with pytest.raises(TypeError):
        FrequencyTable([(1.0, 1.5)])

def test_caller_owned_counts_are_validated():
    class Broken(FrequencyStats):
        def __iter__(self):
            return iter([(1, 2), (3, -1)])

    with pytest.raises(ValueError):
        Broken().total_count()

def test_from_values_keeps_first_seen_order():
    table = FrequencyTable.from_values([3, 1, 3, 2])
    assert list(table) == [(3, 2), (1, 1), (2, 1)]
    assert table.expand() == Sample([3, 3, 1, 2])
    assert table.mean() == Sample([3, 1, 3, 2]).mean()

def test_caller_owned_tally():
    histogram = Histogram([1.0, 1.0, 3.0])
    assert histogram.count() == 2
    assert histogram.total_count() == 3
    assert histogram.mean() == pytest.approx(5 / 3)

def test_inexact_weighted_mean_beyond_float_range():
    table = FrequencyTable([(10**400, 1), (1, 1)])
    assert table.checked_mean() is None
    with pytest.raises(CouldNotConvert) as excinfo:
        table.mean()
    assert excinfo.value == CouldNotConvert(from_=int, to=float)
