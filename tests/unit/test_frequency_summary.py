import pytest
from numstats.errors import EmptyCollection
from numstats.services.frequency import frequency_summary

def test_frequency_summary_basic():
    result = frequency_summary([(1, 2), (3, 1)])
    assert result["count"] == 2
    assert result["total_count"] == 3
    assert result["sum"] == 5
    assert result["mean"] == pytest.approx(5 / 3)
    assert result["variance"] == pytest.approx(8 / 9)
    assert result["min"] == 1
    assert result["max"] == 3

def test_frequency_summary_without_items():
    with pytest.raises(EmptyCollection):
        frequency_summary([(4, 0)])

def test_frequency_summary_negative_count():
    with pytest.raises(ValueError):
        frequency_summary([(4, -2)])

def test_frequency_summary_overflowing_floats():
    with pytest.raises(ValueError, match="not a finite number"):
        frequency_summary([(1e308, 2)])
