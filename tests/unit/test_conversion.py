from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest
from numstats import conversion
from numstats.conversion import count_into_item, from_float, into_float, register_converter
from numstats.errors import CouldNotConvert

def test_count_into_unbounded_types():
    assert count_into_item(10**30, int) == 10**30
    assert count_into_item(7, Fraction) == Fraction(7)
    assert count_into_item(10**30, Decimal) == Decimal(10**30)

def test_count_into_float_within_exact_range():
    assert count_into_item(2**53, float) == float(2**53)
    assert isinstance(count_into_item(3, float), float)

def test_count_into_float_loses_precision():
    with pytest.raises(CouldNotConvert) as excinfo:
        count_into_item(2**53 + 1, float)
    assert excinfo.value == CouldNotConvert(from_=int, to=float)

def test_count_into_float_overflows():
    with pytest.raises(CouldNotConvert):
        count_into_item(10**400, float)

def test_count_into_narrow_integer():
    assert count_into_item(127, np.int8) == 127
    with pytest.raises(CouldNotConvert) as excinfo:
        count_into_item(128, np.int8)
    assert excinfo.value.to is np.int8
    assert excinfo.value.from_ is int

def test_count_into_narrow_float():
    assert count_into_item(2**24, np.float32) == 2**24
    with pytest.raises(CouldNotConvert):
        count_into_item(2**24 + 1, np.float32)

def test_count_into_bool():
    assert count_into_item(1, bool) is True
    with pytest.raises(CouldNotConvert):
        count_into_item(2, bool)

def test_registered_converter(monkeypatch):
    monkeypatch.setattr(conversion, "_converters", {})

    class Percent(int):
        pass

    def to_percent(count):
        if count > 100:
            raise ValueError("over 100%")
        return Percent(count)

    register_converter(Percent, to_percent)
    assert isinstance(count_into_item(40, Percent), Percent)
    with pytest.raises(CouldNotConvert) as excinfo:
        count_into_item(101, Percent)
    assert excinfo.value.to is Percent

def test_into_float():
    assert into_float(Fraction(1, 4)) == 0.25
    assert into_float(Decimal("2.5")) == 2.5
    with pytest.raises(CouldNotConvert) as excinfo:
        into_float(10**400)
    assert excinfo.value == CouldNotConvert(from_=int, to=float)

def test_from_float():
    assert from_float(0.5, Fraction) == Fraction(1, 2)
    assert from_float(1.5, float) == 1.5
    with pytest.raises(CouldNotConvert) as excinfo:
        from_float(float("inf"), Fraction)
    assert excinfo.value == CouldNotConvert(from_=float, to=Fraction)
