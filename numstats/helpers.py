"""Arithmetic shared by the Stats and FrequencyStats capabilities."""
from __future__ import annotations

import math
from decimal import Decimal
from numbers import Integral
from typing import Any, Iterable, Optional, Tuple

from numstats.conversion import from_float, into_float
from numstats.errors import CouldNotConvert, EmptyCollection
from numstats.types import Numeric

__all__: list[str] = [
    "divide",
    "extremes",
    "square_root",
]


def divide(total: Numeric, divisor: Numeric) -> Numeric:
    """Divide within the element domain.

    Integral operands stay integral while the quotient is exact and fall back
    to true division otherwise, the same way ``statistics.mean`` treats ints.
    An inexact quotient of ints beyond float range raises ``CouldNotConvert``.
    """
    if isinstance(total, Integral) and isinstance(divisor, Integral):
        if total % divisor == 0:
            return total // divisor
        try:
            return total / divisor
        except OverflowError:
            raise CouldNotConvert(from_=type(total), to=float) from None
    return total / divisor


def square_root(value: Numeric) -> Numeric:
    if isinstance(value, Decimal):
        return value.sqrt()
    root = math.sqrt(into_float(value))
    if isinstance(value, Integral):
        return root
    return from_float(root, type(value))


def _is_nan(value: Any) -> bool:
    return value != value


def extremes(values: Iterable[Any]) -> Tuple[Any, Any]:
    """Return ``(smallest, largest)`` in one pass.

    Ties keep the first value seen. NaN never wins against a number, so it
    is only returned when every value is NaN.
    """
    smallest: Optional[Any] = None
    largest: Optional[Any] = None
    seen = False
    for value in values:
        if not seen:
            smallest = largest = value
            seen = True
            continue
        if _is_nan(value):
            continue
        if _is_nan(smallest) or value < smallest:
            smallest = value
        if _is_nan(largest) or value > largest:
            largest = value
    if not seen:
        raise EmptyCollection()
    return smallest, largest
