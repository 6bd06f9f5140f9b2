"""Numeric statistics helpers."""
from __future__ import annotations

import math
from typing import Any, Mapping, Sequence

from numstats.collections import Sample

__all__: list[str] = [
    "numeric_summary",
    "require_finite",
]


def require_finite(summary: Mapping[str, Any]) -> None:
    """
    Raise ValueError if any statistic has no finite float value, e.g. a sum of
    large floats that overflowed to inf or an int too large for a float.
    """
    for name, value in summary.items():
        try:
            finite = math.isfinite(value)
        except OverflowError:
            finite = False
        if not finite:
            raise ValueError(f"'{name}' is not a finite number")


def numeric_summary(values: Sequence[float] | Sequence[int]) -> dict[str, float]:
    """
    Compute count, sum, mean, variance, std_dev, min, max and range for a sequence of numbers.
    Raises EmptyCollection if input is empty, ValueError if a result is not finite.
    """
    sample = Sample(values)
    summary = {
        "count": sample.count(),
        "sum": sample.sum(),
        "mean": sample.mean(),
        "variance": sample.variance(),
        "std_dev": sample.std_dev(),
        "min": sample.min(),
        "max": sample.max(),
        "range": sample.range(),
    }
    require_finite(summary)
    return summary
