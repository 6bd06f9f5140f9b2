"""Weighted statistics over frequency tables."""
from __future__ import annotations

from typing import Sequence, Tuple

from numstats.collections import FrequencyTable
from numstats.services.numeric import require_finite

__all__: list[str] = [
    "frequency_summary",
]


def frequency_summary(buckets: Sequence[Tuple[float, int]]) -> dict[str, float]:
    """
    Compute the statistics of the sequence a (value, count) table stands for,
    without expanding it. Raises EmptyCollection if the table holds no items,
    ValueError if a count is negative or a result is not finite.
    """
    table = FrequencyTable(buckets)
    summary = {
        "count": table.count(),
        "total_count": table.total_count(),
        "sum": table.sum(),
        "mean": table.mean(),
        "variance": table.variance(),
        "std_dev": table.std_dev(),
        "min": table.min(),
        "max": table.max(),
        "range": table.range(),
    }
    require_finite(summary)
    return summary
