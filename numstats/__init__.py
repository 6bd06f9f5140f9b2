"""Statistics capabilities for re-iterable collections of numbers."""
from __future__ import annotations

from numstats import types
from numstats.collections import FrequencyTable, Sample
from numstats.errors import CouldNotConvert, EmptyCollection, StatsError
from numstats.freq import FrequencyStats
from numstats.stats import Stats
from numstats.types import Result

__all__: list[str] = [
    "CouldNotConvert",
    "EmptyCollection",
    "FrequencyStats",
    "FrequencyTable",
    "Result",
    "Sample",
    "Stats",
    "StatsError",
    "types",
]

__version__ = "1.0.0"
