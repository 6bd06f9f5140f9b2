"""Named aliases shared by the statistics capabilities."""
from __future__ import annotations

from typing import Annotated, Any, Protocol, Tuple, TypeVar

from numstats.errors import StatsError

__all__: list[str] = [
    "Count",
    "Frequency",
    "Numeric",
    "Result",
    "T",
]

T = TypeVar("T")

# Cardinality of a collection
Count = int

# Return annotation for operations that raise StatsError instead of returning.
# Result[float] reads as "a float, or StatsError raised".
Result = Annotated[T, StatsError]

# A (value, count) bucket of a frequency table
Frequency = Tuple[T, Count]


class Numeric(Protocol):
    """Arithmetic and ordering an element type needs for the aggregates."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...
