"""The ``FrequencyStats`` capability: weighted aggregates over (value, count) buckets."""
from __future__ import annotations

import builtins
import functools
import operator
from typing import Any, Iterator, Optional, Tuple

from numstats.conversion import count_into_item
from numstats.errors import EmptyCollection, StatsError
from numstats.helpers import divide, extremes, square_root
from numstats.types import Count, Frequency, Result

__all__: list[str] = [
    "FrequencyStats",
    "validate_count",
]


def validate_count(count: Any) -> Count:
    """Return ``count`` as an int, rejecting non-integral or negative weights."""
    count = operator.index(count)
    if count < 0:
        raise ValueError(f"frequency count must not be negative, got {count}")
    return count


class FrequencyStats:
    """Mixin granting statistics to a collection of ``(value, count)`` pairs.

    Each pair says that ``value`` occurred ``count`` times. The aggregates are
    the ones the expanded sequence would give, computed from the buckets
    without ever expanding them: ``[(1, 2), (3, 1)]`` has the mean of
    ``[1, 1, 3]``.

    ``count`` is the number of buckets; ``total_count`` is the number of
    items they stand for. Like ``Stats``, the conforming class only needs an
    ``__iter__`` that yields a fresh iterator each call.
    """

    item_type: Optional[type] = None

    def _buckets(self) -> Iterator[Frequency[Any]]:
        for value, count in self:
            yield value, validate_count(count)

    def _resolve_item_type(self) -> type:
        if self.item_type is not None:
            return self.item_type
        for value, _ in self:
            return type(value)
        raise EmptyCollection()

    def _weighted(self) -> Iterator[Tuple[Any, Any]]:
        # Each count is converted into the element type before it multiplies a value.
        item_type = self._resolve_item_type()
        for value, count in self._buckets():
            yield value, count_into_item(count, item_type)

    def count(self) -> Count:
        """Number of buckets."""
        return builtins.sum(1 for _ in self)

    def non_zero_count(self) -> Result[Count]:
        count = self.count()
        if count == 0:
            raise EmptyCollection()
        return count

    def total_count(self) -> Count:
        """Number of items the buckets stand for, ``Σ count``."""
        return builtins.sum(count for _, count in self._buckets())

    def non_zero_total_count_into_item(self) -> Result[Any]:
        """``total_count`` converted into the element type.

        Raises ``EmptyCollection`` when the buckets hold no items and
        ``CouldNotConvert`` when the total has no exact representation in the
        element type.
        """
        total = self.total_count()
        if total == 0:
            raise EmptyCollection()
        return count_into_item(total, self._resolve_item_type())

    def sum(self) -> Any:
        """``Σ value * count``; ``0`` when there are no buckets."""
        if self.count() == 0:
            return 0
        return functools.reduce(
            operator.add,
            (value * weight for value, weight in self._weighted()),
        )

    def _mean(self) -> Result[Any]:
        total = self.non_zero_total_count_into_item()
        return divide(self.sum(), total)

    def mean(self) -> Any:
        """Weighted mean, ``Σ value * count / Σ count``.

        Raises ``EmptyCollection`` when there are no items and
        ``CouldNotConvert`` when a count does not fit the element type.
        """
        return self._mean()

    def checked_mean(self) -> Optional[Any]:
        """Like ``mean``, but ``None`` where ``mean`` would raise."""
        try:
            return self._mean()
        except StatsError:
            return None

    def variance(self) -> Result[Any]:
        """Weighted population variance, divided by ``total_count``."""
        mean = self._mean()
        squares = functools.reduce(
            operator.add,
            ((value - mean) * (value - mean) * weight for value, weight in self._weighted()),
        )
        return divide(squares, self.non_zero_total_count_into_item())

    def checked_variance(self) -> Optional[Any]:
        try:
            return self.variance()
        except StatsError:
            return None

    def std_dev(self) -> Result[Any]:
        return square_root(self.variance())

    def _values(self) -> Iterator[Any]:
        for value, _ in self:
            yield value

    def min(self) -> Any:
        """Smallest value, ignoring counts. Raises ``EmptyCollection`` if there are no buckets."""
        return extremes(self._values())[0]

    def max(self) -> Any:
        """Largest value, ignoring counts. Raises ``EmptyCollection`` if there are no buckets."""
        return extremes(self._values())[1]

    def range(self) -> Any:
        smallest, largest = extremes(self._values())
        return largest - smallest
