"""The ``Stats`` capability: aggregates over a re-iterable collection of numbers."""
from __future__ import annotations

import builtins
import functools
import operator
from typing import Any, Optional

from numstats.conversion import count_into_item
from numstats.errors import EmptyCollection, StatsError
from numstats.helpers import divide, extremes, square_root
from numstats.types import Count, Result

__all__: list[str] = [
    "Stats",
]


class Stats:
    """Mixin granting statistics to any collection that can be iterated repeatedly.

    A conforming class only needs an ``__iter__`` that returns a fresh
    iterator on every call (lists, tuples and arrays already do). Every
    method below walks such a fresh iterator, so the collection is never
    mutated and no state survives between calls.

    The element type used for count conversions is ``item_type`` when the
    class sets it, otherwise the type of the first element.

    Example::

        class Readings(Stats):
            def __init__(self, values):
                self.values = list(values)

            def __iter__(self):
                return iter(self.values)

        Readings([1.0, 2.0, 3.0]).variance()  # 0.666...
    """

    item_type: Optional[type] = None

    def _resolve_item_type(self) -> type:
        if self.item_type is not None:
            return self.item_type
        for first in self:
            return type(first)
        raise EmptyCollection()

    def count(self) -> Count:
        """Number of elements in the collection."""
        return builtins.sum(1 for _ in self)

    def non_zero_count(self) -> Result[Count]:
        """Like ``count``, but raise ``EmptyCollection`` for an empty collection."""
        count = self.count()
        if count == 0:
            raise EmptyCollection()
        return count

    def non_zero_count_into_item(self) -> Result[Any]:
        """The element count converted into the element type.

        Raises ``EmptyCollection`` when there are no elements and
        ``CouldNotConvert`` when the count has no exact representation in the
        element type, e.g. 128 elements of ``numpy.int8``.
        """
        return count_into_item(self.non_zero_count(), self._resolve_item_type())

    def sum(self) -> Any:
        """Total of all elements; ``0`` for an empty collection."""
        values = iter(self)
        for first in values:
            return functools.reduce(operator.add, values, first)
        return 0

    def _mean(self) -> Result[Any]:
        return divide(self.sum(), self.non_zero_count_into_item())

    def mean(self) -> Any:
        """Arithmetic mean.

        Raises ``EmptyCollection`` for an empty collection and
        ``CouldNotConvert`` if the length does not fit the element type; use
        ``checked_mean`` to get ``None`` instead. Ints divide exactly when
        they can, so ``[1, 2, 3]`` gives ``2`` and ``[1, 2, 3, 4]`` gives ``2.5``.
        """
        return self._mean()

    def checked_mean(self) -> Optional[Any]:
        """Like ``mean``, but ``None`` where ``mean`` would raise."""
        try:
            return self._mean()
        except StatsError:
            return None

    def variance(self) -> Result[Any]:
        """Population variance: the mean squared deviation from the mean."""
        mean = self._mean()
        squares = functools.reduce(
            operator.add,
            ((value - mean) * (value - mean) for value in self),
        )
        return divide(squares, self.non_zero_count_into_item())

    def checked_variance(self) -> Optional[Any]:
        try:
            return self.variance()
        except StatsError:
            return None

    def std_dev(self) -> Result[Any]:
        """Population standard deviation, the square root of ``variance``."""
        return square_root(self.variance())

    def min(self) -> Any:
        """Smallest element; the first one wins a tie. Raises ``EmptyCollection`` if empty."""
        return extremes(self)[0]

    def max(self) -> Any:
        """Largest element; the first one wins a tie. Raises ``EmptyCollection`` if empty."""
        return extremes(self)[1]

    def range(self) -> Any:
        """``max() - min()``. Raises ``EmptyCollection`` if empty."""
        smallest, largest = extremes(self)
        return largest - smallest
