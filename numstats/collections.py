"""Immutable collections that adopt the statistics capabilities."""
from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, Iterator, Optional, Tuple

from numstats.freq import FrequencyStats, validate_count
from numstats.stats import Stats
from numstats.types import Frequency

__all__: list[str] = [
    "FrequencyTable",
    "Sample",
]


class Sample(Stats):
    """A snapshot of values with ``Stats`` attached.

    Any iterable is materialized on construction, so one-shot iterators
    such as generators can be aggregated more than once.
    """

    def __init__(self, values: Iterable[Any] = (), item_type: Optional[type] = None) -> None:
        self._values: Tuple[Any, ...] = tuple(values)
        if item_type is not None:
            self.item_type = item_type

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> Any:
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sample):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Sample({list(self._values)!r})"


class FrequencyTable(FrequencyStats):
    """A snapshot of ``(value, count)`` buckets with ``FrequencyStats`` attached."""

    def __init__(
        self,
        buckets: Iterable[Frequency[Any]] = (),
        item_type: Optional[type] = None,
    ) -> None:
        self._pairs: Tuple[Frequency[Any], ...] = tuple(
            (value, validate_count(count)) for value, count in buckets
        )
        if item_type is not None:
            self.item_type = item_type

    @classmethod
    def from_values(cls, values: Iterable[Any], item_type: Optional[type] = None) -> FrequencyTable:
        """Tally raw values into buckets, keeping first-seen order."""
        return cls(Counter(values).items(), item_type=item_type)

    def expand(self) -> Sample:
        """The flat sequence the buckets stand for."""
        return Sample(
            (value for value, count in self._pairs for _ in range(count)),
            item_type=self.item_type,
        )

    def __iter__(self) -> Iterator[Frequency[Any]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        return f"FrequencyTable({list(self._pairs)!r})"
