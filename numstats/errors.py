"""Failure kinds raised by the statistics capabilities.

The set is closed: an aggregate either has no elements to work on
(``EmptyCollection``) or needs a numeric conversion that has no exact
result (``CouldNotConvert``). Higher-level operations re-raise these
unchanged, so callers can tell the two apart with a plain ``except``.
"""
from __future__ import annotations

__all__: list[str] = [
    "StatsError",
    "EmptyCollection",
    "CouldNotConvert",
]


class StatsError(ValueError):
    """Base class for statistics failures. Only the two variants below are raised."""

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class EmptyCollection(StatsError):
    """The aggregate is undefined for a collection with no elements."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "collection is empty"

    def __repr__(self) -> str:
        return "EmptyCollection()"


class CouldNotConvert(StatsError):
    """A value could not be represented exactly in the destination type."""

    def __init__(self, from_: type, to: type) -> None:
        super().__init__(from_, to)
        self.from_ = from_
        self.to = to

    def __str__(self) -> str:
        return f"could not convert {_type_name(self.from_)} to {_type_name(self.to)}"

    def __repr__(self) -> str:
        return f"CouldNotConvert(from_={_type_name(self.from_)}, to={_type_name(self.to)})"


def _type_name(tp: type) -> str:
    module = getattr(tp, "__module__", "builtins")
    if module == "builtins":
        return tp.__qualname__
    return f"{module}.{tp.__qualname__}"
