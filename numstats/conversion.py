"""Exact conversions between counts, element types and ``float``.

Every aggregate that mixes a cardinality with element values (a mean is
``sum / count``) goes through here. A conversion either produces a value
that round-trips exactly or raises ``CouldNotConvert``; nothing is
truncated or saturated.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from numstats.errors import CouldNotConvert
from numstats.types import Count

__all__: list[str] = [
    "count_into_item",
    "from_float",
    "into_float",
    "register_converter",
]

logger = logging.getLogger(__name__)

# Errors a numeric constructor may raise for a value it cannot hold
CONVERSION_ERRORS = (TypeError, ValueError, ArithmeticError)

_converters: Dict[type, Callable[[Count], Any]] = {}


def register_converter(item_type: type, func: Callable[[Count], Any]) -> None:
    """Use ``func`` to turn counts into ``item_type``.

    ``func`` receives the count and returns the converted value, or raises
    ``TypeError``, ``ValueError`` or ``ArithmeticError`` when it cannot.
    The result is still checked for an exact round trip.
    """
    _converters[item_type] = func


def count_into_item(count: Count, item_type: type) -> Any:
    """Convert a count into ``item_type``, refusing anything inexact."""
    convert = _converters.get(item_type, item_type)
    try:
        converted = convert(count)
        exact = int(converted) == count
    except CONVERSION_ERRORS:
        exact = False
    if not exact:
        logger.debug("Count %d has no exact %s representation", count, item_type.__name__)
        raise CouldNotConvert(from_=int, to=item_type)
    return converted


def into_float(value: Any) -> float:
    """Convert an element value into ``float`` for math that only floats support."""
    try:
        converted = float(value)
    except CONVERSION_ERRORS:
        logger.debug("Value of type %s does not fit a float", type(value).__name__)
        raise CouldNotConvert(from_=type(value), to=float) from None
    return converted


def from_float(value: float, item_type: type) -> Any:
    """Convert a ``float`` result back into the element type."""
    if item_type is float:
        return value
    try:
        converted = item_type(value)
    except CONVERSION_ERRORS:
        logger.debug("Float %r has no %s representation", value, item_type.__name__)
        raise CouldNotConvert(from_=float, to=item_type) from None
    return converted
