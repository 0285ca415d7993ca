"""First-match-wins lookup over ordered (key, value) tables."""

from __future__ import annotations

import operator
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Container, Sequence, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")

Table = Sequence[Tuple[K, V]]


def first_match(
    value: float,
    table: Table,
    default: V,
    matches: Callable[[float, K], bool] = operator.le,
) -> V:
    """Return the value paired with the first key that ``value`` matches.

    By default a row matches when ``value <= key``, so tables are written as
    ascending inclusive upper bounds. Falls back to ``default`` when no row
    matches.
    """

    for key, result in table:
        if matches(value, key):
            return result
    return default


def is_member(value: float, codes: Container[float]) -> bool:
    return value in codes


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going away from zero."""

    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
