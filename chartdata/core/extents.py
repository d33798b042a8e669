# chartdata/core/extents.py
from __future__ import annotations
"""
Extent reduction over column values: single pass, missing-value tolerant.
"""

import logging
from collections.abc import Set
from typing import Any, Callable, Iterable, NamedTuple, Optional, Sequence

import numpy as np

from .errors import ColumnTypeMismatchError
from .types import is_missing

__all__ = [
    "Extent",
    "reduce_extent",
    "sum_values",
]

_log = logging.getLogger("chartdata.extents")


class Extent(NamedTuple):
    """(min, max) pair; both None when nothing was observed."""
    min: Any
    max: Any


def reduce_extent(
    values: Iterable[Any],
    *,
    skip_missing: bool = True,
    skip_nan: bool = True,
    column: Any = None,
) -> Extent:
    """
    Return the Extent of *values* in one pass.

    Raises ColumnTypeMismatchError if two observed values cannot be ordered.
    """
    lo: Any = None
    hi: Any = None
    seen = False
    seen_bool = False
    for v in values:
        if v is None:
            if skip_missing:
                continue
        elif skip_nan and is_missing(v):
            continue
        _check_orderable(v, column)
        if not seen:
            lo = hi = v
            seen = True
            seen_bool = _is_bool(v)
            continue
        if _is_bool(v) != seen_bool:
            _log.debug("bool mixed with non-bool values in column %r", column)
            raise ColumnTypeMismatchError(
                f"Cannot order {type(v).__name__} against {type(lo).__name__} in column {column!r}",
                context={"column": column, "value": v, "current_min": lo},
            )
        try:
            if v < lo:
                lo = v
            if v > hi:
                hi = v
        except TypeError as e:
            _log.debug("unorderable values in column %r: %r vs %r", column, v, lo)
            raise ColumnTypeMismatchError(
                f"Cannot order {type(v).__name__} against {type(lo).__name__} in column {column!r}",
                context={"column": column, "value": v, "current_min": lo},
            ) from e
    return Extent(lo, hi)


def sum_values(
    row: Any,
    accessors: Sequence[Callable[[Any], Any]],
    *,
    missing_as_zero: bool = True,
    skip_nan: bool = True,
    columns: Optional[Sequence[Any]] = None,
) -> Any:
    """
    Sum the values the *accessors* read from *row*.

    Missing values (None, and NaN when *skip_nan* is set) count as 0 when
    *missing_as_zero* is set. Raises ColumnTypeMismatchError for values
    that cannot be added.
    """
    total: Any = 0
    for accessor in accessors:
        v = accessor(row)
        if missing_as_zero and is_missing(v, nan=skip_nan):
            continue
        try:
            total = total + v
        except TypeError as e:
            raise ColumnTypeMismatchError(
                f"Cannot add {type(v).__name__} to {type(total).__name__}",
                context={"columns": list(columns or ()), "value": v},
            ) from e
    return total


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _check_orderable(value: Any, column: Any) -> None:
    # subset comparison is a partial order; min/max over it is meaningless
    if isinstance(value, Set):
        _log.debug("set value in column %r", column)
        raise ColumnTypeMismatchError(
            f"Cannot order {type(value).__name__} values in column {column!r}",
            context={"column": column, "value": value},
        )
