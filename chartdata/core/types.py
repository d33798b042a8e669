# chartdata/core/types.py
from __future__ import annotations
"""
Display-oriented value classification: column type tags and missing-value checks.
"""

import datetime as dt
import decimal
import math
import numbers
from enum import Enum
from typing import Any

import numpy as np

__all__ = [
    "ColumnType",
    "classify_value",
    "is_missing",
    "values_equal",
]

# numpy datetime64 units at or coarser than one day
_DATE_UNITS = frozenset({"Y", "M", "W", "D"})


class ColumnType(str, Enum):
    """Type tag used by renderers to pick an axis/scale."""
    NUMBER = "number"
    STRING = "string"
    DATETIME = "datetime"
    DATE = "date"
    UNKNOWN = "unknown"              # sampled value of some other kind
    INDETERMINATE = "indeterminate"  # nothing to sample (empty dataset)


def classify_value(value: Any) -> ColumnType:
    """
    Map a single sampled value to its ColumnType.

    Order matters: bool is an int subclass and datetime is a date subclass,
    so both are checked before their parents.
    """
    if isinstance(value, (bool, np.bool_)):
        return ColumnType.UNKNOWN
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        return ColumnType.NUMBER
    if isinstance(value, str):
        return ColumnType.STRING
    if isinstance(value, np.datetime64):
        unit, _ = np.datetime_data(value.dtype)
        return ColumnType.DATE if unit in _DATE_UNITS else ColumnType.DATETIME
    if isinstance(value, dt.datetime):
        return ColumnType.DATETIME
    if isinstance(value, dt.date):
        return ColumnType.DATE
    return ColumnType.UNKNOWN


def is_missing(value: Any, *, nan: bool = True) -> bool:
    """True for None and, when *nan* is set, for float/numpy NaN and NaT."""
    if value is None:
        return True
    if not nan:
        return False
    if isinstance(value, (float, np.floating)):
        return math.isnan(value)
    if isinstance(value, (np.datetime64, np.timedelta64)):
        return bool(np.isnat(value))
    return False


def values_equal(a: Any, b: Any) -> bool:
    """Standard equality, with ndarrays compared element-wise as a whole."""
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)
