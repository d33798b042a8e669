# chartdata/core/shapes.py
from __future__ import annotations
"""
Row-shape strategies: how a column selector resolves to a locator and how a
locator reads a value out of one raw row.

The shape is detected once, from the first row, when a Dataset is built.
"""

import logging
import warnings
from collections.abc import Mapping, Sequence
from operator import itemgetter
from typing import Any, Callable, ClassVar, List, Optional

import numpy as np

from .errors import HeaderWidthWarning, InvalidInputError

__all__ = [
    "RowShape",
    "EmptyRows",
    "KeyedRows",
    "StructuredRows",
    "PositionalRows",
    "detect_shape",
    "is_ordered_sequence",
]

_log = logging.getLogger("chartdata.shapes")


def is_ordered_sequence(obj: Any) -> bool:
    """True for lists, tuples, ranges and ndarrays of at least one dimension; False for text."""
    if isinstance(obj, np.ndarray):
        return obj.ndim >= 1
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def _is_position(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

class RowShape:
    """
    Resolution/read strategy shared by every row of a dataset.

    resolve(name)      -> locator or None, for label lookups (column_index)
    locate(selector)   -> locator or None, for accessors (value_fn)
    label(locator)     -> the column's public name (column_name)
    read(row, locator) -> value
    reader(locator)    -> row -> value, bound to the locator only
    """
    kind: ClassVar[str] = "abstract"

    def column_names(self) -> List[Any]:
        raise NotImplementedError

    def resolve(self, name: Any) -> Optional[Any]:
        raise NotImplementedError

    def locate(self, selector: Any) -> Optional[Any]:
        return self.resolve(selector)

    def is_resolvable(self, selector: Any) -> bool:
        return self.locate(selector) is not None

    def label(self, locator: Any) -> Any:
        return locator

    def read(self, row: Any, locator: Any) -> Any:
        return self.reader(locator)(row)

    def reader(self, locator: Any) -> Callable[[Any], Any]:
        return itemgetter(locator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EmptyRows(RowShape):
    """No rows to inspect: nothing resolves by name, selectors pass through."""
    kind = "empty"

    def column_names(self) -> List[Any]:
        return []

    def resolve(self, name: Any) -> Optional[Any]:
        return None

    def locate(self, selector: Any) -> Optional[Any]:
        return selector

    def is_resolvable(self, selector: Any) -> bool:
        return True

    def reader(self, locator: Any) -> Callable[[Any], Any]:
        def read(row: Any) -> Any:
            if isinstance(row, Mapping):
                return row.get(locator)
            return row[locator]

        return read


class KeyedRows(RowShape):
    """Rows are mappings; the key is the column."""
    kind = "keyed"

    def __init__(self, first_row: Mapping[Any, Any], *, missing_value: Any = None) -> None:
        self._first = first_row
        self._missing = missing_value

    def column_names(self) -> List[Any]:
        return list(self._first.keys())

    def resolve(self, name: Any) -> Optional[Any]:
        try:
            return name if name in self._first else None
        except TypeError:  # unhashable selector
            return None

    def locate(self, selector: Any) -> Optional[Any]:
        # key sets are assumed uniform; absence is handled per row by the reader
        return selector

    def is_resolvable(self, selector: Any) -> bool:
        return self.resolve(selector) is not None

    def reader(self, locator: Any) -> Callable[[Any], Any]:
        missing = self._missing
        return lambda row: row.get(locator, missing)

    def __repr__(self) -> str:
        return f"KeyedRows(keys={self.column_names()!r})"


class StructuredRows(RowShape):
    """Rows are numpy structured records; dtype field names are the columns."""
    kind = "structured"

    def __init__(self, names: Sequence[str]) -> None:
        self._names = tuple(names)

    def column_names(self) -> List[Any]:
        return list(self._names)

    def resolve(self, name: Any) -> Optional[Any]:
        return name if isinstance(name, str) and name in self._names else None

    def __repr__(self) -> str:
        return f"StructuredRows(names={self._names!r})"


class PositionalRows(RowShape):
    """Rows are fixed-width sequences, optionally labelled by headers."""
    kind = "positional"

    def __init__(self, width: int, headers: Optional[Sequence[Any]] = None) -> None:
        self.width = width
        self.headers = headers

    def column_names(self) -> List[Any]:
        if self.headers is None:
            return list(range(self.width))
        return list(self.headers)

    def resolve(self, name: Any) -> Optional[int]:
        if self.headers is None:
            return None
        for i, label in enumerate(self.headers):
            if _labels_equal(label, name):
                return i
        return None

    def locate(self, selector: Any) -> Optional[int]:
        if self.headers is not None:
            return self.resolve(selector)
        if _is_position(selector) and 0 <= selector < self.width:
            return int(selector)
        return None

    def label(self, locator: Any) -> Any:
        if self.headers is not None and _is_position(locator) and 0 <= locator < len(self.headers):
            return self.headers[locator]
        return locator

    def __repr__(self) -> str:
        return f"PositionalRows(width={self.width}, headers={self.headers!r})"


def _labels_equal(label: Any, name: Any) -> bool:
    try:
        return bool(label == name)
    except (TypeError, ValueError):  # array-like comparands
        return False


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------

def detect_shape(
    data: Any,
    headers: Optional[Sequence[Any]] = None,
    *,
    missing_value: Any = None,
) -> RowShape:
    """
    Pick the row strategy from the first row of *data*.

    Raises InvalidInputError if the first row is neither a mapping, a
    structured record, nor an ordered sequence.
    """
    if isinstance(data, np.ndarray) and data.dtype.names:
        return StructuredRows(data.dtype.names)
    if len(data) == 0:
        if headers is not None:
            return PositionalRows(len(headers), headers)
        return EmptyRows()

    first = data[0]
    if isinstance(first, Mapping):
        if headers is not None:
            _log.debug("headers ignored for keyed rows")
        return KeyedRows(first, missing_value=missing_value)
    if isinstance(first, np.void) and first.dtype.names:
        return StructuredRows(first.dtype.names)
    if is_ordered_sequence(first):
        width = len(first)
        if headers is not None and len(headers) != width:
            warnings.warn(
                f"{len(headers)} headers for rows of width {width}",
                HeaderWidthWarning,
                stacklevel=4,
            )
        return PositionalRows(width, headers)
    raise InvalidInputError(
        f"Unsupported row type: {type(first).__name__}",
        context={"row": first},
    )
