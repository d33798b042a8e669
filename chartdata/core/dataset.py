# chartdata/core/dataset.py
from __future__ import annotations
"""
Dataset: a read-only view over rows given as mappings, structured records, or
fixed-width sequences (optionally labelled by headers).

Every operation is a pure read. The Dataset borrows the row collection and
never copies or mutates it; "changing" a dataset means building a new one.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence

from .errors import (
    EmptySelectionError,
    InvalidInputError,
    UnresolvedColumnError,
)
from .extents import Extent, reduce_extent, sum_values
from .shapes import RowShape, detect_shape, is_ordered_sequence
from .types import ColumnType, classify_value, values_equal

__all__ = [
    "AccessPolicy",
    "Accessor",
    "Dataset",
]

_log = logging.getLogger("chartdata.dataset")

Accessor = Callable[[Any], Any]


@dataclass(frozen=True)
class AccessPolicy:
    """
    How missing values are read and aggregated.

    Attributes:
        missing_value: Returned by keyed accessors when a row lacks the key.
        skip_missing: Extents ignore None values.
        skip_nan: Extents ignore float/numpy NaN (and NaT).
        missing_as_zero: Combined sums count missing values (None, and NaN
            when skip_nan is set) as 0.
    """
    missing_value: Any = None
    skip_missing: bool = True
    skip_nan: bool = True
    missing_as_zero: bool = True


@dataclass(frozen=True, eq=False, repr=False)
class Dataset:
    """
    Uniform accessor over a row collection.

    Attributes:
        data: Ordered sequence of rows (mappings or fixed-width sequences),
              or a 2-D / structured numpy array.
        headers: Optional labels for positional rows, position for position.
        title: Optional display title.
        style: Optional renderer style hints.
        meta: Free-form metadata for consumers.
        policy: Missing-value handling (see AccessPolicy).
    """
    data: Sequence[Any]
    headers: Optional[Sequence[Any]] = None
    title: Optional[str] = None
    style: Optional[Any] = None
    meta: Mapping[str, Any] = field(default_factory=dict)
    policy: AccessPolicy = field(default_factory=AccessPolicy)
    _shape: RowShape = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if not is_ordered_sequence(self.data):
            raise InvalidInputError(
                f"data must be an ordered sequence of rows, got {type(self.data).__name__}",
                context={"argument": "data", "type": type(self.data).__name__},
            )
        if self.headers is not None and not is_ordered_sequence(self.headers):
            raise InvalidInputError(
                f"headers must be an ordered sequence of labels, got {type(self.headers).__name__}",
                context={"argument": "headers", "type": type(self.headers).__name__},
            )
        if self.policy is None:
            object.__setattr__(self, "policy", AccessPolicy())
        shape = detect_shape(self.data, self.headers, missing_value=self.policy.missing_value)
        object.__setattr__(self, "_shape", shape)
        _log.debug("dataset of %d rows, shape %r", len(self.data), shape)

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"Dataset(rows={len(self.data)}, shape={self._shape!r}, title={self.title!r})"

    @property
    def row_kind(self) -> str:
        """'keyed', 'structured', 'positional', or 'empty'."""
        return self._shape.kind

    # --- descriptive copies ---

    def with_title(self, title: Optional[str]) -> "Dataset":
        """Return a new Dataset over the same rows with *title* set."""
        return dataclasses.replace(self, title=title)

    def with_style(self, style: Any) -> "Dataset":
        """Return a new Dataset over the same rows with *style* set."""
        return dataclasses.replace(self, style=style)

    def with_meta(self, meta: Mapping[str, Any]) -> "Dataset":
        """Return a new Dataset over the same rows with *meta* replaced."""
        return dataclasses.replace(self, meta=dict(meta))

    # --- resolution ---

    def column_names(self) -> List[Any]:
        """
        Column identifiers: the first row's keys (keyed rows; order is not
        guaranteed meaningful), the headers, or 0..width-1 without headers.
        """
        return self._shape.column_names()

    def column_index(self, column_name: Any) -> Optional[Any]:
        """
        Key or position that addresses *column_name* on a raw row, or None.

        Headerless positional datasets have no labels, so this is always None
        for them; address those columns by position directly.
        """
        return self._shape.resolve(column_name)

    def column_name(self, column_index: Any) -> Any:
        """Header label at *column_index*; echoes the index when out of range or unlabelled."""
        return self._shape.label(column_index)

    # --- accessors ---

    def value_fn(self, column: Any) -> Accessor:
        """
        Return a reusable `row -> value` accessor for *column*.

        The column resolves once, here. If it does not resolve, the returned
        accessor raises UnresolvedColumnError each time it is called.
        """
        locator = self._shape.locate(column)
        if locator is None:
            _log.debug("column %r did not resolve for %r", column, self._shape)

            def unresolved(row: Any) -> Any:
                raise UnresolvedColumnError(
                    f"Column {column!r} does not resolve in this dataset",
                    context={"column": column},
                )

            return unresolved
        return self._shape.reader(locator)

    def column_values(self, column: Any) -> Iterable[Any]:
        """Lazily yield *column* for every row."""
        accessor = self.value_fn(column)
        return (accessor(row) for row in self.data)

    # --- inference ---

    def guess_column_type(self, column: Any) -> ColumnType:
        """
        Guess a display type from the first row only.

        Later rows are not inspected, so a mixed column reports whatever its
        first value is. Empty datasets report ColumnType.INDETERMINATE.
        """
        if len(self.data) == 0:
            return ColumnType.INDETERMINATE
        return classify_value(self.value_fn(column)(self.data[0]))

    # --- aggregation ---

    def column_extents(self, column: Any) -> Extent:
        """(min, max) of *column* across all rows; Extent(None, None) if nothing observed."""
        return reduce_extent(
            self.column_values(column),
            skip_missing=self.policy.skip_missing,
            skip_nan=self.policy.skip_nan,
            column=column,
        )

    def combined_column_extents(self, columns: Sequence[Any]) -> Extent:
        """
        (min, max) of the per-row sum over *columns*, for stacked encodings.

        Every column must resolve; an empty selection is an error.
        """
        if not is_ordered_sequence(columns):
            raise InvalidInputError(
                f"columns must be an ordered sequence, got {type(columns).__name__}",
                context={"argument": "columns"},
            )
        columns = list(columns)
        if not columns:
            raise EmptySelectionError("At least one column is required.")
        for c in columns:
            if not self._shape.is_resolvable(c):
                raise UnresolvedColumnError(
                    f"Column {c!r} does not resolve in this dataset",
                    context={"column": c, "columns": columns},
                )

        accessors = [self.value_fn(c) for c in columns]
        missing_as_zero = self.policy.missing_as_zero
        sums = (
            sum_values(
                row,
                accessors,
                missing_as_zero=missing_as_zero,
                skip_nan=self.policy.skip_nan,
                columns=columns,
            )
            for row in self.data
        )
        return reduce_extent(
            sums,
            skip_missing=self.policy.skip_missing,
            skip_nan=self.policy.skip_nan,
            column=tuple(columns),
        )

    def unique_values(self, column: Any) -> List[Any]:
        """Distinct values of *column* in first-occurrence order."""
        seen: set = set()
        unhashable: List[Any] = []
        out: List[Any] = []
        for v in self.column_values(column):
            try:
                if v in seen:
                    continue
                seen.add(v)
            except TypeError:
                if any(values_equal(v, u) for u in unhashable):
                    continue
                unhashable.append(v)
            out.append(v)
        return out

