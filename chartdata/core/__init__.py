# chartdata/core/__init__.py
"""
Core (pure logic) subpackage: dataset accessors, row shapes, type tags, extents, and errors.
Minimal re-exports so consumers can import from `chartdata.core` directly.
"""

# Errors
from .errors import (
    ChartDataError,
    ChartDataWarning,
    InvalidInputError,
    ColumnError,
    UnresolvedColumnError,
    ColumnTypeMismatchError,
    EmptySelectionError,
    HeaderWidthWarning,
)

# Types
from .types import (
    ColumnType,
    classify_value,
    is_missing,
    values_equal,
)

# Row shapes
from .shapes import (
    RowShape,
    EmptyRows,
    KeyedRows,
    StructuredRows,
    PositionalRows,
    detect_shape,
)

# Extents
from .extents import (
    Extent,
    reduce_extent,
    sum_values,
)

# Dataset
from .dataset import (
    AccessPolicy,
    Accessor,
    Dataset,
)

__all__ = [
    # errors
    "ChartDataError","ChartDataWarning","InvalidInputError","ColumnError",
    "UnresolvedColumnError","ColumnTypeMismatchError","EmptySelectionError",
    "HeaderWidthWarning",
    # types
    "ColumnType","classify_value","is_missing","values_equal",
    # shapes
    "RowShape","EmptyRows","KeyedRows","StructuredRows","PositionalRows","detect_shape",
    # extents
    "Extent","reduce_extent","sum_values",
    # dataset
    "AccessPolicy","Accessor","Dataset",
]
