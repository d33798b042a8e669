# chartdata/core/errors.py
from __future__ import annotations

from typing import Any, Mapping, Optional


__all__ = [
    # Base
    "ChartDataError",
    "ChartDataWarning",
    "WithContext",
    # Construction
    "InvalidInputError",
    # Columns
    "ColumnError",
    "UnresolvedColumnError",
    "ColumnTypeMismatchError",
    "EmptySelectionError",
    # Warnings
    "HeaderWidthWarning",
]


class WithContext:
    """
    Mixin to attach structured context to exceptions for diagnostics.
    """

    def __init__(self, *args: object, context: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        super().__init__(*args)  # type: ignore[misc]
        self.context: Mapping[str, Any] = dict(context or {})


# Base -------------------------------------------------------------------------

class ChartDataError(WithContext, Exception):
    """Base class for all chartdata errors."""


class ChartDataWarning(Warning):
    """Base class for chartdata warnings."""


# Construction -----------------------------------------------------------------

class InvalidInputError(ChartDataError):
    """Rows or headers were not given as an ordered sequence."""


# Columns ----------------------------------------------------------------------

class ColumnError(ChartDataError):
    """Base for column resolution and column value errors."""


class UnresolvedColumnError(ColumnError):
    """An accessor was invoked for a column that never resolved."""


class ColumnTypeMismatchError(ColumnError):
    """Column values cannot be ordered or summed against each other."""


class EmptySelectionError(ColumnError):
    """An operation over several columns was given none."""


# Warnings ---------------------------------------------------------------------

class HeaderWidthWarning(ChartDataWarning):
    """Header count differs from the width of the first positional row."""
