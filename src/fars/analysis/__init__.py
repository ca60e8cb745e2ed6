"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames (or per-year results wrapping them)
and return transformed data.

Modules:
- schema:  Required-column checks and dtype casting
- summary: Month x year accident count table
- mapping: State selection and coordinate sentinel cleanup
"""

from .schema import (
    SchemaMismatchError,
    conform_records,
    missing_columns,
)

from .summary import (
    YearResult,
    successful_tables,
    summarize_months,
)

from .mapping import (
    InvalidStateError,
    state_points,
    sanitize_coordinates,
    plottable_points,
    coordinate_bounds,
)

__all__ = [
    # Schema
    'SchemaMismatchError',
    'conform_records',
    'missing_columns',
    # Summary
    'YearResult',
    'successful_tables',
    'summarize_months',
    # Mapping
    'InvalidStateError',
    'state_points',
    'sanitize_coordinates',
    'plottable_points',
    'coordinate_bounds',
]
