"""
FARS Record Schema (Functional Core)

Pure functions only. No I/O.

Raw accident files are loosely typed: pandas infers column dtypes from
whatever the file contains.  Each pipeline declares the columns it
depends on as a ``{name: dtype}`` mapping (see ``fars.config``) and
passes the raw DataFrame through :func:`conform_records` before using
them.  Columns outside the schema pass through untouched.

Package Location: src/fars/analysis/schema.py
"""

from __future__ import annotations

from typing import Dict, List

import pandas as pd


class SchemaMismatchError(ValueError):
    """
    Raised when a DataFrame does not satisfy a record schema.

    Raised when:
    - Required columns are absent
    - A required column cannot be cast to its declared dtype
    """
    pass


def missing_columns(df: pd.DataFrame, schema: Dict[str, str]) -> List[str]:
    """Return schema columns absent from *df*, in schema order."""
    return [col for col in schema if col not in df.columns]


def conform_records(df: pd.DataFrame, schema: Dict[str, str]) -> pd.DataFrame:
    """
    Check *df* against *schema* and cast the schema columns.

    Args:
        df: Raw accident DataFrame.
        schema: Mapping of required column name to pandas dtype string.

    Returns:
        A copy of *df* with every schema column cast to its dtype.

    Raises:
        SchemaMismatchError: If columns are missing or cannot be cast.
    """
    missing = missing_columns(df, schema)
    if missing:
        raise SchemaMismatchError(
            f"records are missing required columns: {missing}"
        )

    out = df.copy()
    bad: List[str] = []
    for col, dtype in schema.items():
        try:
            out[col] = out[col].astype(dtype)
        except (ValueError, TypeError):
            bad.append(col)

    if bad:
        expected = {col: schema[col] for col in bad}
        raise SchemaMismatchError(
            f"columns cannot be cast to their schema dtypes: {expected}"
        )

    return out
