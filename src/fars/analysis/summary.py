"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is a sequence of per-year load results; output is a wide
month x year count table.

Package Location: src/fars/analysis/summary.py

Failed Years:
    The batch loader reports every requested year as a ``YearResult``,
    successful or not.  Only successful results are concatenated here;
    a year that failed to load contributes no column to the summary
    (it does not appear as an all-missing column).

    Rows whose MONTH is blank stay in the year table but are not
    counted: they belong to no month row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

import pandas as pd

from ..config import MONTH_COL, YEAR_COL


@dataclass(frozen=True)
class YearResult:
    """
    Outcome of loading one year of accident records.

    Attributes:
        year: Integer year that was requested.
        filename: Derived accident file name for *year*.
        data: ``[MONTH, year]`` DataFrame on success, else ``None``.
        error: Failure reason on failure, else ``None``.
    """

    year: int
    filename: str
    data: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None and self.error is None


def successful_tables(results: Iterable[YearResult]) -> List[pd.DataFrame]:
    """Return the ``data`` tables of successful results, in input order."""
    return [r.data for r in results if r.ok]


def summarize_months(results: Iterable[YearResult]) -> pd.DataFrame:
    """
    Count accidents per month for every successfully loaded year.

    Args:
        results: Per-year load results (see ``fars.data.read_years``).
            Each successful ``data`` frame has columns ``[MONTH, year]``.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with one column per
        year (ascending, columns axis named ``year``).  Values are
        nullable ``Int64`` counts; a (month, year) pair with no records
        is ``<NA>``, never ``0``.  Empty (but still indexed by
        ``MONTH``) when no year loaded.
    """
    tables = successful_tables(results)

    if not tables:
        empty = pd.DataFrame(index=pd.Index([], name=MONTH_COL, dtype="int64"))
        empty.columns.name = YEAR_COL
        return empty

    combined = pd.concat(tables, ignore_index=True)

    counts = (
        combined.groupby([YEAR_COL, MONTH_COL])
        .size()
        .rename("n")
        .reset_index()
    )

    wide = counts.pivot(index=MONTH_COL, columns=YEAR_COL, values="n")
    wide = wide.sort_index(axis=0).sort_index(axis=1)

    return wide.astype("Int64")
