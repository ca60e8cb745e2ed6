"""
FARS Data Reader (Imperative Shell)

File-system access for the yearly FARS accident files.  Derives file
names from years, reads single files, and batch-loads several years
into ``YearResult`` values for the Functional Core.

Package Location: src/fars/data/reader.py

Failure policy:
    ``read_accidents`` raises immediately when a file is absent.
    ``read_years`` isolates each year: a missing, unparsable or
    schema-incompatible file becomes a failed ``YearResult`` and a
    warning naming the year, and the remaining years still load.
"""

from __future__ import annotations

import logging
import lzma
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from ..analysis.schema import SchemaMismatchError, conform_records
from ..analysis.summary import YearResult
from ..config import (
    FILENAME_TEMPLATE,
    MONTH_COL,
    SUMMARY_SCHEMA,
    YEAR_COL,
    resolve_data_dir,
)

log = logging.getLogger(__name__)

# Errors that mark a single year as unreadable without aborting a batch
_YEAR_LOAD_ERRORS = (
    OSError,
    EOFError,
    lzma.LZMAError,
    ValueError,
    pd.errors.ParserError,
    pd.errors.EmptyDataError,
    SchemaMismatchError,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year) -> str:
    """
    Build the accident file name for *year*.

    The year is coerced with ``int()``, so fractional years truncate
    (``2013.9`` -> ``accident_2013.csv.bz2``) and non-numeric input
    raises ``ValueError`` / ``TypeError``.

    Example::

        make_filename(2015)    # 'accident_2015.csv.bz2'
    """
    return FILENAME_TEMPLATE.format(year=int(year))


def read_accidents(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read one comma-separated accident file into a DataFrame.

    Compression is inferred from the suffix, so both ``.csv`` and
    ``.csv.bz2`` files are accepted.

    Args:
        path: Path to the accident file.

    Returns:
        DataFrame with one row per data line and the file's header as
        column names.

    Raises:
        FileNotFoundError: If *path* does not exist.  Checked before any
            read is attempted.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"file '{path}' does not exist")

    # low_memory=False: parse in one pass, no mixed-dtype warnings
    df = pd.read_csv(path, low_memory=False)

    log.debug(
        f"Read {len(df)} rows x {len(df.columns)} columns from {path.name}",
        extra={"path": str(path), "rows": len(df)},
    )
    return df


def read_years(
    years: Iterable,
    data_dir: Optional[Union[str, Path]] = None,
) -> List[YearResult]:
    """
    Load the ``[MONTH, year]`` projection of several accident years.

    Each year is handled independently: derive its file name, read it
    from *data_dir*, check the ``MONTH`` column, tag every row with the
    year, and keep only ``MONTH`` and ``year``.

    Args:
        years: Year values (anything ``int()`` accepts).
        data_dir: Directory holding the accident files.  Defaults to
            ``$FARS_DATA_DIR`` or the current working directory.

    Returns:
        One ``YearResult`` per input year, same order.  Failed years
        have ``data=None`` and an ``error`` message.
    """
    base_dir = resolve_data_dir(data_dir)
    results: List[YearResult] = []

    for year in years:
        results.append(_read_one_year(year, base_dir))

    loaded = sum(r.ok for r in results)
    log.info(
        f"Loaded {loaded}/{len(results)} accident years from {base_dir}",
        extra={"loaded": loaded, "requested": len(results)},
    )
    return results


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _read_one_year(year, base_dir: Path) -> YearResult:
    """Load a single year, converting read failures into a failed result."""
    try:
        year_int = int(year)
        filename = make_filename(year_int)
    except (TypeError, ValueError, OverflowError) as exc:
        log.warning(
            f"invalid year: {year}",
            extra={"year": str(year), "error": str(exc)},
        )
        return YearResult(year=year, filename="", error=str(exc))

    try:
        df = read_accidents(base_dir / filename)
        df = conform_records(df, SUMMARY_SCHEMA)
    except _YEAR_LOAD_ERRORS as exc:
        log.warning(
            f"invalid year: {year_int}",
            extra={"year": year_int, "error": str(exc)},
        )
        return YearResult(year=year_int, filename=filename, error=str(exc))

    df = df.assign(**{YEAR_COL: year_int})[[MONTH_COL, YEAR_COL]]
    return YearResult(year=year_int, filename=filename, data=df)
