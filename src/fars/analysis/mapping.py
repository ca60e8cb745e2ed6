"""
FARS State Accident Locations (Functional Core)

Pure functions only. No I/O, no drawing.
Selects one state's accidents from a yearly dataset and cleans their
coordinates so the plotting layer only ever sees real positions.

Package Location: src/fars/analysis/mapping.py

Sentinel Rule:
    FARS encodes "location not recorded" as out-of-range coordinates
    (LONGITUD 999.9999 / 888.8888, LATITUDE 99.9999 / 88.8888).  Any
    LONGITUD above 900 or LATITUDE above 90 is replaced with NaN.  The
    row itself is kept; it is simply not drawn and does not widen the
    map extent.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pandas as pd

from ..config import (
    LATITUDE_COL,
    LATITUDE_SENTINEL,
    LONGITUDE_COL,
    LONGITUDE_SENTINEL,
    MAP_SCHEMA,
    STATE_COL,
)
from .schema import conform_records

Bounds = Tuple[Tuple[float, float], Tuple[float, float]]


class InvalidStateError(ValueError):
    """Raised when a state code does not occur in the dataset."""
    pass


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def state_points(df: pd.DataFrame, state_num) -> pd.DataFrame:
    """
    Return the accidents of one state with sentinel coordinates cleared.

    Args:
        df: Raw yearly accident DataFrame.  Must contain ``STATE``,
            ``LONGITUD`` and ``LATITUDE``; other columns pass through.
        state_num: State code; coerced with ``int()``.

    Returns:
        Subset of *df* for the state, index preserved, with
        ``LONGITUD`` / ``LATITUDE`` sentinels replaced by NaN.  May be
        empty.

    Raises:
        SchemaMismatchError: If a required column is missing or untyped.
        InvalidStateError: If *state_num* is not in the ``STATE`` column.
    """
    state_num = int(state_num)
    records = conform_records(df, MAP_SCHEMA)

    # Rows with a blank STATE never match
    in_state = records[STATE_COL].eq(state_num).fillna(False).astype(bool)
    if not in_state.any():
        raise InvalidStateError(f"invalid STATE number: {state_num}")

    subset = records[in_state]
    return sanitize_coordinates(subset)


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace out-of-range coordinate sentinels with NaN.

    Args:
        df: DataFrame with float ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        Copy of *df* with ``LONGITUD > 900`` and ``LATITUDE > 90`` set
        to NaN.
    """
    out = df.copy()
    out[LONGITUDE_COL] = out[LONGITUDE_COL].mask(
        out[LONGITUDE_COL] > LONGITUDE_SENTINEL, np.nan
    )
    out[LATITUDE_COL] = out[LATITUDE_COL].mask(
        out[LATITUDE_COL] > LATITUDE_SENTINEL, np.nan
    )
    return out


def plottable_points(df: pd.DataFrame) -> pd.DataFrame:
    """Rows with both a valid longitude and a valid latitude."""
    return df.dropna(subset=[LONGITUDE_COL, LATITUDE_COL])


def coordinate_bounds(df: pd.DataFrame) -> Optional[Bounds]:
    """
    Compute the latitude and longitude ranges of *df*, ignoring NaN.

    Each axis is ranged independently, so a row with only a valid
    latitude still counts toward the latitude range.

    Returns:
        ``((lat_min, lat_max), (lon_min, lon_max))``, or ``None`` if
        either axis has no valid value.
    """
    lat = df[LATITUDE_COL].dropna()
    lon = df[LONGITUDE_COL].dropna()

    if lat.empty or lon.empty:
        return None

    return (
        (float(lat.min()), float(lat.max())),
        (float(lon.min()), float(lon.max())),
    )
