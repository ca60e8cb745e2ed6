"""
Configuration constants for the FARS toolkit.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Union

# ======================================================
#  FILES
# ======================================================
FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"

# Overrides the current working directory as the default data location
DATA_DIR_ENV: str = "FARS_DATA_DIR"

# ======================================================
#  COLUMNS
# ======================================================
MONTH_COL: str = "MONTH"
YEAR_COL: str = "year"
STATE_COL: str = "STATE"
LONGITUDE_COL: str = "LONGITUD"
LATITUDE_COL: str = "LATITUDE"

# Column name -> pandas dtype required by each pipeline
# Nullable integers: a blank cell keeps its row instead of failing the cast
SUMMARY_SCHEMA: Dict[str, str] = {
    MONTH_COL: "Int64",
}

MAP_SCHEMA: Dict[str, str] = {
    STATE_COL: "Int64",
    LONGITUDE_COL: "float64",
    LATITUDE_COL: "float64",
}

# ======================================================
#  SENTINELS
# ======================================================
# Coordinates above these thresholds are FARS codes for "not recorded"
# (e.g. 999.9999 / 99.9999), not real positions.
LONGITUDE_SENTINEL: float = 900.0
LATITUDE_SENTINEL: float = 90.0


def resolve_data_dir(data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return the directory accident files are read from.

    The lookup order is:

    1. The explicit ``data_dir`` argument.
    2. The ``FARS_DATA_DIR`` environment variable, if set.
    3. The current working directory.
    """
    if data_dir is not None:
        return Path(data_dir).expanduser()

    env = os.getenv(DATA_DIR_ENV)
    if env:
        return Path(env).expanduser()

    return Path.cwd()
