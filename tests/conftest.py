"""Shared fixtures: small FARS-style accident files written to tmp_path."""

import logging
from pathlib import Path

import pandas as pd
import pytest

# STATE 1 = Alabama, 6 = California
ACCIDENTS_2013 = pd.DataFrame({
    'ST_CASE':  [10001, 10002, 10003, 60001],
    'STATE':    [1, 1, 1, 6],
    'MONTH':    [1, 1, 2, 3],
    'DAY':      [4, 19, 7, 22],
    'LATITUDE': [32.5, 99.9999, 33.0, 37.0],
    'LONGITUD': [-86.5, 999.9999, -87.0, -120.0],
    'FATALS':   [1, 2, 1, 1],
})

ACCIDENTS_2014 = pd.DataFrame({
    'ST_CASE':  [10001, 60001, 60002, 10002],
    'STATE':    [1, 6, 6, 1],
    'MONTH':    [1, 2, 2, 5],
    'DAY':      [2, 11, 28, 30],
    'LATITUDE': [32.0, 34.0, 35.0, 34.0],
    'LONGITUD': [-86.0, -118.0, -119.0, 888.8888],
    'FATALS':   [1, 1, 3, 1],
})


def write_accidents(directory: Path, year: int, df: pd.DataFrame) -> Path:
    """Write *df* as ``accident_<year>.csv.bz2`` inside *directory*."""
    path = directory / f'accident_{year}.csv.bz2'
    df.to_csv(path, index=False, compression='bz2')
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding accident files for 2013 and 2014 only."""
    write_accidents(tmp_path, 2013, ACCIDENTS_2013)
    write_accidents(tmp_path, 2014, ACCIDENTS_2014)
    return tmp_path


@pytest.fixture(autouse=True)
def _no_data_dir_env(monkeypatch):
    """Keep a developer's FARS_DATA_DIR from leaking into tests."""
    monkeypatch.delenv('FARS_DATA_DIR', raising=False)


@pytest.fixture
def accidents_2013() -> pd.DataFrame:
    return ACCIDENTS_2013.copy()


@pytest.fixture
def writer():
    """Expose ``write_accidents`` to tests that need custom files."""
    return write_accidents


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    """Drop handlers the CLI installs so they do not outlive a test."""
    logger = logging.getLogger('fars')
    before = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in before:
            logger.removeHandler(handler)
    logger.setLevel(level)
