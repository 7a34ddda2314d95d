"""
Shared fixtures: small bz2-compressed FARS accident files.

``fars_dir`` writes ``accident_2013.csv.bz2`` and ``accident_2015.csv.bz2``
into a temporary directory and makes it the working directory, so every
lookup relative to cwd finds them.  2014 is deliberately absent.
"""

import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd
import pytest

COLUMNS = ["ST_CASE", "STATE", "MONTH", "LONGITUD", "LATITUDE", "FATALS"]

ROWS_2013: List[Dict] = [
    {"ST_CASE": 10001, "STATE": 1, "MONTH": 1, "LONGITUD": -86.5, "LATITUDE": 32.1, "FATALS": 1},
    {"ST_CASE": 10002, "STATE": 1, "MONTH": 1, "LONGITUD": 999.9999, "LATITUDE": 99.9999, "FATALS": 2},
    {"ST_CASE": 10003, "STATE": 1, "MONTH": 2, "LONGITUD": -87.0, "LATITUDE": 33.0, "FATALS": 1},
    {"ST_CASE": 60001, "STATE": 6, "MONTH": 3, "LONGITUD": -120.0, "LATITUDE": 37.0, "FATALS": 1},
    {"ST_CASE": 60002, "STATE": 6, "MONTH": 3, "LONGITUD": 901.0, "LATITUDE": 36.5, "FATALS": 3},
]

ROWS_2015: List[Dict] = [
    {"ST_CASE": 10001, "STATE": 1, "MONTH": 1, "LONGITUD": -86.9, "LATITUDE": 32.5, "FATALS": 1},
    {"ST_CASE": 10002, "STATE": 1, "MONTH": 4, "LONGITUD": -85.8, "LATITUDE": 31.2, "FATALS": 1},
    {"ST_CASE": 490001, "STATE": 49, "MONTH": 12, "LONGITUD": -111.9, "LATITUDE": 40.7, "FATALS": 2},
]


def write_year(directory: Path, year, rows: List[Dict]) -> Path:
    """Write *rows* as ``accident_<year>.csv.bz2`` inside *directory*."""
    path = Path(directory) / f"accident_{year}.csv.bz2"
    pd.DataFrame(rows, columns=COLUMNS).to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding the 2013 and 2015 files (cwd unchanged)."""
    write_year(tmp_path, 2013, ROWS_2013)
    write_year(tmp_path, 2015, ROWS_2015)
    return tmp_path


@pytest.fixture
def fars_dir(data_dir: Path, monkeypatch) -> Path:
    """Same files as ``data_dir``, with cwd switched into it."""
    monkeypatch.chdir(data_dir)
    return data_dir


@pytest.fixture
def make_year():
    """Factory fixture: ``make_year(directory, year, rows)``."""
    return write_year


@pytest.fixture(autouse=True)
def _reset_fars_logging():
    """Undo ``configure_logging`` calls made by CLI tests."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "_fars_handler", False):
            root.removeHandler(handler)
    root.setLevel(level)
