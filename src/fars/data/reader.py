"""
FARS Data Reader (Imperative Shell)

Resolves yearly dataset filenames and loads one year's accident file into
a DataFrame.

Package Location: src/fars/data/reader.py

File layout:
    One bz2-compressed CSV per year named ``accident_<year>.csv.bz2``,
    looked up relative to the current working directory at call time (or
    an explicit ``data_dir``).  Required columns are ``STATE``, ``MONTH``,
    ``LONGITUD`` and ``LATITUDE``; any other columns are carried along
    untouched.
"""

from __future__ import annotations

import errno
import logging
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd

from ..analysis.years import coerce_year, format_year

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"

PathLike = Union[str, Path]


class MissingFileError(FileNotFoundError):
    """
    Raised when a requested dataset file does not exist.

    Attributes:
        filename: The path that was requested, as given by the caller.
    """

    def __init__(self, filename: PathLike) -> None:
        super().__init__(
            errno.ENOENT, f"file '{filename}' does not exist", str(filename)
        )

    def __str__(self) -> str:
        return self.strerror


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: Any) -> str:
    """
    Map a year value to its canonical dataset filename.

    Never raises: a year that cannot be coerced to ``int`` produces
    ``accident_NA.csv.bz2``, which then fails at read time.

    Args:
        year: ``int`` or numeral string, e.g. ``2014`` or ``"2014"``.

    Returns:
        Filename string without any directory component.

    Example:
        >>> make_filename("2014")
        'accident_2014.csv.bz2'
    """
    return FILENAME_TEMPLATE.format(year=format_year(coerce_year(year)))


def resolve_path(year: Any, data_dir: Optional[PathLike] = None) -> Path:
    """
    Return the path of *year*'s dataset, inside *data_dir* when given.

    The result is relative (to the working directory at read time) when
    *data_dir* is ``None``.
    """
    filename = make_filename(year)
    if data_dir is None:
        return Path(filename)
    return Path(data_dir) / filename


def fars_read(filename: PathLike) -> pd.DataFrame:
    """
    Load one FARS dataset file.

    The file is decompressed and parsed in one step by ``pandas.read_csv``;
    no progress output is produced.  The file handle is opened and closed
    inside this call.

    Args:
        filename: Path to a ``.csv.bz2`` file.

    Returns:
        DataFrame with one row per data row of the file.

    Raises:
        MissingFileError: If *filename* does not exist.
        pandas.errors.ParserError / EmptyDataError / OSError: If the file
            exists but cannot be decompressed or parsed.
    """
    path = Path(filename)
    if not path.is_file():
        raise MissingFileError(filename)

    log.debug("Reading %s", path, extra={"path": str(path)})
    return pd.read_csv(path, compression="bz2", low_memory=False)
