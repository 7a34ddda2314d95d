"""
FARS Year Handling (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/years.py

Coercion Rule:
    A year (or state code) may arrive as an ``int``, a ``float`` or a
    numeral string such as ``"2014"``.  ``coerce_int`` normalises all of
    them to ``int`` and returns ``None`` – the undefined sentinel – for
    anything that cannot be read as an integer.  Coercion never raises;
    an undefined year only becomes an error when a file is actually read
    for it.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Optional

import pandas as pd

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Placeholder rendered for an undefined year
NA_TEXT: str = "NA"

# Columns kept by the per-year projection
_PROJECTED_COLUMNS = ["MONTH", "year"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def coerce_int(value: Any) -> Optional[int]:
    """
    Coerce *value* to ``int``, returning ``None`` when it cannot be.

    Floats (and numeral strings holding floats) are truncated toward zero.
    Booleans, ``None``, NaN and infinities are undefined.

    Args:
        value: Integer, float, numeral string or anything else.

    Returns:
        The integer, or ``None`` for the undefined sentinel.

    Example:
        >>> coerce_int("2014")
        2014
        >>> coerce_int(" 2013.0 ")
        2013
        >>> coerce_int("bogus") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, numbers.Integral):
        return int(value)

    if isinstance(value, numbers.Real):
        return _truncate(float(value))

    if isinstance(value, bytes):
        value = value.decode("ascii", errors="replace")

    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return _truncate(float(text))
        except ValueError:
            return None

    return None


def coerce_year(year: Any) -> Optional[int]:
    """Coerce a requested year; see ``coerce_int``."""
    return coerce_int(year)


def format_year(year: Optional[int]) -> str:
    """Render a coerced year, using ``NA`` for the undefined sentinel."""
    return NA_TEXT if year is None else str(year)


def year_tag(year: Any) -> Any:
    """Return the value rows of *year* are tagged with (see ``tag_year``)."""
    coerced = coerce_year(year)
    return coerced if coerced is not None else year


def tag_year(df: pd.DataFrame, year: Any) -> pd.DataFrame:
    """
    Tag every record with *year* and project to ``[MONTH, year]``.

    The tag is the coerced integer year when coercion succeeds, otherwise
    the raw requested value.

    Args:
        df: One year's accident records.  Must contain ``MONTH``.
        year: The requested year value.

    Returns:
        New two-column DataFrame ``[MONTH, year]``, same row count as *df*.

    Raises:
        KeyError: If *df* has no ``MONTH`` column.
    """
    if "MONTH" not in df.columns:
        raise KeyError("MONTH")

    projected = df.assign(year=year_tag(year))
    return projected.loc[:, _PROJECTED_COLUMNS].reset_index(drop=True)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _truncate(value: float) -> Optional[int]:
    if math.isnan(value) or math.isinf(value):
        return None
    return int(value)
