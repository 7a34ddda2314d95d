"""
FARS State Geography (Functional Core)

Pure functions only. No I/O, no plotting.

Package Location: src/fars/analysis/geo.py

Sentinel Rule:
    FARS codes an unknown location with in-domain placeholders rather than
    blanks: ``LONGITUD`` values above 900 (999.9999) and
    ``LATITUDE`` values above 90 (99.9999).  These must
    become NaN before any range is computed or any point is drawn.
    ``clean_coordinates`` does this on a copy so the caller's frame is
    never touched.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Tuple

import numpy as np
import pandas as pd

from .years import NA_TEXT, coerce_int

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

LONGITUDE_SENTINEL: float = 900.0
LATITUDE_SENTINEL: float = 90.0


class InvalidStateError(ValueError):
    """Raised when a state code is absent from a dataset's STATE values."""

    def __init__(self, state: Optional[int]) -> None:
        self.state = state
        label = NA_TEXT if state is None else state
        super().__init__(f"invalid STATE number: {label}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_state(df: pd.DataFrame, state_num: Any) -> pd.DataFrame:
    """
    Validate *state_num* against ``df['STATE']`` and return matching rows.

    Args:
        df: One year's accident records with a ``STATE`` column.
        state_num: State code as ``int`` or numeral string.

    Returns:
        Copy of the rows whose ``STATE`` equals the coerced code.  May be
        empty only if the dataset itself is inconsistent; callers treat an
        empty result as "nothing to plot", not as an error.

    Raises:
        InvalidStateError: If the code cannot be coerced or does not occur
            in ``df['STATE']``.
    """
    state = coerce_int(state_num)
    if state is None or state not in set(df["STATE"].dropna().unique()):
        raise InvalidStateError(state)

    return df.loc[df["STATE"] == state].copy()


def clean_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel ``LONGITUD``/``LATITUDE`` values with NaN.

    Args:
        df: Records with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        New DataFrame; both coordinate columns are ``float`` with sentinels
        converted to NaN.  Genuine blanks from the file stay NaN.
    """
    out = df.copy()
    lon = pd.to_numeric(out["LONGITUD"], errors="coerce").astype(float)
    lat = pd.to_numeric(out["LATITUDE"], errors="coerce").astype(float)

    out["LONGITUD"] = lon.mask(lon > LONGITUDE_SENTINEL, np.nan)
    out["LATITUDE"] = lat.mask(lat > LATITUDE_SENTINEL, np.nan)
    return out


def coordinate_range(values: pd.Series) -> Optional[Tuple[float, float]]:
    """
    Return ``(min, max)`` of *values* ignoring NaN.

    Returns:
        The range, or ``None`` when every value is missing.
    """
    lo = values.min(skipna=True)
    hi = values.max(skipna=True)
    if pd.isna(lo) or pd.isna(hi) or math.isinf(lo) or math.isinf(hi):
        return None
    return float(lo), float(hi)
