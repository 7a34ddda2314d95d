"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is a sequence of per-year ``[MONTH, year]`` tables (``None`` for
years that produced no data); output is the wide SummaryTable.

Package Location: src/fars/analysis/summary.py

Shape of the SummaryTable::

       MONTH  2013  2014
    0      1  2230  2168
    1      2  1952  1893
    ...

One row per MONTH observed in any year, one ``Int64`` count column per
year.  A cell is ``<NA>`` when that month never occurred in that year.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import pandas as pd

from .years import year_tag


class EmptyAggregationError(ValueError):
    """
    Raised when no per-year table survived aggregation.

    Binding zero tables is not a valid summary; callers must see the
    failure rather than receive an empty frame.
    """
    pass


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def bind_years(tables: Sequence[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Vertically concatenate per-year tables, discarding ``None`` entries.

    Args:
        tables: Per-year ``[MONTH, year]`` tables, positionally aligned with
            the requested years.  ``None`` marks a year with no data.

    Returns:
        Single long DataFrame ``[MONTH, year]``.

    Raises:
        EmptyAggregationError: If no table remains after discarding ``None``.
    """
    frames: List[pd.DataFrame] = [t for t in tables if t is not None]
    if not frames:
        raise EmptyAggregationError(
            "no valid years to summarize: every requested year failed to load"
        )
    return pd.concat(frames, ignore_index=True)


def count_by_month(long_df: pd.DataFrame) -> pd.DataFrame:
    """
    Count rows per ``(year, MONTH)`` group.

    Records with a blank ``MONTH`` are counted in their own ``<NA>`` group
    rather than dropped.

    Returns:
        Long DataFrame with columns ``[year, MONTH, n]``.
    """
    months = pd.to_numeric(long_df["MONTH"], errors="coerce").astype("Int64")
    return (
        long_df.assign(MONTH=months)
        .groupby(["year", "MONTH"], sort=True, dropna=False)
        .size()
        .rename("n")
        .reset_index()
    )


def summarize_counts(
    tables: Sequence[Optional[pd.DataFrame]],
    years: Optional[Sequence[Any]] = None,
) -> pd.DataFrame:
    """
    Build the month-by-year SummaryTable from per-year projections.

    Steps: bind non-``None`` tables, count rows per ``(year, MONTH)``, then
    pivot years into columns.

    Args:
        tables: Output of ``read_years`` (``None`` for failed years).
        years: Requested years, positionally aligned with *tables*.  When
            given, every year whose table is not ``None`` gets a column,
            even one whose file held no rows.  Otherwise columns come from
            the ``year`` values present in the data.

    Returns:
        DataFrame with a ``MONTH`` column followed by one ``Int64`` count
        column per distinct year (ascending).  Rows are sorted by month,
        with a blank-month row last when any record lacks ``MONTH``.

    Raises:
        EmptyAggregationError: If every entry of *tables* is ``None`` or
            *tables* is empty.
        ValueError: If *years* and *tables* differ in length.
    """
    counts = count_by_month(bind_years(tables))

    if years is None:
        keys = list(counts["year"].unique())
    else:
        if len(years) != len(tables):
            raise ValueError(
                f"years and tables differ in length: {len(years)} != {len(tables)}"
            )
        keys = [year_tag(y) for y, t in zip(years, tables) if t is not None]
    columns = sorted(dict.fromkeys(keys))

    blank = counts["MONTH"].isna()
    wide = (
        counts.loc[~blank]
        .pivot(index="MONTH", columns="year", values="n")
        .reindex(columns=columns)
        .sort_index()
    )
    if blank.any():
        # blank-month records go in a trailing <NA> row
        na_counts = counts.loc[blank].set_index("year")["n"].reindex(columns)
        na_row = pd.DataFrame(
            [na_counts.to_numpy()], columns=columns, index=pd.Index([pd.NA])
        )
        wide = pd.concat([wide, na_row])

    wide = wide.astype("Int64")
    wide.columns.name = None
    wide.index = pd.Index(wide.index, dtype="Int64", name="MONTH")

    return wide.reset_index()
