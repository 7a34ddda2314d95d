"""
FARS Multi-Year Engine (Imperative Shell)

Reads several yearly files, projects each to ``[MONTH, year]`` and hands
the batch to the Functional Core (analysis/summary.py) for the
month-by-year count table.

Package Location: src/fars/data/years.py

Failure Isolation Rule:
    A year whose file is missing or unreadable must not abort the batch.
    ``project_year`` converts every read/projection failure into a
    ``YearResult`` carrying the reason instead of the table.  The batch is
    then folded in input order: each failed year logs exactly one
    ``invalid year: <year>`` warning and contributes ``None`` to the
    output list, which stays positionally aligned with the request.

    No state is shared between years, so with ``max_workers > 1`` the
    projections run on a thread pool; warnings are only emitted after the
    pool is joined, which keeps them in request order.
"""

from __future__ import annotations

import logging
import numbers
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

import pandas as pd

from .reader import PathLike, fars_read, resolve_path
from ..analysis.summary import summarize_counts
from ..analysis.years import tag_year

log = logging.getLogger(__name__)

# Failures that downgrade a year to "no data" instead of aborting
_YEAR_ERRORS = (OSError, EOFError, ValueError, KeyError)


@dataclass(frozen=True, eq=False)
class YearResult:
    """
    Outcome of projecting a single year.

    Exactly one of ``table`` / ``reason`` is set.

    Attributes:
        year: The year value as requested (not coerced).
        table: ``[MONTH, year]`` DataFrame on success.
        reason: Error text on failure.
    """

    year: Any
    table: Optional[pd.DataFrame] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.table is not None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def project_year(year: Any, data_dir: Optional[PathLike] = None) -> YearResult:
    """
    Resolve, read, tag and project one year without raising.

    Args:
        year: ``int`` or numeral string.
        data_dir: Optional directory holding the yearly files.  Defaults to
            the current working directory.

    Returns:
        ``YearResult`` with ``table`` set on success, ``reason`` otherwise.
    """
    path = resolve_path(year, data_dir)
    try:
        table = tag_year(fars_read(path), year)
    except _YEAR_ERRORS as exc:
        return YearResult(year=year, reason=f"{type(exc).__name__}: {exc}")
    return YearResult(year=year, table=table)


def read_year(year: Any, data_dir: Optional[PathLike] = None) -> Optional[pd.DataFrame]:
    """
    Project one year, logging a warning and returning ``None`` on failure.

    Args:
        year: ``int`` or numeral string.
        data_dir: Optional directory holding the yearly files.

    Returns:
        ``[MONTH, year]`` DataFrame, or ``None`` when the year has no data.
    """
    return _unwrap(project_year(year, data_dir))


def read_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
    max_workers: Optional[int] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Project every requested year, isolating failures per year.

    Args:
        years: Iterable of year values (duplicates allowed).  A bare scalar
            year is treated as a one-element batch.
        data_dir: Optional directory holding the yearly files.
        max_workers: When greater than 1, read years concurrently on that
            many threads.  Output and warning order still follow *years*.

    Returns:
        List aligned with *years*: a ``[MONTH, year]`` DataFrame per year,
        or ``None`` for each year that could not be read.

    Example::

        tables = read_years([2013, "bogus", 2015])
        # WARNING invalid year: bogus
        # tables[1] is None
    """
    requested = _as_list(years)

    if max_workers and max_workers > 1 and len(requested) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(
                pool.map(lambda y: project_year(y, data_dir), requested)
            )
    else:
        results = [project_year(y, data_dir) for y in requested]

    return [_unwrap(r) for r in results]


def summarize_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
    max_workers: Optional[int] = None,
) -> pd.DataFrame:
    """
    Count fatal accidents by month, one column per requested year.

    Args:
        years: Iterable of year values.
        data_dir: Optional directory holding the yearly files.
        max_workers: Passed through to ``read_years``.

    Returns:
        SummaryTable: ``MONTH`` column plus one ``Int64`` column per year.

    Raises:
        EmptyAggregationError: If no requested year could be read.
    """
    requested = _as_list(years)
    tables = read_years(requested, data_dir=data_dir, max_workers=max_workers)
    loaded = sum(t is not None for t in tables)
    log.info(
        f"Summarizing {loaded}/{len(tables)} years",
        extra={"loaded": loaded, "requested": len(tables)},
    )
    return summarize_counts(tables, requested)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _unwrap(result: YearResult) -> Optional[pd.DataFrame]:
    if result.ok:
        return result.table
    log.warning(
        f"invalid year: {result.year}",
        extra={"year": str(result.year), "reason": result.reason},
    )
    return None


def _as_list(years: Any) -> List[Any]:
    if isinstance(years, (str, bytes, numbers.Number)):
        return [years]
    return list(years)
