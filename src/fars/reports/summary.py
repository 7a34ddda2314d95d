"""
FARS Summary Output (Imperative Shell)

Writes a SummaryTable produced by ``fars.data.years.summarize_years`` to
disk.  ``.html`` paths get an HTML table; anything else is written as CSV.

Package Location: src/fars/reports/summary.py
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..data.reader import PathLike

log = logging.getLogger(__name__)


def write_summary(table: pd.DataFrame, path: PathLike) -> Path:
    """
    Save *table* as CSV, or as HTML when *path* ends in ``.html``.

    Missing (month, year) cells are written as empty CSV fields.  Parent
    directories are created as needed.

    Args:
        table: SummaryTable with a ``MONTH`` column and one column per year.
        path: Destination file.

    Returns:
        The written path.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    if out.suffix.lower() in ('.html', '.htm'):
        out.write_text(
            table.to_html(index=False, na_rep=''), encoding='utf-8'
        )
    else:
        table.to_csv(out, index=False, na_rep='')

    log.info(f"Summary written to {out}", extra={"path": str(out)})
    return out
