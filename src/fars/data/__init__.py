"""
FARS Data Package (Imperative Shell)

This package handles all file I/O and batch orchestration for the
FARS tools.

Modules:
- reader: Filename resolution and single-file loading
- years:  Per-year projection, failure-isolated batches, monthly summary
"""

from .reader import (
    FILENAME_TEMPLATE,
    MissingFileError,
    fars_read,
    make_filename,
    resolve_path,
)

from .years import (
    YearResult,
    project_year,
    read_year,
    read_years,
    summarize_years,
)

__all__ = [
    # Reader
    'FILENAME_TEMPLATE',
    'MissingFileError',
    'fars_read',
    'make_filename',
    'resolve_path',
    # Years
    'YearResult',
    'project_year',
    'read_year',
    'read_years',
    'summarize_years',
]
