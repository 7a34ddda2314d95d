"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept data structures (DataFrames, scalars) and
return transformed data.

Modules:
- years:   Year/state code coercion and the per-year MONTH projection
- summary: Month-by-year fatality counts (bind, group, pivot)
- geo:     State validation, filtering and coordinate sentinel cleanup
"""

from .years import (
    NA_TEXT,
    coerce_int,
    coerce_year,
    format_year,
    tag_year,
    year_tag,
)

from .summary import (
    EmptyAggregationError,
    bind_years,
    count_by_month,
    summarize_counts,
)

from .geo import (
    InvalidStateError,
    LATITUDE_SENTINEL,
    LONGITUDE_SENTINEL,
    clean_coordinates,
    coordinate_range,
    select_state,
)

__all__ = [
    # Years
    'NA_TEXT',
    'coerce_int',
    'coerce_year',
    'format_year',
    'tag_year',
    'year_tag',
    # Summary
    'EmptyAggregationError',
    'bind_years',
    'count_by_month',
    'summarize_counts',
    # Geo
    'InvalidStateError',
    'LATITUDE_SENTINEL',
    'LONGITUDE_SENTINEL',
    'clean_coordinates',
    'coordinate_range',
    'select_state',
]
