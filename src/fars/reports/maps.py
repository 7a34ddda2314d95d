"""
FARS State Map Report (Imperative Shell)

Thin orchestration layer: resolves a year → filename, reads the dataset,
calls the functional core to validate/filter/clean, then hands the
coordinates to a map-drawing collaborator.

Package Location: src/fars/reports/maps.py

Flow::

    Start → DataLoaded → Validated ─┬─ Filtered (empty)     → Done (no-op)
                                    └─ Filtered (non-empty) → Cleaned → Rendered

Unlike the multi-year summary, a missing file here is fatal:
``MissingFileError`` propagates to the caller unchanged.  An unknown state
code raises ``InvalidStateError``.  A state with no rows logs
``no accidents to plot`` and returns ``None`` without drawing.

Usage::

    from fars.reports.maps import map_state

    fig = map_state(49, 2014)
    if fig is not None:
        fig.write_html("state_49_2014.html")
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..analysis.geo import clean_coordinates, coordinate_range, select_state
from ..analysis.years import coerce_int, coerce_year, format_year
from ..data.reader import PathLike, fars_read, resolve_path
from ..plotting.state_map import DEFAULT_SCOPE, plot_state_map

log = logging.getLogger(__name__)


def map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[PathLike] = None,
    draw: Callable[..., Any] = plot_state_map,
) -> Optional[Any]:
    """
    Draw one marker per fatal accident in a state for a given year.

    Args:
        state_num: FARS state code as ``int`` or numeral string.
        year: Dataset year as ``int`` or numeral string.
        data_dir: Optional directory holding the yearly files.  Defaults to
            the current working directory.
        draw: Map-drawing collaborator.  Called as
            ``draw(longitude, latitude, scope=..., lon_range=...,
            lat_range=..., title=...)`` with sentinel coordinates already
            converted to NaN.  Defaults to ``plot_state_map``.

    Returns:
        Whatever *draw* returns (a plotly ``Figure`` by default), or
        ``None`` when the state has no accidents to plot.

    Raises:
        MissingFileError: If the year's dataset file does not exist.
        InvalidStateError: If the state code is not in the dataset.
    """
    data = fars_read(resolve_path(year, data_dir))

    subset = select_state(data, state_num)
    state = coerce_int(state_num)

    if subset.empty:
        log.info("no accidents to plot", extra={"state": state})
        return None

    cleaned = clean_coordinates(subset)
    lon = cleaned["LONGITUD"]
    lat = cleaned["LATITUDE"]

    label = format_year(coerce_year(year))
    log.info(
        f"Mapping {len(cleaned)} accidents for STATE {state} ({label})",
        extra={"state": state, "year": label, "points": len(cleaned)},
    )

    return draw(
        lon,
        lat,
        scope=DEFAULT_SCOPE,
        lon_range=coordinate_range(lon),
        lat_range=coordinate_range(lat),
        title=f"Fatal accidents – STATE {state}, {label}",
    )
