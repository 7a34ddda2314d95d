"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: cleaned longitude/latitude sequences + axis ranges.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Missing Value Rule:
    A point is drawn only when both its longitude and latitude are present.
    Pairs with either coordinate missing (NaN/None) are skipped, never
    plotted at a placeholder position.

Viewport:
    The map is bounded by the ranges supplied by the caller (normally the
    data's own coordinate range), not by a fixed state outline.  A range of
    ``None`` leaves that axis to plotly's automatic fit.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objects as go

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# plotly geo scope used for the outline layer
DEFAULT_SCOPE: str = 'usa'

_MARKER_STYLE = {'color': 'black', 'size': 3, 'symbol': 'circle'}

# Degrees of padding added on each side of a supplied range
_RANGE_PAD: float = 0.25


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    longitude: Sequence[float],
    latitude: Sequence[float],
    scope: str = DEFAULT_SCOPE,
    lon_range: Optional[Tuple[float, float]] = None,
    lat_range: Optional[Tuple[float, float]] = None,
    title: str = '',
) -> go.Figure:
    """
    Build a geographic scatter of accident locations.

    One marker per (longitude, latitude) pair with both values present,
    drawn over state outlines.

    Args:
        longitude: Longitudes in degrees; NaN marks a missing value.
        latitude: Latitudes in degrees, aligned with *longitude*.
        scope: plotly geo scope naming the outline region.
        lon_range: ``(min, max)`` longitude bounds, or ``None``.
        lat_range: ``(min, max)`` latitude bounds, or ``None``.
        title: Figure title.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If *longitude* and *latitude* differ in length.
    """
    lon, lat = _complete_pairs(longitude, latitude)

    fig = go.Figure(
        go.Scattergeo(
            lon=lon,
            lat=lat,
            mode='markers',
            marker=_MARKER_STYLE,
            hovertemplate='%{lat:.4f}, %{lon:.4f}<extra></extra>',
            showlegend=False,
        )
    )

    geo = dict(
        scope=scope,
        showland=True,
        landcolor='rgb(245, 245, 245)',
        showsubunits=True,
        subunitcolor='rgb(120, 120, 120)',
        showcountries=True,
    )
    if lon_range is None and lat_range is None and scope == 'usa':
        geo['projection'] = dict(type='albers usa')
    else:
        # albers usa ignores axis ranges
        geo['projection'] = dict(type='mercator')
    if lon_range is not None:
        geo['lonaxis'] = dict(range=_pad(lon_range))
    if lat_range is not None:
        geo['lataxis'] = dict(range=_pad(lat_range))

    fig.update_layout(
        title=dict(text=title, x=0.5),
        geo=geo,
        margin=dict(l=10, r=10, t=50 if title else 10, b=10),
        template='plotly_white',
    )
    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _complete_pairs(
    longitude: Sequence[float], latitude: Sequence[float]
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Drop pairs where either coordinate is missing.

    Raises:
        ValueError: On length mismatch.
    """
    lon = pd.to_numeric(pd.Series(list(longitude), dtype=object), errors='coerce')
    lat = pd.to_numeric(pd.Series(list(latitude), dtype=object), errors='coerce')
    if len(lon) != len(lat):
        raise ValueError(
            f"longitude and latitude differ in length: {len(lon)} != {len(lat)}"
        )
    keep = lon.notna() & lat.notna()
    return lon[keep].to_numpy(dtype=float), lat[keep].to_numpy(dtype=float)


def _pad(bounds: Tuple[float, float]) -> list[float]:
    lo, hi = bounds
    return [float(lo) - _RANGE_PAD, float(hi) + _RANGE_PAD]
