"""
Unit tests for map_state orchestration.

Tests cover:
- Missing file and invalid state abort the call
- Empty subset logs a notice and never draws
- Sentinel coordinates reach the renderer as missing
- Ranges passed to the renderer come from the data
"""

import logging
import math

import pandas as pd
import plotly.graph_objects as go
import pytest

from fars.analysis.geo import InvalidStateError
from fars.data.reader import MissingFileError
from fars.reports import maps
from fars.reports.maps import map_state


class RecordingDraw:
    """Fake renderer that records its arguments."""

    def __init__(self):
        self.calls = []

    def __call__(self, longitude, latitude, **kwargs):
        self.calls.append({
            "lon": list(longitude),
            "lat": list(latitude),
            **kwargs,
        })
        return "drawn"


class TestMapStateErrors:
    """Test fatal paths."""

    def test_missing_year_is_fatal(self, fars_dir):
        draw = RecordingDraw()

        with pytest.raises(MissingFileError):
            map_state(1, 2014, draw=draw)

        assert draw.calls == []

    def test_bad_year_is_fatal(self, fars_dir):
        with pytest.raises(MissingFileError, match="accident_NA.csv.bz2"):
            map_state(1, "bogus", draw=RecordingDraw())

    def test_invalid_state(self, fars_dir):
        draw = RecordingDraw()

        with pytest.raises(InvalidStateError, match="invalid STATE number: 49"):
            map_state(49, 2013, draw=draw)

        assert draw.calls == []


class TestMapStateEmpty:
    """Test the no-op path."""

    def test_empty_subset_does_not_draw(self, fars_dir, monkeypatch, caplog):
        def _empty(df, state_num):
            return df.iloc[0:0].copy()

        monkeypatch.setattr(maps, "select_state", _empty)
        draw = RecordingDraw()

        with caplog.at_level(logging.INFO, logger="fars.reports.maps"):
            result = map_state(1, 2013, draw=draw)

        assert result is None
        assert draw.calls == []
        assert "no accidents to plot" in caplog.text


class TestMapStateRender:
    """Test the cleaned data handed to the renderer."""

    def test_sentinel_longitude_passed_as_missing(self, fars_dir):
        draw = RecordingDraw()

        result = map_state(6, 2013, draw=draw)

        assert result == "drawn"
        (call,) = draw.calls
        assert call["lon"][0] == -120.0
        assert math.isnan(call["lon"][1])
        assert call["lat"] == [37.0, 36.5]

    def test_ranges_skip_missing(self, fars_dir):
        draw = RecordingDraw()

        map_state("1", "2013", draw=draw)

        (call,) = draw.calls
        assert len(call["lon"]) == 3
        assert call["lon_range"] == pytest.approx((-87.0, -86.5))
        assert call["lat_range"] == pytest.approx((32.1, 33.0))
        assert call["scope"] == "usa"
        assert "2013" in call["title"]

    def test_dataset_on_disk_unchanged(self, fars_dir):
        """Test cleaning does not leak back into a fresh read."""
        map_state(6, 2013, draw=RecordingDraw())

        df = pd.read_csv(fars_dir / "accident_2013.csv.bz2")
        assert 901.0 in df["LONGITUD"].tolist()

    def test_explicit_data_dir(self, data_dir):
        draw = RecordingDraw()
        map_state(49, 2015, data_dir=data_dir, draw=draw)
        assert draw.calls[0]["lon"] == pytest.approx([-111.9])

    def test_default_renderer_returns_figure(self, fars_dir):
        fig = map_state(1, 2013)

        assert isinstance(fig, go.Figure)
        # 999.9999 / 99.9999 record is dropped from the plot
        assert len(fig.data[0].lon) == 2
