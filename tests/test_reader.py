"""
Unit tests for filename resolution and single-file reading.

Tests cover:
- Canonical filename for int and string years
- NA placeholder for uncoercible years
- MissingFileError for absent files
- Row counts and repeatable reads of existing files
"""

from pathlib import Path

import pandas as pd
import pytest

from fars.data.reader import (
    MissingFileError,
    fars_read,
    make_filename,
    resolve_path,
)


class TestMakeFilename:
    """Test year → filename mapping."""

    @pytest.mark.parametrize("year", [2013, "2013", 2013.0, " 2013"])
    def test_valid_years(self, year):
        assert make_filename(year) == "accident_2013.csv.bz2"

    def test_uncoercible_year_uses_placeholder(self):
        """Test bad input yields the NA filename instead of raising."""
        assert make_filename("not-a-year") == "accident_NA.csv.bz2"
        assert make_filename(None) == "accident_NA.csv.bz2"

    def test_resolve_path_with_data_dir(self, tmp_path):
        assert resolve_path(2014, tmp_path) == tmp_path / "accident_2014.csv.bz2"

    def test_resolve_path_relative_by_default(self):
        assert resolve_path("2014") == Path("accident_2014.csv.bz2")


class TestFarsRead:
    """Test reading one dataset file."""

    def test_missing_file(self, tmp_path):
        """Test an absent file raises MissingFileError naming it."""
        missing = tmp_path / "accident_1999.csv.bz2"

        with pytest.raises(MissingFileError) as exc_info:
            fars_read(missing)

        assert exc_info.value.filename == str(missing)
        assert "does not exist" in str(exc_info.value)

    def test_missing_file_is_file_not_found(self, tmp_path):
        """Test callers catching FileNotFoundError also see it."""
        with pytest.raises(FileNotFoundError):
            fars_read(tmp_path / "nope.csv.bz2")

    def test_reads_all_rows(self, data_dir):
        df = fars_read(data_dir / "accident_2013.csv.bz2")

        assert isinstance(df, pd.DataFrame)
        assert len(df) == 5
        assert {"STATE", "MONTH", "LONGITUD", "LATITUDE"} <= set(df.columns)

    def test_relative_to_cwd(self, fars_dir):
        """Test a bare filename resolves against the working directory."""
        assert len(fars_read(make_filename(2015))) == 3

    def test_repeat_reads_identical(self, data_dir):
        """Test two reads of the same file give identical frames."""
        path = data_dir / "accident_2015.csv.bz2"
        pd.testing.assert_frame_equal(fars_read(path), fars_read(path))

    def test_corrupt_file_raises_os_error(self, tmp_path):
        """Test an undecodable file fails distinctly from a missing one."""
        path = tmp_path / "accident_2016.csv.bz2"
        path.write_bytes(b"this is not bzip2 data")

        with pytest.raises(OSError) as exc_info:
            fars_read(path)

        assert not isinstance(exc_info.value, MissingFileError)
