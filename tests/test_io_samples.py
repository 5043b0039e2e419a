"""Unit tests for regkit.io.samples."""

from __future__ import annotations

import pytest
from numpy.testing import assert_allclose

from regkit.exceptions import ConfigurationError
from regkit.io.samples import read_samples


def test_read_samples_two_columns(line_csv):
    """Tests reading a headerless two-column CSV file."""
    xs, ys = read_samples(line_csv)
    assert_allclose(xs, [1.0, 2.0, 3.0, 4.0])
    assert_allclose(ys, [5.0, 8.0, 11.0, 14.0])


def test_read_samples_single_row(tmp_path):
    """Tests that a single sample is returned as length-1 arrays."""
    path = tmp_path / "one.csv"
    path.write_text("0.5,1.25\n")
    xs, ys = read_samples(path)
    assert xs.shape == (1,)
    assert ys.tolist() == [1.25]


def test_read_samples_custom_delimiter_and_comments(tmp_path):
    """Tests a whitespace-separated file with comment lines."""
    path = tmp_path / "data.txt"
    path.write_text("# x y\n1 2\n3 4\n")
    xs, ys = read_samples(path, delimiter=" ")
    assert xs.tolist() == [1.0, 3.0]
    assert ys.tolist() == [2.0, 4.0]


def test_read_samples_empty_file(tmp_path):
    """Tests that an empty file raises ConfigurationError."""
    path = tmp_path / "empty.csv"
    path.write_text("")
    with pytest.raises(ConfigurationError, match="no samples"):
        read_samples(path)


def test_read_samples_wrong_column_count(tmp_path):
    """Tests that files without exactly two columns are rejected."""
    path = tmp_path / "three.csv"
    path.write_text("1,2,3\n4,5,6\n")
    with pytest.raises(ConfigurationError, match="two columns"):
        read_samples(path)


def test_read_samples_non_numeric(tmp_path):
    """Tests that non-numeric fields raise ValueError."""
    path = tmp_path / "bad.csv"
    path.write_text("1,chickens\n")
    with pytest.raises(ValueError):
        read_samples(path)


def test_read_samples_missing_file(tmp_path):
    """Tests that a missing file raises OSError."""
    with pytest.raises(OSError):
        read_samples(tmp_path / "missing.csv")
